"""
cpe-wfn — unit tests for config loader

File: tests/unit/config/test_loader.py

Purpose
- Validate deterministic config loading from defaults, TOML, env overrides, and explicit overrides.

What this test file should cover
- Precedence: overrides > env > file > defaults.
- Env var name mapping and boolean coercion.
- Rejection of unknown keys, bad types, levels, and formats.
- Wiring of the effective config into Wfn construction and logging.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cpe_wfn.config import (
    ConfigLoadError,
    WfnConfig,
    dump_effective_config,
    load_config,
    merge_config,
    validate_config,
)
from cpe_wfn.domain.errors import ValidationErrorKind, WfnValidationError


def _write_config(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_defaults_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    loaded = load_config(environ={})
    assert loaded == WfnConfig()
    assert loaded.strict_lexical is False
    assert loaded.log_level == "WARNING"
    assert loaded.log_format == "text"


def test_default_file_in_working_directory_is_picked_up(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_config(tmp_path / "cpe_wfn.toml", "[validation]\nstrict_lexical = true\n")
    monkeypatch.chdir(tmp_path)
    assert load_config(environ={}).strict_lexical is True


def test_loader_precedence_default_file_env_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "cpe_wfn.toml"
    _write_config(
        config_path,
        """
[logging]
level = "info"
format = "json"
""".strip(),
    )

    file_loaded = load_config(config_path, environ={})
    env_loaded = load_config(config_path, environ={"CPE_WFN_LOGGING_LEVEL": "debug"})
    override_loaded = load_config(
        config_path,
        environ={"CPE_WFN_LOGGING_LEVEL": "debug"},
        overrides={"logging.level": "error"},
    )

    assert file_loaded.log_level == "INFO"
    assert file_loaded.log_format == "json"
    assert env_loaded.log_level == "DEBUG"
    assert override_loaded.log_level == "ERROR"
    assert override_loaded.log_format == "json"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), ("YES", True), ("on", True), ("0", False), ("off", False)],
)
def test_env_boolean_coercion(tmp_path: Path, raw: str, expected: bool) -> None:
    config_path = tmp_path / "cpe_wfn.toml"
    _write_config(config_path, "")
    loaded = load_config(config_path, environ={"CPE_WFN_VALIDATION_STRICT_LEXICAL": raw})
    assert loaded.strict_lexical is expected


def test_env_boolean_rejects_garbage(tmp_path: Path) -> None:
    config_path = tmp_path / "cpe_wfn.toml"
    _write_config(config_path, "")
    with pytest.raises(ConfigLoadError, match="CPE_WFN_VALIDATION_STRICT_LEXICAL"):
        load_config(config_path, environ={"CPE_WFN_VALIDATION_STRICT_LEXICAL": "maybe"})


def test_missing_explicit_file_and_invalid_toml(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError, match="not found"):
        load_config(tmp_path / "absent.toml", environ={})

    broken = tmp_path / "broken.toml"
    _write_config(broken, "[validation\n")
    with pytest.raises(ConfigLoadError, match="invalid TOML"):
        load_config(broken, environ={})


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("[matching]\nenabled = true\n", "unexpected fields"),
        ("[validation]\nstrict = true\n", "unexpected fields"),
        ("[validation]\nstrict_lexical = \"yes\"\n", "expected boolean"),
        ("[logging]\nlevel = \"chatty\"\n", "unsupported logging level"),
        ("[logging]\nformat = \"xml\"\n", "logging.format"),
        ("validation = 3\n", "expected table"),
    ],
)
def test_schema_rejects_bad_files(tmp_path: Path, text: str, message: str) -> None:
    config_path = tmp_path / "cpe_wfn.toml"
    _write_config(config_path, text)
    with pytest.raises(ConfigLoadError, match=message):
        load_config(config_path, environ={})


def test_merge_config_is_deep_and_non_mutating() -> None:
    base = {"logging": {"level": "INFO", "format": "text"}}
    merged = merge_config(base, {"logging": {"format": "json"}})
    assert merged == {"logging": {"level": "INFO", "format": "json"}}
    assert base == {"logging": {"level": "INFO", "format": "text"}}
    assert validate_config(merged).log_format == "json"


def test_dump_effective_config_is_deterministic() -> None:
    config = WfnConfig(strict_lexical=True, log_level="DEBUG", log_format="json")
    dumped = dump_effective_config(config)
    assert dumped == dump_effective_config(config)
    assert json.loads(dumped) == {
        "logging": {"format": "json", "level": "DEBUG"},
        "validation": {"strict_lexical": True},
    }


def test_config_builds_wfn_and_logging_config() -> None:
    strict = WfnConfig(strict_lexical=True, log_format="json")
    wfn = strict.new_wfn()
    assert wfn.strict
    with pytest.raises(WfnValidationError) as excinfo:
        wfn.set_version("1.0")
    assert excinfo.value.kind is ValidationErrorKind.UNQUOTED_CHARACTER

    logging_config = strict.logging_config()
    assert logging_config.json_lines is True
    assert logging_config.level == "WARNING"

    lenient = WfnConfig().new_wfn()
    lenient.set_version("1.0")
    assert lenient.get_version() == "1.0"
    assert WfnConfig().logging_config().json_lines is False
