"""
cpe-wfn — configuration schema and validation.

Purpose
- Define the configuration defaults and strict validation into ``WfnConfig``.

What this file covers
- Default tables for ``[validation]`` and ``[logging]``.
- Deterministic deep merge of layered payloads.

Functional requirements
- Reject unknown tables and keys with ``ConfigLoadError`` naming the field path.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO, Any, Final

from cpe_wfn.domain.wfn import Wfn
from cpe_wfn.observability.logging import LoggingConfig

LOG_FORMAT_TEXT: Final[str] = "text"
LOG_FORMAT_JSON: Final[str] = "json"
LOG_FORMATS: Final[tuple[str, ...]] = (LOG_FORMAT_TEXT, LOG_FORMAT_JSON)

DEFAULT_CONFIG: Final[dict[str, dict[str, Any]]] = {
    "validation": {"strict_lexical": False},
    "logging": {"level": "WARNING", "format": LOG_FORMAT_TEXT},
}


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded, coerced, or validated."""


@dataclass(frozen=True, slots=True)
class WfnConfig:
    """Effective settings for building WFNs and wiring the package logger."""

    strict_lexical: bool = False
    log_level: str = "WARNING"
    log_format: str = LOG_FORMAT_TEXT

    def logging_config(self, *, stream: IO[str] | None = None) -> LoggingConfig:
        return LoggingConfig(
            level=self.log_level,
            json_lines=self.log_format == LOG_FORMAT_JSON,
            stream=stream,
        )

    def new_wfn(self) -> Wfn:
        return Wfn(strict=self.strict_lexical)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            "validation": {"strict_lexical": self.strict_lexical},
            "logging": {"level": self.log_level, "format": self.log_format},
        }


def default_config() -> dict[str, dict[str, Any]]:
    return copy.deepcopy(DEFAULT_CONFIG)


def merge_config(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``overlay`` onto ``base`` without mutating either."""
    merged: dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in overlay.items():
        existing = merged.get(key)
        if isinstance(value, Mapping) and isinstance(existing, Mapping):
            merged[key] = merge_config(existing, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def validate_config(payload: Mapping[str, Any]) -> WfnConfig:
    """Validate a merged config payload; unknown tables and keys are rejected."""
    _reject_unknown(payload, set(DEFAULT_CONFIG), "config")

    validation = _as_table(payload.get("validation", {}), "validation")
    _reject_unknown(validation, set(DEFAULT_CONFIG["validation"]), "validation")
    strict_lexical = validation.get("strict_lexical", False)
    if not isinstance(strict_lexical, bool):
        raise ConfigLoadError(
            f"validation.strict_lexical: expected boolean, got {type(strict_lexical).__name__}"
        )

    logging_table = _as_table(payload.get("logging", {}), "logging")
    _reject_unknown(logging_table, set(DEFAULT_CONFIG["logging"]), "logging")
    level = _as_level(logging_table.get("level", DEFAULT_CONFIG["logging"]["level"]))
    log_format = logging_table.get("format", LOG_FORMAT_TEXT)
    if log_format not in LOG_FORMATS:
        allowed = ", ".join(LOG_FORMATS)
        raise ConfigLoadError(
            f"logging.format: invalid value {log_format!r}; expected one of: {allowed}"
        )

    return WfnConfig(strict_lexical=strict_lexical, log_level=level, log_format=log_format)


def _as_table(value: object, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigLoadError(f"{path}: expected table, got {type(value).__name__}")
    return value


def _reject_unknown(payload: Mapping[str, Any], allowed: set[str], path: str) -> None:
    unknown = sorted(str(key) for key in payload if key not in allowed)
    if unknown:
        raise ConfigLoadError(f"{path}: unexpected fields: {unknown}")


def _as_level(value: object) -> str:
    if not isinstance(value, str):
        raise ConfigLoadError(f"logging.level: expected string, got {type(value).__name__}")
    normalized = value.strip().upper()
    if not isinstance(logging.getLevelName(normalized), int):
        raise ConfigLoadError(f"logging.level: unsupported logging level {value!r}")
    return normalized


__all__ = [
    "DEFAULT_CONFIG",
    "LOG_FORMATS",
    "LOG_FORMAT_JSON",
    "LOG_FORMAT_TEXT",
    "ConfigLoadError",
    "WfnConfig",
    "default_config",
    "merge_config",
    "validate_config",
]
