"""
cpe-wfn config package public API.

Purpose
- Export config loading/validation entrypoints and the public error type.

Functional requirements
- Support loading from ``cpe_wfn.toml`` + ``CPE_WFN_`` env overrides.
- Fail fast with clear load/validation errors.
"""

from cpe_wfn.config.loader import (
    DEFAULT_CONFIG_FILE,
    ENV_PREFIX,
    dump_effective_config,
    load_config,
)
from cpe_wfn.config.schema import (
    DEFAULT_CONFIG,
    LOG_FORMATS,
    ConfigLoadError,
    WfnConfig,
    default_config,
    merge_config,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE",
    "ENV_PREFIX",
    "LOG_FORMATS",
    "ConfigLoadError",
    "WfnConfig",
    "default_config",
    "dump_effective_config",
    "load_config",
    "merge_config",
    "validate_config",
]
