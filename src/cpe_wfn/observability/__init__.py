"""Public observability primitives: package log handler setup and teardown."""

from cpe_wfn.observability.logging import (
    LoggingConfig,
    get_active_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "LoggingConfig",
    "get_active_logger",
    "setup_logging",
    "shutdown_logging",
]
