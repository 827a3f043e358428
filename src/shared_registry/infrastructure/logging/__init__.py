"""Logging setup."""

from .logger import (
    PACKAGE_LOGGER,
    apply_log_level,
    configure_default_logging,
    get_logger,
    setup_logging,
)

__all__ = [
    "PACKAGE_LOGGER",
    "apply_log_level",
    "configure_default_logging",
    "get_logger",
    "setup_logging",
]
