"""Configuration package: schemas, defaults and loading."""

from .loader import ConfigurationLoader, load_config
from .schemas import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    RegistryConfig,
    SelectionAlgorithm,
)

__all__ = [
    "AppConfig",
    "RegistryConfig",
    "LoggingConfig",
    "LogDestination",
    "SelectionAlgorithm",
    "ConfigurationLoader",
    "load_config",
]
