"""Configuration schemas package."""

from .app_schema import AppConfig
from .logging_schema import LogDestination, LoggingConfig
from .registry_schema import DEFAULT_RESOURCES, RegistryConfig, SelectionAlgorithm

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "LogDestination",
    "RegistryConfig",
    "SelectionAlgorithm",
    "DEFAULT_RESOURCES",
]
