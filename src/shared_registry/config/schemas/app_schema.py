"""Application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError

from shared_registry.domain.core.exceptions import ConfigurationError

from .logging_schema import LoggingConfig
from .registry_schema import RegistryConfig


class AppConfig(BaseModel):
    """Top-level configuration."""

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """
        Create validated configuration from a dictionary.

        Raises:
            ConfigurationError: If the data does not match the schema
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
                if error["type"] == "missing"
            ]
            raise ConfigurationError(f"Invalid configuration: {e}", missing) from e
