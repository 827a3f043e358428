"""Configuration loading from defaults, JSON files and the environment."""
from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from shared_registry.config.defaults import DEFAULT_CONFIG
from shared_registry.config.schemas import AppConfig
from shared_registry.config.utils.env_expansion import expand_config_env_vars
from shared_registry.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "SHARED_REGISTRY_CONFIG_FILE"
RESOURCES_ENV = "SHARED_REGISTRY_RESOURCES"
SELECTION_POLICY_ENV = "SHARED_REGISTRY_SELECTION_POLICY"
SEED_ENV = "SHARED_REGISTRY_SEED"
LOG_LEVEL_ENV = "SHARED_REGISTRY_LOG_LEVEL"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigurationLoader:
    """
    Loads configuration from multiple sources.

    Precedence, lowest first: built-in defaults, JSON configuration file,
    environment variable overrides. $VAR placeholders are expanded in the
    logging section only, from the environment given to the loader.
    """

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        self._config_file = config_file
        self._environ = environ if environ is not None else os.environ

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load configuration data from a JSON file.

        Raises:
            ConfigurationError: If the file is missing or not valid JSON
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        logger.debug("Loaded configuration file %s", path)
        return data

    def load_configuration(self) -> Dict[str, Any]:
        """Merge defaults with the configuration file, if one is set."""
        config_data = copy.deepcopy(DEFAULT_CONFIG)
        config_file = self._config_file or self._environ.get(CONFIG_FILE_ENV)
        if config_file:
            config_data = _deep_merge(config_data, self.load_from_file(config_file))
        return config_data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply SHARED_REGISTRY_* environment overrides.

        An empty SHARED_REGISTRY_RESOURCES value configures zero resources.
        """
        data = copy.deepcopy(config_data)
        registry = data.setdefault("registry", {})
        logging_section = data.setdefault("logging", {})

        if RESOURCES_ENV in self._environ:
            raw = self._environ[RESOURCES_ENV]
            registry["resources"] = [name.strip() for name in raw.split(",") if name.strip()]
            # Weights for resources that are no longer configured are dropped
            registry["weights"] = {
                name: weight
                for name, weight in registry.get("weights", {}).items()
                if name in registry["resources"]
            }

        if SELECTION_POLICY_ENV in self._environ:
            registry["selection_policy"] = self._environ[SELECTION_POLICY_ENV]

        if SEED_ENV in self._environ:
            raw_seed = self._environ[SEED_ENV]
            try:
                registry["seed"] = int(raw_seed)
            except ValueError as e:
                raise ConfigurationError(f"{SEED_ENV} must be an integer, got '{raw_seed}'") from e

        if LOG_LEVEL_ENV in self._environ:
            logging_section["level"] = self._environ[LOG_LEVEL_ENV]

        return data

    def load(self) -> AppConfig:
        """
        Load and validate the application configuration.

        Raises:
            ConfigurationError: If any source is unreadable or the result is invalid
        """
        config_data = self.load_configuration()
        config_data = self.apply_environment_overrides(config_data)
        # Only the logging section carries placeholders; resource names are opaque
        if isinstance(config_data.get("logging"), dict):
            config_data["logging"] = expand_config_env_vars(config_data["logging"], self._environ)
        app_config = AppConfig.from_dict(config_data)
        logger.debug(
            "Configuration loaded: %d resources, policy=%s",
            len(app_config.registry.resources),
            app_config.registry.selection_policy.value,
        )
        return app_config


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """Load the application configuration with the default loader."""
    return ConfigurationLoader(config_file).load()
