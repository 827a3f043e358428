"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict, Mapping, Optional

_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def expand_env_vars(value: Any, environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Expand environment variables in a configuration value.

    Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Dictionaries and
    lists are expanded recursively; other types are returned unchanged.

    Args:
        value: String, dict, list or scalar configuration value
        environ: Variables to expand from; defaults to os.environ

    Returns:
        Value with environment variables expanded
    """
    env = os.environ if environ is None else environ

    def replace(match: "re.Match[str]") -> str:
        name = match.group("braced") or match.group("bare")
        resolved = env.get(name)
        if resolved is not None:
            return resolved
        if match.group("default") is not None:
            return match.group("default")
        # Unknown variables are left untouched
        return match.group(0)

    def expand(item: Any) -> Any:
        if isinstance(item, str):
            return _ENV_PATTERN.sub(replace, item)
        if isinstance(item, dict):
            return {key: expand(sub_item) for key, sub_item in item.items()}
        if isinstance(item, list):
            return [expand(sub_item) for sub_item in item]
        return item

    return expand(value)


def expand_config_env_vars(
    config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config, environ)
