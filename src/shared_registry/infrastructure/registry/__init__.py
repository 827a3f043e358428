"""Registry package."""

from .shared_registry import SharedRegistry, get_shared_registry, select_resource

__all__ = ["SharedRegistry", "get_shared_registry", "select_resource"]
