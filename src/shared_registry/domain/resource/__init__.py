"""Resource value objects."""

from .value_objects import ResourceId, ResourceSet

__all__ = ["ResourceId", "ResourceSet"]
