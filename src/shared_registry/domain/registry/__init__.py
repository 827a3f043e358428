"""Registry lifecycle domain."""

from .lifecycle import RegistryState

__all__ = ["RegistryState"]
