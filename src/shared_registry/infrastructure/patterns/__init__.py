"""Infrastructure patterns package."""

from .lazy_singleton import LazySingleton
from .singleton_access import get_singleton
from .singleton_registry import SingletonRegistry

__all__ = ["LazySingleton", "SingletonRegistry", "get_singleton"]
