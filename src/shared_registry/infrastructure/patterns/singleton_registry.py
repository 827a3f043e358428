"""Class-keyed registry of lazily created singletons.

Public API for host applications that need their own process-wide objects
(a connection pool per selected server, a settings object) built with the
same one-time construction guarantees as the shared registry. Exported from
the package root together with get_singleton.
"""

import threading
from typing import Any, Dict, List, Type, TypeVar

from shared_registry.infrastructure.patterns.lazy_singleton import LazySingleton

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds one lazily constructed instance per class.

    Each class gets its own LazySingleton cell, so constructing one class
    never blocks callers of another. Constructor arguments are only used by
    the call that actually builds the instance.
    """

    _cell: "LazySingleton[SingletonRegistry]"

    def __init__(self):
        self._cells: Dict[type, LazySingleton[Any]] = {}
        self._cells_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide singleton registry."""
        return cls._cell.get()

    def _cell_for(self, singleton_class: type) -> LazySingleton[Any]:
        cell = self._cells.get(singleton_class)
        if cell is not None:
            return cell
        with self._cells_lock:
            cell = self._cells.get(singleton_class)
            if cell is None:
                cell = LazySingleton(name=singleton_class.__name__)
                self._cells[singleton_class] = cell
            return cell

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of singleton_class, creating it on first use.

        Raises:
            ConstructionFailureError: If the constructor raises
        """
        cell = self._cell_for(singleton_class)
        return cell.get(lambda: singleton_class(*args, **kwargs))

    def is_registered(self, singleton_class: type) -> bool:
        """Check whether an instance of singleton_class has been created."""
        cell = self._cells.get(singleton_class)
        return cell is not None and cell.is_initialized()

    def registered_classes(self) -> List[type]:
        """Classes with a constructed instance."""
        return [cls for cls, cell in list(self._cells.items()) if cell.is_initialized()]


SingletonRegistry._cell = LazySingleton(SingletonRegistry, name="SingletonRegistry")
