"""Guarded lazy cell for process-wide singletons."""

import threading
from typing import Callable, Generic, Optional, TypeVar

from shared_registry.domain.core.exceptions import (
    ConstructionFailureError,
    InvalidStateTransitionError,
)
from shared_registry.domain.registry import RegistryState
from shared_registry.infrastructure.error import ExceptionContext
from shared_registry.infrastructure.logging import get_logger

T = TypeVar("T")


class LazySingleton(Generic[T]):
    """
    One-time initialization cell using double-checked locking.

    The published instance is read without locking. Only callers that find
    the cell empty take the lock, check again and construct. The instance is
    published after the factory returns, so no caller ever sees a partially
    built object.

    A failing factory leaves the cell UNINITIALIZED: the error reaches the
    caller that ran it and the next call constructs again.
    """

    def __init__(self, factory: Optional[Callable[[], T]] = None, name: str = "singleton"):
        self._factory = factory
        self._name = name
        self._instance: Optional[T] = None
        self._state = RegistryState.UNINITIALIZED
        self._lock = threading.Lock()
        self._construction_count = 0
        self._failed_attempts = 0
        self._constructing_thread: Optional[int] = None
        self._logger = get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def construction_count(self) -> int:
        """Number of successful constructions (0 or 1)."""
        return self._construction_count

    @property
    def failed_attempts(self) -> int:
        return self._failed_attempts

    def is_initialized(self) -> bool:
        return self._instance is not None

    def set_factory(self, factory: Callable[[], T]) -> None:
        """
        Replace the construction factory.

        Raises:
            InvalidStateTransitionError: If the instance has already been built
        """
        with self._lock:
            if self._instance is not None:
                raise InvalidStateTransitionError(
                    self._state.value, RegistryState.UNINITIALIZED.value
                )
            self._factory = factory

    def get(self, factory: Optional[Callable[[], T]] = None) -> T:
        """
        Return the instance, constructing it on first use.

        Args:
            factory: Used instead of the configured factory if this call
                ends up constructing the instance

        Raises:
            ConstructionFailureError: If construction fails, or if the factory
                calls back into this cell; nothing is cached
        """
        instance = self._instance
        if instance is not None:
            return instance

        if self._constructing_thread == threading.get_ident():
            # Counted and logged by the outer construction it fails
            raise ConstructionFailureError(
                f"Re-entrant construction of {self._name}",
                ExceptionContext("construct", singleton=self._name),
            )

        with self._lock:
            if self._instance is None:
                self._construct(factory or self._factory)
            return self._instance

    def _construct(self, factory: Optional[Callable[[], T]]) -> None:
        # Caller holds self._lock
        if factory is None:
            raise self._failure(f"No factory configured for {self._name}")

        self._constructing_thread = threading.get_ident()
        try:
            instance = factory()
        except Exception as e:
            raise self._failure(
                f"Failed to construct {self._name}: {e}", error_type=type(e).__name__
            ) from e
        finally:
            self._constructing_thread = None

        if instance is None:
            raise self._failure(f"Factory for {self._name} returned None")

        self._state = self._state.transition_to(RegistryState.READY)
        self._construction_count += 1
        # Publish last: the unlocked fast path in get() reads only _instance
        self._instance = instance
        self._logger.info(
            "Singleton constructed", singleton=self._name, failed_attempts=self._failed_attempts
        )

    def _failure(self, message: str, **details) -> ConstructionFailureError:
        """Count and log a failed construction attempt."""
        self._failed_attempts += 1
        context = ExceptionContext(
            "construct", singleton=self._name, attempt=self._failed_attempts, **details
        )
        self._logger.error("Singleton construction failed", error=message, **context.to_dict())
        return ConstructionFailureError(message, context)
