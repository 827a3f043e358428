"""Shared Registry - process-wide resource registry with pluggable selection.

Every request for a resource goes through the one registry instance that
knows the full resource set. The instance is created lazily on first access
and lives for the rest of the process.
"""

from typing import Callable

from shared_registry.config import ConfigurationLoader, RegistryConfig
from shared_registry.domain.core.exceptions import EmptyResourceSetError
from shared_registry.domain.registry import RegistryState
from shared_registry.domain.resource import ResourceId, ResourceSet
from shared_registry.infrastructure.logging import apply_log_level, get_logger
from shared_registry.infrastructure.patterns import LazySingleton
from shared_registry.infrastructure.selection import (
    SelectionPolicy,
    SelectionStats,
    create_selection_policy,
)


class SharedRegistry:
    """
    Registry holding an immutable resource set and a selection policy.

    Use get_instance() for the shared instance. Each subclass owns its own
    lifecycle slot, so subclasses are independent singletons.
    Thread-safe singleton implementation.
    """

    _slot: "LazySingleton[SharedRegistry]"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._slot = LazySingleton(cls._create_instance, name=cls.__name__)

    def __init__(self, resources: ResourceSet, policy: SelectionPolicy):
        """
        Initialize shared registry.

        Args:
            resources: Resources available for selection, in order
            policy: Policy used by select_resource()
        """
        self._resources = resources
        self._policy = policy
        self._stats = SelectionStats()
        self._logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "SharedRegistry":
        """Build a registry from registry configuration."""
        resources = ResourceSet.from_names(config.resources)
        return cls(resources, create_selection_policy(config))

    @classmethod
    def _create_instance(cls) -> "SharedRegistry":
        """Build the shared instance from the loaded configuration."""
        app_config = ConfigurationLoader().load()
        apply_log_level(app_config.logging)
        return cls.from_config(app_config.registry)

    @classmethod
    def get_instance(cls) -> "SharedRegistry":
        """
        Get the shared registry instance, constructing it on first call.

        Raises:
            ConstructionFailureError: If construction fails. The registry
                stays uninitialized and the next call retries.
        """
        return cls._slot.get()

    @classmethod
    def configure(cls, factory: Callable[[], "SharedRegistry"]) -> None:
        """
        Install the factory used to build the shared instance.

        Raises:
            InvalidStateTransitionError: If the instance already exists
        """
        cls._slot.set_factory(factory)

    @classmethod
    def state(cls) -> RegistryState:
        return cls._slot.state

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._slot.is_initialized()

    @classmethod
    def construction_count(cls) -> int:
        return cls._slot.construction_count

    @classmethod
    def failed_attempts(cls) -> int:
        return cls._slot.failed_attempts

    @property
    def resources(self) -> ResourceSet:
        return self._resources

    @property
    def policy(self) -> SelectionPolicy:
        return self._policy

    @property
    def stats(self) -> SelectionStats:
        return self._stats

    def select_resource(self) -> ResourceId:
        """
        Select the next resource using the configured policy.

        Returns:
            A member of the configured resource set

        Raises:
            EmptyResourceSetError: If no resources are configured
        """
        if self._resources.is_empty():
            raise EmptyResourceSetError()
        resource = self._policy.select(self._resources)
        self._stats.record(resource)
        self._logger.debug("Selected resource", resource=resource.value, policy=self._policy.name)
        return resource

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, item: object) -> bool:
        return item in self._resources

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resources={list(self._resources.names)}, "
            f"policy={self._policy.name})"
        )


SharedRegistry._slot = LazySingleton(SharedRegistry._create_instance, name="SharedRegistry")


# Convenience functions for global access
def get_shared_registry() -> SharedRegistry:
    """Get the global shared registry instance."""
    return SharedRegistry.get_instance()


def select_resource() -> ResourceId:
    """Select a resource from the global shared registry."""
    return get_shared_registry().select_resource()
