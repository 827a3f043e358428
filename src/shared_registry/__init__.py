"""Shared Registry - Root Package.

A lazily-initialized, process-wide registry of named resources (for example
servers) with a pluggable selection policy. All callers share one registry
instance, created on first access and kept for the lifetime of the process.

Key Components:
    - domain: Resource value objects, lifecycle states and domain errors
    - config: Configuration schemas and loading
    - infrastructure: Logging, singleton patterns, selection policies and
      the SharedRegistry itself

Usage:
    >>> from shared_registry import get_shared_registry
    >>> balancer = get_shared_registry()
    >>> server = balancer.select_resource()
"""

from ._version import __version__
from .domain.core.exceptions import (
    ConfigurationError,
    ConstructionFailureError,
    EmptyResourceSetError,
    InvalidStateTransitionError,
)
from .domain.registry import RegistryState
from .domain.resource import ResourceId, ResourceSet
from .infrastructure.patterns import SingletonRegistry, get_singleton
from .infrastructure.registry import SharedRegistry, get_shared_registry, select_resource

__all__ = [
    "__version__",
    "SharedRegistry",
    "get_shared_registry",
    "select_resource",
    "SingletonRegistry",
    "get_singleton",
    "ResourceId",
    "ResourceSet",
    "RegistryState",
    "ConfigurationError",
    "ConstructionFailureError",
    "EmptyResourceSetError",
    "InvalidStateTransitionError",
]
