"""Core domain types shared across the registry."""

from .exceptions import (
    ConfigurationError,
    ConstructionFailureError,
    DomainException,
    EmptyResourceSetError,
    InvalidStateTransitionError,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "EmptyResourceSetError",
    "ConstructionFailureError",
    "InvalidStateTransitionError",
]
