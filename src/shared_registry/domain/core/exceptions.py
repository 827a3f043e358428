# src/shared_registry/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class EmptyResourceSetError(DomainException):
    """Raised when a selection is requested but no resources are configured."""
    def __init__(self, message: str = "Cannot select a resource: no resources are configured"):
        super().__init__(message)


class ConstructionFailureError(DomainException):
    """Raised when the shared registry instance could not be constructed.

    The registry stays uninitialized after this error, so a later call
    attempts construction again.
    """
    def __init__(self, message: str, context: Any = None):
        super().__init__(message)
        self.context = context


class InvalidStateTransitionError(DomainException):
    """Raised when attempting an invalid state transition."""
    def __init__(self, current_state: str, attempted_state: str):
        super().__init__(
            f"Cannot transition from {current_state} to {attempted_state}"
        )
        self.current_state = current_state
        self.attempted_state = attempted_state
