"""Error handling infrastructure package."""

from .context import ExceptionContext

__all__ = ["ExceptionContext"]
