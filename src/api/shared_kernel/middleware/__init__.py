"""Shared middleware for cross-cutting concerns.

This module contains FastAPI dependencies and exception handlers that are
shared across bounded contexts: response language selection and the
uniform ``{"error": ...}`` error body.
"""

from shared_kernel.middleware.errors import register_exception_handlers
from shared_kernel.middleware.language import get_language

__all__ = [
    "get_language",
    "register_exception_handlers",
]
