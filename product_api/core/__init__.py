"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: error taxonomy and the single error translator
- middleware: request logging middleware
- dependencies: FastAPI dependencies (state, API key, body, listing query)

``dependencies`` is not re-exported here because it imports the schema and
service layers, which themselves import ``exceptions``.

Usage:
------
    from product_api.core import AppException, register_exception_handlers
    from product_api.core.dependencies import require_api_key

==============================================================================
"""

from .exceptions import (
    AppException,
    AuthenticationError,
    InternalServerError,
    NotFoundError,
    ValidationError,
    register_exception_handlers,
    translate_exception,
)
from .middleware import RequestLoggerMiddleware

__all__ = [
    # Exceptions
    "AppException",
    "AuthenticationError",
    "InternalServerError",
    "NotFoundError",
    "ValidationError",
    "register_exception_handlers",
    "translate_exception",
    # Middleware
    "RequestLoggerMiddleware",
]
