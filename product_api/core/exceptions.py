"""
Application Exception Handling

Typed error classes for the Product Catalog API and the single translation
point that turns any failure into a JSON error response.

Error Taxonomy:
    NotFoundError        (404)
    ValidationError      (400)
    AuthenticationError  (401)
    InternalServerError  (500)  anything not classified above
"""

import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Base class for all application errors.

    Subclasses fix ``name`` and ``status_code``; each instance carries a
    human-readable message and optional structured details.

    Usage:
        raise NotFoundError("Product with id 42 not found")
        raise ValidationError("Price is required", {"fields": [...]})
    """

    name: str = "Error"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            details: Additional error context (optional)
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Requested product or route does not exist."""

    name = "NotFoundError"
    status_code = 404


class ValidationError(AppException):
    """Request body failed validation."""

    name = "ValidationError"
    status_code = 400


class AuthenticationError(AppException):
    """Missing or wrong API key."""

    name = "AuthenticationError"
    status_code = 401


class InternalServerError(AppException):
    name = "InternalServerError"
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


# ============================================
# TRANSLATION
# ============================================

def classify(exc: Exception, request: Request) -> AppException:
    """
    Map any exception onto the application taxonomy.

    Starlette 404/405 errors mean no route matched the request and
    become NotFoundError. FastAPI request validation failures become
    ValidationError. Everything unrecognized is an InternalServerError.
    """
    if isinstance(exc, AppException):
        return exc

    if isinstance(exc, StarletteHTTPException):
        if exc.status_code in (404, 405):
            url = request.url.path
            if request.url.query:
                url = f"{url}?{request.url.query}"
            return NotFoundError(f"Route {request.method} {url} not found")
        return InternalServerError()

    if isinstance(exc, RequestValidationError):
        fields = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        return ValidationError("Invalid request", {"fields": fields})

    return InternalServerError()


def build_error_body(
    error: AppException,
    original: Exception,
    include_stack: bool
) -> Dict[str, Any]:
    """Build the ``{success: false, error: {...}}`` response body."""
    body: Dict[str, Any] = {
        "name": error.name,
        "message": error.message or "Internal server error",
    }
    if error.details:
        body["details"] = error.details
    if include_stack:
        body["stack"] = "".join(
            traceback.format_exception(
                type(original), original, original.__traceback__
            )
        )
    return {"success": False, "error": body}


def translate_exception(request: Request, exc: Exception) -> JSONResponse:
    """
    Convert any failure into the JSON error response.

    This is the only place an error response is written. The stack trace
    is included when the application runs in development mode.
    """
    error = classify(exc, request)

    if isinstance(error, InternalServerError) and error is not exc:
        logger.error(
            f"[ERROR] {type(exc).__name__}: {exc}",
            exc_info=(type(exc), exc, exc.__traceback__)
        )
    else:
        logger.error(f"[ERROR] {error.name}: {error.message}")

    settings = getattr(request.app.state, "settings", None)
    include_stack = bool(settings is not None and settings.is_development)

    return JSONResponse(
        status_code=error.status_code or 500,
        content=build_error_body(error, exc, include_stack)
    )


async def app_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """FastAPI exception handler delegating to ``translate_exception``."""
    return translate_exception(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the translator for every failure kind.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(product_id: str) -> NotFoundError:
    """Create product not found exception."""
    return NotFoundError(f"Product with id {product_id} not found")


def api_key_missing() -> AuthenticationError:
    """Create missing API key exception."""
    return AuthenticationError(
        "API key is required. Please provide x-api-key header."
    )


def api_key_invalid() -> AuthenticationError:
    """Create invalid API key exception."""
    return AuthenticationError("Invalid API key provided.")
