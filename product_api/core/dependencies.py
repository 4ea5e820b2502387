"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for state access, authentication and validation.

This module implements:
- State accessors: settings and catalog owned by the application instance
- ApiKeyAuthenticator: shared-secret check on the x-api-key header
- Body validation producing a typed ProductPayload
- Listing query normalization using parse-or-default rules

Dependency Hierarchy:
--------------------
                    ┌──────────────────┐
                    │ get_app_settings │
                    └────────┬─────────┘
                             │
                    ┌────────▼─────────┐
                    │ require_api_key  │   create, update, delete
                    └────────┬─────────┘
                             │
                    ┌────────▼─────────┐
                    │get_product_payload│  create, update
                    └──────────────────┘

Because the payload dependency depends on ``require_api_key``, a request
is always authenticated before its body is looked at.

Usage Examples:
--------------
    @router.delete("/{product_id}")
    async def delete_product(
        product_id: str,
        _: str = Depends(require_api_key),
        service: ProductService = Depends(get_product_service),
    ):
        ...

==============================================================================
"""

from __future__ import annotations

import json
import logging
import secrets
from typing import Any, Optional

from fastapi import Depends, Query, Request
from fastapi.security import APIKeyHeader

from product_api.catalog import ProductCatalog
from product_api.config import Settings
from product_api.core import exceptions
from product_api.schemas import ProductListQuery, ProductPayload
from product_api.services import ProductService
from product_api.utils import parse_or_default


# Module logger
logger = logging.getLogger(__name__)

# API key security scheme for Swagger UI
api_key_scheme = APIKeyHeader(name="x-api-key", auto_error=False)


# =============================================================================
# APPLICATION STATE
# =============================================================================

def get_app_settings(request: Request) -> Settings:
    """Settings of the application serving this request."""
    return request.app.state.settings


def get_catalog(request: Request) -> ProductCatalog:
    """Catalog owned by the application serving this request."""
    return request.app.state.catalog


def get_product_service(
    catalog: ProductCatalog = Depends(get_catalog)
) -> ProductService:
    return ProductService(catalog)


# =============================================================================
# AUTHENTICATION
# =============================================================================

class ApiKeyAuthenticator:
    """
    Checks a presented API key against the configured secret.

    Attributes:
        _settings: Settings holding the expected ``api_key``

    Example:
        >>> auth = ApiKeyAuthenticator(Settings(api_key="secret"))
        >>> auth.authenticate("secret")
        'secret'
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def authenticate(self, api_key: Optional[str]) -> str:
        """
        Verify the presented key.

        Args:
            api_key: Value of the x-api-key header, None when absent

        Returns:
            The accepted key

        Raises:
            AuthenticationError: If the key is missing or wrong
        """
        if not api_key:
            logger.warning("Request rejected: missing API key")
            raise exceptions.api_key_missing()

        if not secrets.compare_digest(
            api_key.encode("utf-8"),
            self._settings.api_key.encode("utf-8")
        ):
            logger.warning("Request rejected: invalid API key")
            raise exceptions.api_key_invalid()

        return api_key


async def require_api_key(
    api_key: Optional[str] = Depends(api_key_scheme),
    settings: Settings = Depends(get_app_settings)
) -> str:
    """
    FastAPI dependency guarding mutating routes.

    Raises:
        AuthenticationError: If the x-api-key header is missing or wrong
    """
    return ApiKeyAuthenticator(settings).authenticate(api_key)


# =============================================================================
# BODY VALIDATION
# =============================================================================

def reject_constant(name: str) -> Any:
    """Refuse the non-standard JSON literals Infinity, -Infinity and NaN."""
    raise ValueError(f"Unsupported JSON constant: {name}")


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body; an empty body reads as an empty object.

    Raises:
        ValidationError: If the body is not valid JSON
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        return json.loads(raw, parse_constant=reject_constant)
    except ValueError:
        raise exceptions.ValidationError("Request body contains malformed JSON")


async def get_product_payload(
    request: Request,
    _: str = Depends(require_api_key)
) -> ProductPayload:
    """
    FastAPI dependency producing a validated product body.

    Runs after ``require_api_key``.

    Raises:
        ValidationError: If name, price or category is invalid
    """
    body = await read_json_body(request)
    return ProductPayload.from_body(body)


# =============================================================================
# LISTING QUERY DEPENDENCY
# =============================================================================

async def get_list_query(
    category: Optional[str] = Query(None, description="Category, case-insensitive"),
    in_stock: Optional[str] = Query(None, alias="inStock", description="'true' for in-stock items, anything else for out-of-stock"),
    search: Optional[str] = Query(None, description="Substring of name or description"),
    page: Optional[str] = Query(None, description="Page number (1-indexed)"),
    limit: Optional[str] = Query(None, description="Items per page"),
    settings: Settings = Depends(get_app_settings)
) -> ProductListQuery:
    """
    FastAPI dependency normalizing listing parameters.

    Query values are taken as raw strings so that malformed input falls
    back to defaults instead of producing an error.
    """
    return ProductListQuery(
        category=category or None,
        in_stock=None if in_stock is None else in_stock == "true",
        search=search or None,
        page=parse_or_default(page, settings.default_page, minimum=None),
        limit=parse_or_default(limit, settings.default_limit),
    )
