"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request schemas and result containers.

This package provides:
- Common: Page and CategoryStats containers
- Product: ProductPayload body schema and ProductListQuery filters

==============================================================================
"""

from .common import CategoryStats, Page
from .product import FIELD_MESSAGES, ProductListQuery, ProductPayload, truthy

__all__ = [
    # Common
    "CategoryStats",
    "Page",
    # Product
    "FIELD_MESSAGES",
    "ProductListQuery",
    "ProductPayload",
    "truthy",
]
