"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sit between the API routers and the catalog:

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductCatalog  │  ← In-memory store
    └─────────────────┘

==============================================================================
"""

from .product_service import ProductService

__all__ = [
    "ProductService",
]
