"""
==============================================================================
Catalog Package - Product Storage
==============================================================================

In-memory product store seeded with sample records.

Classes:
--------
- Product: Pydantic model for products
- ProductCatalog: Ordered store with id lookup

==============================================================================
"""

from .models import Product
from .catalog import ProductCatalog
from .seed import SAMPLE_PRODUCTS

__all__ = [
    "Product",
    "ProductCatalog",
    "SAMPLE_PRODUCTS",
]
