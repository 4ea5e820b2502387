"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory, ordered product store.

Features:
---------
- Insertion-ordered records
- Lookup index by id
- Seeding from plain dictionaries

The catalog is owned by the application instance (``app.state.catalog``)
rather than living in a module-level variable, so each application, and
each test, gets its own isolated store.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from .models import Product
from .seed import SAMPLE_PRODUCTS


# Module logger
logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Ordered in-memory collection of products.

    Mutations happen in place and are never persisted. There is no
    locking: callers must not await between a read and a write.

    Example:
        >>> catalog = ProductCatalog.with_samples()
        >>> catalog.find_by_id("3").name
        'Coffee Maker'
        >>> len(catalog)
        5
    """

    def __init__(self, records: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        """
        Initialize the catalog.

        Args:
            records: Optional raw product dictionaries to seed with
        """
        self._products: List[Product] = []
        self._by_id: Dict[str, Product] = {}

        if records is not None:
            self.seed(records)

    @classmethod
    def with_samples(cls) -> "ProductCatalog":
        """Create a catalog holding the fixed sample records."""
        return cls(SAMPLE_PRODUCTS)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products in insertion order."""
        return self._products.copy()

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    # =========================================================================
    # LOADING
    # =========================================================================

    def seed(self, records: Iterable[Dict[str, Any]]) -> None:
        """
        Replace the catalog content with the given records.

        Args:
            records: Raw product dictionaries (camelCase keys accepted)

        Raises:
            ValueError: If two records share an id
        """
        self._products.clear()
        self._by_id.clear()

        for record in records:
            self.add(Product.model_validate(record))

        logger.info(f"Catalog seeded with {len(self._products)} products")

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by exact id."""
        return self._by_id.get(product_id)

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add(self, product: Product) -> Product:
        """
        Append a product to the catalog.

        Raises:
            ValueError: If the id is already taken
        """
        if product.id in self._by_id:
            raise ValueError(f"Duplicate product id: {product.id}")

        self._products.append(product)
        self._by_id[product.id] = product
        return product

    def replace(self, product: Product) -> Product:
        """
        Swap the stored record that has the same id, keeping its position.

        Raises:
            KeyError: If no record has that id
        """
        current = self._by_id[product.id]
        index = self._products.index(current)

        self._products[index] = product
        self._by_id[product.id] = product
        return product

    def remove(self, product_id: str) -> Optional[Product]:
        """Remove and return the product with the given id, if any."""
        product = self._by_id.pop(product_id, None)
        if product is None:
            return None

        self._products.remove(product)
        return product
