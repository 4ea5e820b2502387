"""
==============================================================================
Product Service Module
==============================================================================

Business logic for the product catalog.

This module implements:
- ProductService: listing pipeline, CRUD operations and statistics

Listing Pipeline:
----------------
Applied to the full catalog in this order, each step optional:

    category filter -> stock filter -> search filter -> pagination

No method awaits anything, so a read followed by a write always runs
without another request interleaving on the event loop.

==============================================================================
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List

from product_api.catalog import Product, ProductCatalog
from product_api.core import exceptions
from product_api.schemas import CategoryStats, Page, ProductListQuery, ProductPayload, truthy


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product operations over an injected catalog.

    Attributes:
        _catalog: The ProductCatalog the service reads and mutates

    Example:
        >>> service = ProductService(ProductCatalog.with_samples())
        >>> page = service.list_products(ProductListQuery(category="kitchen"))
        >>> page.total
        1
    """

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_products(self, query: ProductListQuery) -> Page[Product]:
        """
        Filter, search and paginate the catalog.

        Args:
            query: Normalized filters and pagination

        Returns:
            Page of matching products plus the unpaginated total
        """
        products = self._catalog.products

        if query.category:
            category = query.category.lower()
            products = [p for p in products if p.category.lower() == category]

        if query.in_stock is not None:
            products = [p for p in products if p.in_stock == query.in_stock]

        if query.search:
            term = query.search.lower()
            products = [
                p for p in products
                if term in p.name.lower() or term in p.description.lower()
            ]

        return Page[Product].create(products, query.page, query.limit)

    def get_product(self, product_id: str) -> Product:
        """
        Get product by id.

        Raises:
            NotFoundError: If no product has that id
        """
        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)
        return product

    def get_stats(self) -> Dict[str, Any]:
        """Per-category aggregates computed in one pass."""
        by_category: Dict[str, CategoryStats] = {}

        products = self._catalog.products
        for product in products:
            stats = by_category.setdefault(product.category, CategoryStats())
            stats.count += 1
            stats.total_value += product.price
            if product.in_stock:
                stats.in_stock += 1
            else:
                stats.out_of_stock += 1

        return {
            "totalProducts": len(products),
            "totalCategories": len(by_category),
            "byCategory": {
                category: stats.to_dict()
                for category, stats in by_category.items()
            },
        }

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def create_product(self, payload: ProductPayload) -> Product:
        """
        Create a product from a validated payload.

        Args:
            payload: Validated request body

        Returns:
            The stored product with its generated id
        """
        product = Product(
            id=self._new_id(),
            name=payload.name.strip(),
            description=payload.normalized_description,
            price=float(payload.price),
            category=payload.normalized_category,
            in_stock=payload.in_stock_flag,
        )
        self._catalog.add(product)

        logger.info(f"Product created: {product.id} ({product.name})")
        return product

    def update_product(self, product_id: str, payload: ProductPayload) -> Product:
        """
        Overwrite a product's fields, keeping its id.

        ``description`` and ``inStock`` keep their previous values only
        when the key was left out of the body entirely.

        Raises:
            NotFoundError: If no product has that id
        """
        current = self.get_product(product_id)

        changes: Dict[str, Any] = {
            "name": payload.name.strip(),
            "price": float(payload.price),
            "category": payload.normalized_category,
        }
        if payload.has_description:
            changes["description"] = payload.normalized_description
        if payload.has_in_stock:
            changes["in_stock"] = truthy(payload.in_stock)

        updated = self._catalog.replace(current.model_copy(update=changes))

        logger.info(f"Product updated: {product_id}")
        return updated

    def delete_product(self, product_id: str) -> Product:
        """
        Remove a product.

        Returns:
            The removed product

        Raises:
            NotFoundError: If no product has that id
        """
        product = self._catalog.remove(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)

        logger.info(f"Product deleted: {product_id}")
        return product

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _new_id(self) -> str:
        """Random UUID4, regenerated in the unlikely case it is taken."""
        product_id = str(uuid.uuid4())
        while product_id in self._catalog:
            product_id = str(uuid.uuid4())
        return product_id

    @staticmethod
    def to_dicts(products: List[Product]) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in products]
