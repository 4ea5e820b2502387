"""
==============================================================================
Product Endpoints
==============================================================================

CRUD, listing and statistics endpoints for the product catalog.

Read endpoints are public. Create, update and delete require the
x-api-key header; create and update also validate the body.

==============================================================================
"""

from fastapi import APIRouter, Depends

from product_api.catalog import Product
from product_api.core.dependencies import (
    get_list_query,
    get_product_payload,
    get_product_service,
    require_api_key,
)
from product_api.schemas import Page, ProductListQuery, ProductPayload
from product_api.services import ProductService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Shapes service results into API response bodies."""

    def __init__(self, service: ProductService):
        self._service = service

    def list_products(self, query: ProductListQuery) -> dict:
        """List products with filters and pagination."""
        page: Page[Product] = self._service.list_products(query)

        return {
            "success": True,
            "count": page.count,
            "total": page.total,
            "page": page.page,
            "totalPages": page.total_pages,
            "data": self._service.to_dicts(page.items),
        }

    def get_stats(self) -> dict:
        return {
            "success": True,
            "data": self._service.get_stats(),
        }

    def get_product(self, product_id: str) -> dict:
        return {
            "success": True,
            "data": self._service.get_product(product_id).to_dict(),
        }

    def create_product(self, payload: ProductPayload) -> dict:
        product = self._service.create_product(payload)
        return {
            "success": True,
            "message": "Product created successfully",
            "data": product.to_dict(),
        }

    def update_product(self, product_id: str, payload: ProductPayload) -> dict:
        product = self._service.update_product(product_id, payload)
        return {
            "success": True,
            "message": "Product updated successfully",
            "data": product.to_dict(),
        }

    def delete_product(self, product_id: str) -> dict:
        product = self._service.delete_product(product_id)
        return {
            "success": True,
            "message": "Product deleted successfully",
            "data": product.to_dict(),
        }


# Registered before "/{product_id}" so the literal path always wins.
@router.get("/stats/summary")
async def get_product_stats(
    service: ProductService = Depends(get_product_service)
):
    """Get product statistics by category."""
    return ProductController(service).get_stats()


@router.get("")
async def list_products(
    query: ProductListQuery = Depends(get_list_query),
    service: ProductService = Depends(get_product_service)
):
    """
    List products.

    Supports category and stock filters, search over name and
    description, and page/limit pagination.
    """
    return ProductController(service).list_products(query)


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get a specific product by id."""
    return ProductController(service).get_product(product_id)


@router.post("", status_code=201)
async def create_product(
    payload: ProductPayload = Depends(get_product_payload),
    service: ProductService = Depends(get_product_service)
):
    """Create a new product (requires x-api-key header)."""
    return ProductController(service).create_product(payload)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    payload: ProductPayload = Depends(get_product_payload),
    service: ProductService = Depends(get_product_service)
):
    """Update a product (requires x-api-key header)."""
    return ProductController(service).update_product(product_id, payload)


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    _: str = Depends(require_api_key),
    service: ProductService = Depends(get_product_service)
):
    """Delete a product (requires x-api-key header)."""
    return ProductController(service).delete_product(product_id)
