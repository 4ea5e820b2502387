"""Endpoint directory served at the application root."""

from fastapi import APIRouter, Depends

from product_api.config import Settings
from product_api.core.dependencies import get_app_settings


router = APIRouter(tags=["Root"])


ENDPOINTS = {
    "GET /": "This welcome message",
    "GET /api/products": "Get all products (supports filtering, pagination, search)",
    "GET /api/products/:id": "Get a specific product by ID",
    "POST /api/products": "Create a new product (requires x-api-key header)",
    "PUT /api/products/:id": "Update a product (requires x-api-key header)",
    "DELETE /api/products/:id": "Delete a product (requires x-api-key header)",
    "GET /api/products/stats/summary": "Get product statistics by category",
}


@router.get("/")
async def root(settings: Settings = Depends(get_app_settings)):
    """Describe the available endpoints."""
    return {
        "success": True,
        "message": "Welcome to the Product API! Go to /api/products to see all products.",
        "version": settings.app_version,
        "endpoints": ENDPOINTS,
    }
