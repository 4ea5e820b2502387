"""
==============================================================================
Main API Router
==============================================================================

Combines product routes under the /api prefix.

==============================================================================
"""

from fastapi import APIRouter

from product_api.api.routes import products


class MainAPIRouter:
    """
    Main API router combining all resource routes.

    Provides a single entry point for all /api endpoints.
    """

    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter(prefix="/api")
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all resource routers."""
        self._router.include_router(products.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router
