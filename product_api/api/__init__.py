"""API routers for the Product Catalog API."""

from .router import api_router
from .routes import root

root_router = root.router

__all__ = ["api_router", "root_router"]
