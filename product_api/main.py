"""
==============================================================================
Product Catalog API - Application Entry Point
==============================================================================

FastAPI application with:
- Product CRUD endpoints over an in-memory catalog
- Request logging middleware
- API-key protection on mutating routes
- One global error translator

Usage:
------
    # Development
    APP_ENV=development uvicorn product_api.main:app --reload

    # Production
    API_KEY=... uvicorn product_api.main:app --host 0.0.0.0 --port 3000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_api.api import api_router, root_router
from product_api.catalog import ProductCatalog
from product_api.config import Settings, get_settings
from product_api.core import RequestLoggerMiddleware, register_exception_handlers


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Owns the settings and the product catalog of one application
    instance. Both can be injected, which is how tests get an isolated
    catalog per test case.

    Example:
        >>> application = Application(Settings(api_key="secret"))
        >>> len(application.catalog)
        5
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[ProductCatalog] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
            catalog: Catalog to serve (fresh sample catalog if None)
        """
        self._settings = settings or get_settings()
        self._catalog = catalog if catalog is not None else ProductCatalog.with_samples()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=self._settings.app_version,
            description="In-memory product catalog with API-key protected writes",
            lifespan=self._lifespan,
        )

        app.state.settings = self._settings
        app.state.catalog = self._catalog

        self._configure_middleware(app)
        register_exception_handlers(app)
        self._register_routers(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"Starting {self._settings.app_name} v{self._settings.app_version}")
        logger.info(f"Environment: {self._settings.app_env}")
        logger.info(f"Catalog holds {len(self._catalog)} products")
        logger.info(f"Listening on http://{self._settings.host}:{self._settings.port}")
        logger.info("API key required for POST, PUT, DELETE operations (x-api-key header)")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        logger.info("Shutting down")

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Configure application middleware.

        The request logger is added last so it wraps everything else and
        sees each request first.
        """
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        app.add_middleware(RequestLoggerMiddleware)

    def _register_routers(self, app: FastAPI) -> None:
        app.include_router(root_router)
        app.include_router(api_router)

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application(settings)
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "product_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()
