"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, an isolated catalog, the application and test clients.

==============================================================================
"""

import pytest
from typing import Dict, Generator
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_api.catalog import ProductCatalog
from product_api.config import Settings
from product_api.main import Application


TEST_API_KEY = "unit-test-api-key"


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

def make_settings(**overrides) -> Settings:
    """Settings that ignore any local .env file."""
    values = {"api_key": TEST_API_KEY, "app_env": "development"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    """Development settings with a known API key."""
    return make_settings()


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def catalog() -> ProductCatalog:
    """A freshly seeded catalog for each test."""
    return ProductCatalog.with_samples()


@pytest.fixture(scope="function")
def app(settings: Settings, catalog: ProductCatalog) -> FastAPI:
    """Application serving the per-test catalog."""
    return Application(settings, catalog).app


@pytest.fixture(scope="function")
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def production_client(catalog: ProductCatalog) -> Generator[TestClient, None, None]:
    """Test client for an application running in production mode."""
    app = Application(make_settings(app_env="production"), catalog).app
    with TestClient(app) as test_client:
        yield test_client


# ============================================================================
# HEADER FIXTURES
# ============================================================================

@pytest.fixture
def auth_headers() -> Dict[str, str]:
    """Headers carrying the valid API key."""
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def new_product() -> Dict[str, object]:
    """A valid creation payload."""
    return {"name": "Mouse", "price": 25, "category": "Electronics"}
