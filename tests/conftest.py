"""Shared pytest fixtures for the Coffee Shop API tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from coffee_shop_api.app.core.config import Settings
from coffee_shop_api.app.core.store import build_catalog, build_ledger
from coffee_shop_api.app.main import create_app
from coffee_shop_api.app.services.catalog_service import CatalogService
from coffee_shop_api.app.services.order_service import OrderService

BANGKOK = timezone(timedelta(hours=7))


@pytest.fixture
def catalog_service() -> CatalogService:
    return CatalogService(build_catalog())


@pytest.fixture
def ledger():
    return build_ledger(seed=False)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 3, 15, 30, 45, 123456, tzinfo=BANGKOK)


@pytest.fixture
def order_service(catalog_service, ledger, fixed_now) -> OrderService:
    """Order service with an empty ledger and a frozen clock."""
    return OrderService(catalog_service, ledger, clock=lambda: fixed_now)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_prefix="", delivery_minutes=10, seed_sample_data=True)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    """Create a test client for a freshly built app."""
    return TestClient(app)
