"""Pytest configuration and fixtures for API integration tests."""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api import dependencies
from api.main import app
from tableside.settings import get_app_settings


@pytest.fixture
def app_env(monkeypatch):
    """In-memory storage, 10 tables, seeded menu and an always-approving gateway."""
    monkeypatch.setenv("RESTAURANT_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("RESTAURANT_TABLE_COUNT", "10")
    monkeypatch.setenv("RESTAURANT_SEED_CATALOG", "true")
    monkeypatch.setenv("PAYMENT_SUCCESS_RATE", "1.0")
    monkeypatch.setenv("PAYMENT_MIN_DELAY_MS", "0")
    monkeypatch.setenv("PAYMENT_MAX_DELAY_MS", "0")
    monkeypatch.setenv("NOTIFY_WEBHOOK_ENABLED", "false")

    get_app_settings.cache_clear()
    dependencies.reset_dependencies()
    yield
    get_app_settings.cache_clear()
    dependencies.reset_dependencies()


@pytest.fixture
def test_client(app_env) -> Generator[TestClient, None, None]:
    """Create FastAPI test client (startup seeding included)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def notifications(test_client):
    """Notifications recorded by the logging notification service."""
    service = dependencies.get_notification_service()
    service.clear()
    return service


@pytest.fixture
def menu(test_client):
    """Product ids by name, from the seeded catalog."""
    products = {}
    for category in test_client.get("/api/v1/categories").json():
        response = test_client.get(f"/api/v1/categories/{category['id']}/products")
        for product in response.json():
            products[product["name"]] = product
    return products
