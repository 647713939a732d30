"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules,
# which build their module-level apps at import time
os.environ["TRACING_ENABLED"] = "false"
os.environ["METRICS_ENABLED"] = "false"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from shared.config.settings import Settings, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings fresh from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with seeding and observability exporters turned off."""
    return Settings(
        seed_sample_data=False,
        log_level="WARNING",
        tracing_enabled=False,
        metrics_enabled=False,
        upstreams={
            "books": "http://books.test",
            "users": "http://users.test",
            "orders": "http://orders.test",
            "reviews": "http://reviews.test",
        },
    )


@pytest.fixture
def order_service():
    """Provide an OrderService backed by its own empty store."""
    from services.order_service.service import OrderService

    return OrderService()


@pytest.fixture
def book_service():
    """Provide a BookService backed by its own empty store."""
    from services.book_service.service import BookService

    return BookService()


@pytest.fixture
def order_client(test_settings: Settings, order_service) -> Generator[TestClient, None, None]:
    """Provide a test client for an isolated Orders service app.

    Yields:
        TestClient: client whose app shares ``order_service``.
    """
    from services.order_service.main import create_order_app

    app = create_order_app(test_settings, service=order_service, observability=False)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def book_client(test_settings: Settings, book_service) -> Generator[TestClient, None, None]:
    """Provide a test client for an isolated Books service app."""
    from services.book_service.main import create_book_app

    app = create_book_app(test_settings, service=book_service, observability=False)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_items() -> list[dict]:
    """Two valid line items as they arrive over the wire."""
    return [
        {"bookId": "book-1", "quantity": 2, "unitPrice": 12.5},
        {"bookId": "book-2", "quantity": 1, "unitPrice": 20.0},
    ]
