"""
Shared pytest fixtures for the Storefront test suite.

Provides:
  - ``make_product``: factory for valid catalog products.
  - ``stores``: fresh in-memory stores, wired into the app for API tests.
  - ``client``: a ``TestClient`` bound to the app using ``stores``.
  - ``auth_headers``: factory for bearer headers for a given user.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Generator, List, Tuple

import pytest
from fastapi.testclient import TestClient

from storefront.api.auth import create_access_token
from storefront.api.dependencies import Stores, get_stores
from storefront.api.main import app
from storefront.api.metrics import metrics_service
from storefront.store.memory import (
    InMemoryActivityStore,
    InMemoryCartStore,
    InMemoryCatalogStore,
    InMemoryOrderStore,
    InMemoryUserStore,
)
from storefront.store.models import ActivityRecord, Product


def _make_product(product_id: str, **overrides) -> Product:
    fields = {
        "product_id": product_id,
        "name": f"Product {product_id}",
        "price": 9.99,
        "description": f"Description of {product_id}",
        "image_url": f"https://example.com/{product_id}.jpg",
        "quantity": 5,
        "category": "general",
    }
    fields.update(overrides)
    return Product(**fields)


def _make_activities(user_id: str, pairs: List[Tuple[str, str]]) -> List[ActivityRecord]:
    """Build records for ``(product_id, action)`` pairs, one second apart."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        ActivityRecord(
            user_id=user_id,
            product_id=product_id,
            action=action,
            timestamp=start + timedelta(seconds=i),
        )
        for i, (product_id, action) in enumerate(pairs)
    ]


@pytest.fixture
def make_product() -> Callable[..., Product]:
    return _make_product


@pytest.fixture
def make_activities() -> Callable[[str, List[Tuple[str, str]]], List[ActivityRecord]]:
    return _make_activities


@pytest.fixture
def stores() -> Stores:
    """Empty in-memory stores."""
    return Stores(
        activities=InMemoryActivityStore(),
        catalog=InMemoryCatalogStore(),
        carts=InMemoryCartStore(),
        orders=InMemoryOrderStore(),
        users=InMemoryUserStore(),
    )


@pytest.fixture
def client(stores: Stores) -> Generator[TestClient, None, None]:
    """Test client whose routes see the ``stores`` fixture."""
    app.dependency_overrides[get_stores] = lambda: stores
    metrics_service.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
    metrics_service.reset()


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    def _headers(user_id: str = "u1", is_admin: bool = False) -> Dict[str, str]:
        token = create_access_token(user_id, is_admin=is_admin)
        return {"Authorization": f"Bearer {token}"}

    return _headers
