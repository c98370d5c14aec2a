"""Tests for the recommendation module."""

from typing import Iterable, List

import pytest

from storefront.api import exceptions as api_exceptions
from storefront.exceptions import RecommendationUnavailableError
from storefront.recommender.infer import explain_recommendations, get_recommendations
from storefront.store.memory import InMemoryActivityStore, InMemoryCatalogStore
from storefront.store.models import Product


class UnavailableActivityStore(InMemoryActivityStore):
    def find_by_user(self, user_id):
        raise ConnectionError("activity store unreachable")


class UnavailableCatalogStore(InMemoryCatalogStore):
    def find_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        raise TimeoutError("catalog query timed out")


class ReversedCatalogStore(InMemoryCatalogStore):
    """Returns matches in reverse catalog order."""

    def find_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        return list(reversed(super().find_by_ids(product_ids)))


class RecordingCatalogStore(InMemoryCatalogStore):
    def __init__(self, products):
        super().__init__(products)
        self.requested: List[List[str]] = []

    def find_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        product_ids = list(product_ids)
        self.requested.append(product_ids)
        return super().find_by_ids(product_ids)


@pytest.fixture
def catalog(make_product):
    return InMemoryCatalogStore(make_product(f"p{i}") for i in range(1, 21))


def _ids(products: List[Product]) -> List[str]:
    return [p.product_id for p in products]


def test_recommendations_example(catalog, make_activities):
    activities = InMemoryActivityStore(make_activities("u1", [
        ("p1", "viewed"),
        ("p1", "viewed"),
        ("p2", "purchased"),
        ("p3", "added_to_cart"),
    ]))

    result = get_recommendations("u1", activities, catalog)

    assert _ids(result) == ["p2", "p3", "p1"]
    assert all(isinstance(p, Product) for p in result)


def test_no_activity_returns_empty(catalog):
    assert get_recommendations("nobody", InMemoryActivityStore(), catalog) == []


def test_no_activity_skips_catalog_query(make_product):
    catalog = RecordingCatalogStore([make_product("p1")])

    get_recommendations("nobody", InMemoryActivityStore(), catalog)

    assert catalog.requested == []


def test_only_own_activity_is_scored(catalog, make_activities):
    activities = InMemoryActivityStore(
        make_activities("u1", [("p1", "viewed")])
        + make_activities("u2", [("p2", "purchased"), ("p3", "purchased")])
    )

    assert _ids(get_recommendations("u1", activities, catalog)) == ["p1"]


def test_deleted_product_is_omitted(catalog, make_activities):
    activities = InMemoryActivityStore(make_activities("u1", [("p9", "viewed")]))
    catalog.delete("p9")

    assert get_recommendations("u1", activities, catalog) == []


def test_deleted_top_product_is_omitted_without_backfill(catalog, make_activities):
    """A stale id leaves a gap that is not filled by the 11th candidate."""
    pairs = [(f"p{i}", "viewed") for i in range(1, 12)]
    pairs.append(("p1", "purchased"))
    activities = InMemoryActivityStore(make_activities("u1", pairs))
    catalog.delete("p1")

    result = get_recommendations("u1", activities, catalog)

    # p1 ranked first, then p2..p10; p11 is the 11th candidate and stays out
    assert _ids(result) == [f"p{i}" for i in range(2, 11)]
    assert len(result) == 9


def test_never_more_than_ten(catalog, make_activities):
    pairs = [(f"p{i}", "viewed") for i in range(1, 21)]
    activities = InMemoryActivityStore(make_activities("u1", pairs))

    result = get_recommendations("u1", activities, catalog)

    assert len(result) == 10
    assert _ids(result) == [f"p{i}" for i in range(1, 11)]


def test_only_top_ten_ids_are_requested(make_product, make_activities):
    catalog = RecordingCatalogStore([make_product(f"p{i}") for i in range(1, 16)])
    pairs = [(f"p{i}", "viewed") for i in range(1, 16)]
    activities = InMemoryActivityStore(make_activities("u1", pairs))

    get_recommendations("u1", activities, catalog)

    assert catalog.requested == [[f"p{i}" for i in range(1, 11)]]


def test_result_follows_score_order_not_store_order(make_product, make_activities):
    catalog = ReversedCatalogStore(make_product(f"p{i}") for i in range(1, 5))
    activities = InMemoryActivityStore(make_activities("u1", [
        ("p4", "viewed"),
        ("p2", "purchased"),
        ("p1", "added_to_cart"),
        ("p3", "viewed"),
        ("p3", "viewed"),
    ]))

    result = get_recommendations("u1", activities, catalog)

    assert _ids(result) == ["p2", "p1", "p3", "p4"]


def test_recommendations_are_idempotent(catalog, make_activities):
    activities = InMemoryActivityStore(make_activities("u1", [
        ("p5", "viewed"),
        ("p6", "viewed"),
        ("p7", "added_to_cart"),
        ("p5", "viewed"),
        ("p8", "viewed"),
    ]))

    first = get_recommendations("u1", activities, catalog)
    second = get_recommendations("u1", activities, catalog)

    assert first == second
    assert _ids(first) == ["p7", "p5", "p6", "p8"]


def test_unknown_actions_do_not_fail_request(catalog, make_activities):
    activities = InMemoryActivityStore(make_activities("u1", [
        ("p1", "bogus"),
        ("p2", "viewed"),
    ]))

    result = get_recommendations("u1", activities, catalog)

    assert _ids(result) == ["p2", "p1"]


def test_explain_returns_all_scores(catalog, make_activities):
    activities = InMemoryActivityStore(make_activities("u1", [
        ("p1", "viewed"),
        ("p2", "purchased"),
        ("p99", "viewed"),
    ]))

    products, scores = explain_recommendations("u1", activities, catalog)

    assert _ids(products) == ["p2", "p1"]
    assert scores == {"p1": 1, "p2": 5, "p99": 1}


def test_activity_store_failure_raises_unavailable(catalog):
    with pytest.raises(RecommendationUnavailableError) as exc_info:
        get_recommendations("u1", UnavailableActivityStore(), catalog)

    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert exc_info.value.status_code == 500
    assert exc_info.value.details["error_type"] == "ConnectionError"


def test_catalog_store_failure_raises_unavailable(make_activities):
    activities = InMemoryActivityStore(make_activities("u1", [("p1", "viewed")]))

    with pytest.raises(RecommendationUnavailableError) as exc_info:
        get_recommendations("u1", activities, UnavailableCatalogStore())

    assert isinstance(exc_info.value.__cause__, TimeoutError)


def test_unavailable_error_is_shared_with_api_layer():
    assert api_exceptions.RecommendationUnavailableError is RecommendationUnavailableError
    assert RecommendationUnavailableError.__module__ == "storefront.exceptions"
