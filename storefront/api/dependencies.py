"""Store wiring for the API.

Builds the stores once per process and hands them to route handlers through
FastAPI dependencies. Tests swap them out with ``app.dependency_overrides``.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from storefront.config import settings
from storefront.store.base import (
    ActivityStore,
    CartStore,
    CatalogStore,
    OrderStore,
    UserStore,
)
from storefront.store.loaders import load_activity_log, load_catalog, load_if_present
from storefront.store.memory import (
    InMemoryActivityStore,
    InMemoryCartStore,
    InMemoryCatalogStore,
    InMemoryOrderStore,
    InMemoryUserStore,
)
from storefront.store.recorder import ActivityRecorder

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class Stores:
    """Bundle of the stores the API talks to."""

    activities: ActivityStore
    catalog: CatalogStore
    carts: CartStore
    orders: OrderStore
    users: UserStore
    recorder: ActivityRecorder = field(init=False)

    def __post_init__(self) -> None:
        self.recorder = ActivityRecorder(self.activities)


# Cache for the process-wide stores
_stores_cache: Optional[Stores] = None


def build_stores(
    activity_csv: Optional[str] = None,
    catalog_csv: Optional[str] = None,
) -> Stores:
    """Create in-memory stores, seeded from CSV files when given."""
    activities = InMemoryActivityStore(load_if_present(activity_csv, load_activity_log))
    catalog = InMemoryCatalogStore(load_if_present(catalog_csv, load_catalog))

    logger.info(
        "Stores initialized",
        extra={"num_activities": len(activities), "num_products": len(catalog)},
    )
    return Stores(
        activities=activities,
        catalog=catalog,
        carts=InMemoryCartStore(),
        orders=InMemoryOrderStore(),
        users=InMemoryUserStore(),
    )


def get_stores() -> Stores:
    """FastAPI dependency returning the process-wide stores.

    Uses a module-level cache so the seed files are only read once.
    """
    global _stores_cache

    if _stores_cache is None:
        _stores_cache = build_stores(settings.activity_csv, settings.catalog_csv)
    return _stores_cache


def reset_stores() -> None:
    """Drop the cached stores so the next request rebuilds them."""
    global _stores_cache
    _stores_cache = None
