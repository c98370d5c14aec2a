"""In-memory store implementations.

Used by the API when no external database is configured, and by the tests.
All stores guard their state with a lock because FastAPI runs sync handlers
in a threadpool.
"""

import logging
import threading
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional

from storefront.store.base import (
    ActivityStore,
    CartStore,
    CatalogStore,
    OrderStore,
    UserStore,
)
from storefront.store.models import (
    ActivityRecord,
    Cart,
    CartItem,
    Order,
    OrderStatus,
    Product,
    Review,
    User,
)

# Configure module logger
logger = logging.getLogger(__name__)


class InMemoryActivityStore(ActivityStore):
    """Activity log kept in a per-user list."""

    def __init__(self, records: Optional[Iterable[ActivityRecord]] = None):
        self._lock = threading.Lock()
        self._by_user: Dict[str, List[ActivityRecord]] = defaultdict(list)
        for record in records or []:
            self._by_user[record.user_id].append(record)

    def find_by_user(self, user_id: str) -> List[ActivityRecord]:
        with self._lock:
            return list(self._by_user.get(user_id, []))

    def add(self, record: ActivityRecord) -> ActivityRecord:
        with self._lock:
            self._by_user[record.user_id].append(record)
        return record

    def __len__(self) -> int:
        with self._lock:
            return sum(len(records) for records in self._by_user.values())


class InMemoryCatalogStore(CatalogStore):
    """Product catalog kept in an insertion-ordered dict.

    ``find_by_ids`` returns matches in catalog order, not in request order,
    the same way a database ``$in`` query would.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._lock = threading.Lock()
        self._products: Dict[str, Product] = {}
        for product in products or []:
            self._products[product.product_id] = product

    def find_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        wanted = set(product_ids)
        with self._lock:
            return [p for pid, p in self._products.items() if pid in wanted]

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.get(product_id)

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def add(self, product: Product) -> Product:
        with self._lock:
            self._products[product.product_id] = product
        return product

    def delete(self, product_id: str) -> bool:
        with self._lock:
            return self._products.pop(product_id, None) is not None

    def add_review(self, product_id: str, review: Review) -> Optional[Product]:
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return None
            updated = product.model_copy(
                update={"reviews": [*product.reviews, review]}
            )
            self._products[product_id] = updated
            return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)


class InMemoryCartStore(CartStore):
    """One cart per user id."""

    def __init__(self):
        self._lock = threading.Lock()
        self._carts: Dict[str, Cart] = {}

    def get(self, user_id: str) -> Optional[Cart]:
        with self._lock:
            cart = self._carts.get(user_id)
            return cart.model_copy(deep=True) if cart is not None else None

    def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> Cart:
        with self._lock:
            cart = self._carts.setdefault(user_id, Cart(user_id=user_id))
            for item in cart.items:
                if item.product_id == product_id:
                    item.quantity += quantity
                    break
            else:
                cart.items.append(CartItem(product_id=product_id, quantity=quantity))
            return cart.model_copy(deep=True)

    def remove_item(self, user_id: str, product_id: str) -> Optional[Cart]:
        with self._lock:
            cart = self._carts.get(user_id)
            if cart is None:
                return None
            cart.items = [i for i in cart.items if i.product_id != product_id]
            return cart.model_copy(deep=True)

    def clear(self, user_id: str) -> None:
        with self._lock:
            self._carts.pop(user_id, None)


class InMemoryOrderStore(OrderStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._orders: Dict[str, Order] = {}

    def add(self, order: Order) -> Order:
        with self._lock:
            self._orders[order.order_id] = order
        return order

    def get(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def find_by_user(self, user_id: str) -> List[Order]:
        with self._lock:
            return [o for o in self._orders.values() if o.user_id == user_id]

    def list(self) -> List[Order]:
        with self._lock:
            return list(self._orders.values())

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return None
            updated = order.model_copy(update={"status": status})
            self._orders[order_id] = updated
            logger.info(
                "Order status updated",
                extra={"order_id": order_id, "status": status.value},
            )
            return updated

    def delete(self, order_id: str) -> bool:
        with self._lock:
            return self._orders.pop(order_id, None) is not None


class InMemoryUserStore(UserStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {}

    def add(self, user: User) -> User:
        with self._lock:
            self._users[user.user_id] = user
        return user

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        wanted = email.lower()
        with self._lock:
            for user in self._users.values():
                if user.email.lower() == wanted:
                    return user
        return None

    def list(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            updated = user.model_copy(update=changes)
            self._users[user_id] = updated
            return updated

    def delete(self, user_id: str) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None
