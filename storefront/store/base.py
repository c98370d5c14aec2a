"""Abstract store interfaces.

The recommender and API depend only on these interfaces, so any backing
database can be plugged in by implementing them.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from storefront.store.models import (
    ActivityRecord,
    Cart,
    Order,
    OrderStatus,
    Product,
    Review,
    User,
)


class ActivityStore(ABC):
    """Append-only log of user activity records."""

    @abstractmethod
    def find_by_user(self, user_id: str) -> List[ActivityRecord]:
        """Return every activity record for a user, in any order."""

    @abstractmethod
    def add(self, record: ActivityRecord) -> ActivityRecord:
        """Persist a new activity record."""


class CatalogStore(ABC):
    """Product catalog."""

    @abstractmethod
    def find_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        """Return the products matching the given ids.

        Unknown ids are skipped. No ordering guarantee is made.
        """

    @abstractmethod
    def get(self, product_id: str) -> Optional[Product]:
        """Return a single product, or None if it does not exist."""

    @abstractmethod
    def list(self) -> List[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert or replace a product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Delete a product. Returns False if it did not exist."""

    @abstractmethod
    def add_review(self, product_id: str, review: Review) -> Optional[Product]:
        """Append a review to a product. Returns None if the product is gone."""


class CartStore(ABC):
    """Per-user shopping carts."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[Cart]:
        """Return the user's cart, or None if they have none."""

    @abstractmethod
    def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> Cart:
        """Add a product to the user's cart, creating the cart if needed."""

    @abstractmethod
    def remove_item(self, user_id: str, product_id: str) -> Optional[Cart]:
        """Remove a product from the user's cart. Returns None if no cart."""

    @abstractmethod
    def clear(self, user_id: str) -> None:
        """Drop the user's cart."""


class OrderStore(ABC):
    """Placed orders."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order."""

    @abstractmethod
    def get(self, order_id: str) -> Optional[Order]:
        """Return an order by id, or None."""

    @abstractmethod
    def find_by_user(self, user_id: str) -> List[Order]:
        """Return all orders placed by a user."""

    @abstractmethod
    def list(self) -> List[Order]:
        """Return all orders."""

    @abstractmethod
    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """Set an order's status. Returns None if the order does not exist."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Delete an order. Returns False if it did not exist."""


class UserStore(ABC):
    """Registered users."""

    @abstractmethod
    def add(self, user: User) -> User:
        """Persist a new user."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[User]:
        """Return a user by id, or None."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user registered with an email (case-insensitive), or None."""

    @abstractmethod
    def list(self) -> List[User]:
        """Return all users."""

    @abstractmethod
    def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """Apply field changes to a user. Returns None if the user does not exist."""

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Delete a user. Returns False if they did not exist."""
