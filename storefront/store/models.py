"""Domain models for the storefront.

Pydantic models shared by the stores, the recommender and the API layer.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a new opaque identifier."""
    return uuid4().hex


class ActionKind(str, Enum):
    """Kinds of user activity that feed the recommender."""

    VIEWED = "viewed"
    ADDED_TO_CART = "added_to_cart"
    PURCHASED = "purchased"


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class ActivityRecord(BaseModel):
    """A single logged interaction between a user and a product.

    ``action`` is a plain string rather than ``ActionKind`` so that records
    with unrecognized actions can still be loaded and scored (at zero weight).

    Attributes:
        user_id: Identifier of the acting user.
        product_id: Identifier of the product interacted with.
        action: Action kind, normally one of ``ActionKind``.
        timestamp: When the interaction happened (UTC).
    """

    user_id: str
    product_id: str
    action: str
    timestamp: datetime = Field(default_factory=_utcnow)

    model_config = {"frozen": True}


class User(BaseModel):
    """A registered customer or admin.

    Only the bcrypt hash of the password is stored; API responses use
    ``UserPublic`` so the hash never leaves the service.
    """

    user_id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password_hash: str
    is_admin: bool = False
    created_at: datetime = Field(default_factory=_utcnow)


class UserPublic(BaseModel):
    user_id: str
    name: str
    email: str
    is_admin: bool
    created_at: datetime


def _check_password_bytes(value: str) -> str:
    # bcrypt only accepts 72 bytes of input
    if len(value.encode("utf-8")) > 72:
        raise ValueError("Password must be at most 72 bytes.")
    return value


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class UserUpdate(BaseModel):
    """Partial update; fields left as None are unchanged."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    password: Optional[str] = Field(default=None, min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _check_password_bytes(value)


class Review(BaseModel):
    user_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=_utcnow)


class Product(BaseModel):
    """A catalog product.

    Attributes:
        product_id: Catalog identifier.
        name: Display name.
        price: Unit price, strictly positive.
        description: Free-text description.
        image_url: Reference to the product image.
        quantity: Units in stock.
        category: Catalog category.
        reviews: Customer reviews, oldest first.
    """

    product_id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=0)
    category: str = Field(..., min_length=1)
    reviews: List[Review] = Field(default_factory=list)


class CartItem(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class Cart(BaseModel):
    """Shopping cart owned by exactly one user."""

    user_id: str
    items: List[CartItem] = Field(default_factory=list)


class Order(BaseModel):
    order_id: str = Field(default_factory=new_id)
    user_id: str
    items: List[CartItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = Field(default_factory=_utcnow)
