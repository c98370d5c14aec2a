"""Cart endpoints for the Storefront API.

Every authenticated user has their own cart, keyed by user id.
"""

import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from storefront.api.auth import CurrentUser, get_current_user
from storefront.api.dependencies import Stores, get_stores
from storefront.api.exceptions import CartNotFoundError, ProductNotFoundError
from storefront.store.models import ActionKind, Cart

# Configure module logger
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/cart",
    tags=["cart"],
)


class CartItemAdd(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)


@router.get("", response_model=Cart)
def get_cart(
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Cart:
    cart = stores.carts.get(user.user_id)
    if cart is None:
        raise CartNotFoundError(user.user_id)
    return cart


@router.post("", response_model=Cart, status_code=status.HTTP_201_CREATED)
def add_to_cart(
    payload: CartItemAdd,
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Cart:
    """Add a product to the caller's cart and record an ``added_to_cart`` activity."""
    if stores.catalog.get(payload.product_id) is None:
        raise ProductNotFoundError(payload.product_id)

    stores.recorder.record(user.user_id, payload.product_id, ActionKind.ADDED_TO_CART)
    return stores.carts.add_item(user.user_id, payload.product_id, payload.quantity)


@router.delete("/{product_id}", response_model=Cart)
def remove_from_cart(
    product_id: str,
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Cart:
    cart = stores.carts.remove_item(user.user_id, product_id)
    if cart is None:
        raise CartNotFoundError(user.user_id)
    return cart
