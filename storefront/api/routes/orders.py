"""Order endpoints for the Storefront API.

Placing an order turns the caller's cart into an order, records a
``purchased`` activity per item and clears the cart.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from storefront.api.auth import CurrentUser, get_current_user
from storefront.api.dependencies import Stores, get_stores
from storefront.api.exceptions import (
    CartNotFoundError,
    InvalidOrderStatusError,
    OrderNotFoundError,
    PermissionDeniedError,
)
from storefront.store.models import ActionKind, Order, OrderStatus

# Configure module logger
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/orders",
    tags=["orders"],
)


class OrderStatusUpdate(BaseModel):
    # Plain string so an unknown status maps to 400 rather than 422
    status: str


def _get_visible_order(order_id: str, user: CurrentUser, stores: Stores) -> Order:
    """Fetch an order the caller may see: their own, or any for admins."""
    order = stores.orders.get(order_id)
    if order is None or (not user.is_admin and order.user_id != user.user_id):
        raise OrderNotFoundError(order_id)
    return order


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
def place_order(
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Order:
    cart = stores.carts.get(user.user_id)
    if cart is None or not cart.items:
        raise CartNotFoundError(user.user_id)

    order = stores.orders.add(Order(user_id=user.user_id, items=cart.items))
    for item in order.items:
        stores.recorder.record(user.user_id, item.product_id, ActionKind.PURCHASED)
    stores.carts.clear(user.user_id)

    logger.info(
        "New order created",
        extra={
            "order_id": order.order_id,
            "user_id": user.user_id,
            "num_items": len(order.items),
        },
    )
    return order


@router.get("", response_model=List[Order])
def list_orders(
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> List[Order]:
    """List the caller's orders, or every order for admins."""
    if user.is_admin:
        return stores.orders.list()
    return stores.orders.find_by_user(user.user_id)


@router.get("/{order_id}", response_model=Order)
def get_order(
    order_id: str,
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Order:
    return _get_visible_order(order_id, user, stores)


@router.put("/{order_id}", response_model=Order)
def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Order:
    """Update an order's status (admin only)."""
    if not user.is_admin:
        raise PermissionDeniedError()

    allowed = [s.value for s in OrderStatus]
    if payload.status not in allowed:
        raise InvalidOrderStatusError(payload.status, allowed)

    order = stores.orders.update_status(order_id, OrderStatus(payload.status))
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


@router.delete("/{order_id}")
def delete_order(
    order_id: str,
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Dict[str, str]:
    order = _get_visible_order(order_id, user, stores)
    stores.orders.delete(order.order_id)
    return {"message": "Order deleted"}
