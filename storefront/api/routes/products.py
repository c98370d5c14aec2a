"""Product and review endpoints for the Storefront API."""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, HttpUrl, field_validator

from storefront.api.auth import CurrentUser, get_current_user, get_optional_user
from storefront.api.dependencies import Stores, get_stores
from storefront.api.exceptions import ProductNotFoundError
from storefront.store.models import ActionKind, Product, Review

# Configure module logger
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["products"],
)


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    image_url: HttpUrl
    quantity: int = Field(default=1, gt=0)
    category: str = Field(..., min_length=1)


class ReviewCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5, description="Rating between 1 and 5")
    comment: str = Field(..., min_length=1)

    @field_validator("comment")
    @classmethod
    def comment_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Comment cannot be empty.")
        return value


@router.get("", response_model=List[Product])
def list_products(stores: Stores = Depends(get_stores)) -> List[Product]:
    return stores.catalog.list()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    stores: Stores = Depends(get_stores),
) -> Product:
    product = stores.catalog.add(Product(**payload.model_dump(mode="json")))
    logger.info("Product created", extra={"product_id": product.product_id})
    return product


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    user: Optional[CurrentUser] = Depends(get_optional_user),
    stores: Stores = Depends(get_stores),
) -> Product:
    """Get a single product.

    Authenticated callers get a ``viewed`` activity recorded.
    """
    product = stores.catalog.get(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)

    if user is not None:
        stores.recorder.record(user.user_id, product_id, ActionKind.VIEWED)
    return product


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    stores: Stores = Depends(get_stores),
) -> Dict[str, str]:
    if not stores.catalog.delete(product_id):
        raise ProductNotFoundError(product_id)
    logger.info("Product deleted", extra={"product_id": product_id})
    return {"message": "Deleted product"}


@router.post(
    "/{product_id}/reviews",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
)
def add_review(
    product_id: str,
    payload: ReviewCreate,
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> Product:
    """Attach a review by the authenticated user to a product."""
    review = Review(user_id=user.user_id, rating=payload.rating, comment=payload.comment)

    product = stores.catalog.add_review(product_id, review)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product
