"""User endpoints for the Storefront API.

Plain CRUD over registered users. Passwords are stored as bcrypt hashes and
responses use ``UserPublic``, so neither the password nor its hash is ever
returned.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, status

from storefront.api.auth import hash_password
from storefront.api.dependencies import Stores, get_stores
from storefront.api.exceptions import EmailAlreadyRegisteredError, UserNotFoundError
from storefront.store.models import User, UserCreate, UserPublic, UserUpdate

# Configure module logger
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


def _get_user_or_404(user_id: str, stores: Stores) -> User:
    user = stores.users.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.get("", response_model=List[UserPublic])
def list_users(stores: Stores = Depends(get_stores)) -> List[User]:
    return stores.users.list()


@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    stores: Stores = Depends(get_stores),
) -> User:
    if stores.users.find_by_email(payload.email) is not None:
        raise EmailAlreadyRegisteredError(payload.email)

    user = stores.users.add(
        User(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
    )
    logger.info("User created", extra={"user_id": user.user_id})
    return user


@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: str, stores: Stores = Depends(get_stores)) -> User:
    return _get_user_or_404(user_id, stores)


@router.patch("/{user_id}", response_model=UserPublic)
def update_user(
    user_id: str,
    payload: UserUpdate,
    stores: Stores = Depends(get_stores),
) -> User:
    """Update the fields present in the request body."""
    _get_user_or_404(user_id, stores)

    changes = payload.model_dump(exclude_none=True)
    if "email" in changes:
        owner = stores.users.find_by_email(changes["email"])
        if owner is not None and owner.user_id != user_id:
            raise EmailAlreadyRegisteredError(changes["email"])
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    updated = stores.users.update(user_id, changes)
    if updated is None:
        raise UserNotFoundError(user_id)
    return updated


@router.delete("/{user_id}")
def delete_user(user_id: str, stores: Stores = Depends(get_stores)) -> Dict[str, str]:
    if not stores.users.delete(user_id):
        raise UserNotFoundError(user_id)
    logger.info("User deleted", extra={"user_id": user_id})
    return {"message": "Deleted user"}
