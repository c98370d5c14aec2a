"""
Authentication dependencies for FastAPI routes.

Tokens are issued elsewhere; this module only verifies bearer JWTs and maps
them to the calling user's identity.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from storefront.config import settings

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity of an authenticated caller"""

    user_id: str
    is_admin: bool = False


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(
    user_id: str, is_admin: bool = False, expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed JWT for a user (used by scripts and tests)"""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": user_id, "is_admin": is_admin, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and validate a JWT token"""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[CurrentUser]:
    """
    Dependency to get the current user if a valid token is sent, or None.
    Does not raise for unauthenticated requests.
    """
    if not credentials:
        return None

    payload = decode_token(credentials.credentials)
    if not payload:
        return None

    # Older tokens carry "id" and "isAdmin" instead of "sub" and "is_admin"
    user_id = payload.get("sub") or payload.get("id")
    if not user_id:
        return None

    is_admin = payload.get("is_admin", payload.get("isAdmin", False))
    return CurrentUser(user_id=str(user_id), is_admin=bool(is_admin))


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """
    Dependency to get the current authenticated user.
    Raises 401 if not authenticated.
    """
    if not credentials:
        raise _unauthorized("Not authenticated")

    user = get_optional_user(credentials)
    if user is None:
        raise _unauthorized("Invalid or expired token")

    return user
