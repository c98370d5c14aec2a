"""Custom exceptions for the Storefront API.

Defines specific exception types for better error handling and reporting.
The base class and ``RecommendationUnavailableError`` live in
``storefront.exceptions`` and are re-exported here.
"""

from storefront.exceptions import RecommendationUnavailableError, StorefrontException

__all__ = [
    "StorefrontException",
    "RecommendationUnavailableError",
    "ProductNotFoundError",
    "UserNotFoundError",
    "EmailAlreadyRegisteredError",
    "CartNotFoundError",
    "OrderNotFoundError",
    "InvalidOrderStatusError",
    "PermissionDeniedError",
]


class ProductNotFoundError(StorefrontException):
    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product {product_id} not found",
            status_code=404,
            details={"product_id": product_id},
        )


class CartNotFoundError(StorefrontException):
    """Raised when a user has no cart, or an empty one where items are needed."""

    def __init__(self, user_id: str):
        super().__init__(
            message="Cart not found",
            status_code=404,
            details={"user_id": user_id},
        )


class OrderNotFoundError(StorefrontException):
    def __init__(self, order_id: str):
        super().__init__(
            message=f"Order {order_id} not found",
            status_code=404,
            details={"order_id": order_id},
        )


class InvalidOrderStatusError(StorefrontException):
    def __init__(self, status: str, allowed: list):
        super().__init__(
            message=f"Invalid status '{status}'",
            status_code=400,
            details={"status": status, "allowed": allowed},
        )


class PermissionDeniedError(StorefrontException):
    def __init__(self, message: str = "Access denied"):
        super().__init__(message=message, status_code=403)


class UserNotFoundError(StorefrontException):
    def __init__(self, user_id: str):
        super().__init__(
            message=f"User {user_id} not found",
            status_code=404,
            details={"user_id": user_id},
        )


class EmailAlreadyRegisteredError(StorefrontException):
    def __init__(self, email: str):
        super().__init__(
            message=f"Email {email} is already registered",
            status_code=400,
            details={"email": email},
        )
