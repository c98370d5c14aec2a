"""Core exceptions for Storefront.

Shared by the recommender and the store layer; the API renders them using
``status_code`` and ``details``.
"""

from typing import Any, Dict, Optional


class StorefrontException(Exception):
    """Base exception for Storefront errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code for API responses
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class RecommendationUnavailableError(StorefrontException):
    """Raised when recommendations cannot be produced because a store failed."""

    def __init__(self, user_id: str, error: Exception):
        message = f"Recommendations unavailable for user {user_id}: {str(error)}"
        super().__init__(
            message=message,
            status_code=500,
            details={
                "user_id": user_id,
                "error": str(error),
                "error_type": type(error).__name__,
            },
        )
