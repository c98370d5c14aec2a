"""Recommendation endpoints for the Storefront API.

This module exposes the activity-based recommender to authenticated users.
"""

import logging
import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.api.auth import CurrentUser, get_current_user
from storefront.api.dependencies import Stores, get_stores
from storefront.api.exceptions import RecommendationUnavailableError
from storefront.api.metrics import metrics_service
from storefront.recommender.infer import get_recommendations
from storefront.store.models import Product

# Configure module logger
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"],
)


@router.get("", response_model=List[Product])
def recommend_for_current_user(
    user: CurrentUser = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
) -> List[Product]:
    """Get product recommendations for the authenticated user.

    Products are ranked by the caller's logged activity (views, cart
    additions, purchases). Users with no activity get an empty list.

    Returns:
        Up to 10 products, most relevant first.

    Raises:
        HTTPException: 401 if unauthenticated, 500 if a store is unavailable.

    Example:
        GET /recommendations
        Authorization: Bearer <token>
    """
    start_time = time.time()
    logger.info("Fetching recommendations", extra={"user_id": user.user_id})

    try:
        recommendations = get_recommendations(
            user.user_id, stores.activities, stores.catalog
        )
    except RecommendationUnavailableError as e:
        metrics_service.record_failure()
        logger.error(
            "Error fetching recommendations",
            extra={"user_id": user.user_id, **e.details},
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching recommendations",
        )

    metrics_service.record_request(
        latency_ms=(time.time() - start_time) * 1000,
        num_results=len(recommendations),
    )
    return recommendations
