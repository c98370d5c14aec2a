"""Module for getting recommendations.

Scores a user's activity log and resolves the top products from the catalog.
"""

import logging
import time
from typing import Dict, List, Tuple

from storefront.exceptions import RecommendationUnavailableError
from storefront.recommender.scoring import (
    RECOMMENDATION_LIMIT,
    rank_product_ids,
    score_activities,
)
from storefront.store.base import ActivityStore, CatalogStore
from storefront.store.models import Product

# Configure module logger
logger = logging.getLogger(__name__)


def get_recommendations(
    user_id: str,
    activity_store: ActivityStore,
    catalog_store: CatalogStore,
) -> List[Product]:
    """Get product recommendations for a user.

    Returns up to ``RECOMMENDATION_LIMIT`` products ranked by the user's
    activity score, or an empty list if the user has no activity.

    Raises:
        RecommendationUnavailableError: If either store fails.
    """
    products, _ = explain_recommendations(user_id, activity_store, catalog_store)
    return products


def explain_recommendations(
    user_id: str,
    activity_store: ActivityStore,
    catalog_store: CatalogStore,
) -> Tuple[List[Product], Dict[str, int]]:
    """Get recommendations along with the score of every candidate product.

    Args:
        user_id: User to recommend for.
        activity_store: Source of the user's activity records.
        catalog_store: Source of product details.

    Returns:
        Tuple of (ranked products, score per product id). Products deleted
        from the catalog are missing from the first element but still scored
        in the second.

    Raises:
        RecommendationUnavailableError: If either store fails. The store's
            exception is chained as ``__cause__``.
    """
    start_time = time.time()

    logger.info(
        "Starting recommendation generation",
        extra={"user_id": user_id},
    )

    try:
        activities = activity_store.find_by_user(user_id)

        if not activities:
            logger.info("No activities found for user", extra={"user_id": user_id})
            return [], {}

        scores = score_activities(activities)
        ranked_ids = rank_product_ids(scores, limit=RECOMMENDATION_LIMIT)

        logger.debug(
            "Scored activities",
            extra={
                "user_id": user_id,
                "num_activities": len(activities),
                "num_candidates": len(scores),
                "ranked_ids": ranked_ids,
            },
        )

        found = catalog_store.find_by_ids(ranked_ids)

    except Exception as e:
        total_time = time.time() - start_time
        logger.error(
            "Recommendation generation failed",
            extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": type(e).__name__,
                "total_time_ms": round(total_time * 1000, 2),
            },
        )
        raise RecommendationUnavailableError(user_id, e) from e

    # The catalog gives no ordering guarantee; restore score order
    by_id = {product.product_id: product for product in found}
    recommendations = [by_id[pid] for pid in ranked_ids if pid in by_id]

    total_time = time.time() - start_time
    logger.info(
        "Recommendations generated",
        extra={
            "user_id": user_id,
            "num_recommendations": len(recommendations),
            "num_missing": len(ranked_ids) - len(recommendations),
            "total_time_ms": round(total_time * 1000, 2),
        },
    )

    return recommendations, scores
