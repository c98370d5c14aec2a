"""Activity scoring.

Turns a user's activity records into per-product weights and ranks them.
"""

import logging
from typing import Dict, Iterable, List

from storefront.store.models import ActionKind, ActivityRecord

# Configure module logger
logger = logging.getLogger(__name__)

# Weight each action contributes to its product's score
ACTION_WEIGHTS: Dict[str, int] = {
    ActionKind.VIEWED.value: 1,
    ActionKind.ADDED_TO_CART.value: 3,
    ActionKind.PURCHASED.value: 5,
}

# Maximum number of products returned per recommendation request
RECOMMENDATION_LIMIT = 10


def score_activities(activities: Iterable[ActivityRecord]) -> Dict[str, int]:
    """Aggregate activity records into a score per product.

    Every product that appears in at least one record gets an entry, even if
    all of its records carry unknown actions (score 0). Keys are kept in
    first-seen order, which ``rank_product_ids`` relies on for tie-breaking.

    Args:
        activities: Activity records for a single user.

    Returns:
        Mapping from product id to accumulated weight.

    Example:
        >>> score_activities(records)
        {'p1': 2, 'p2': 5, 'p3': 3}
    """
    scores: Dict[str, int] = {}
    unknown = 0

    for activity in activities:
        weight = ACTION_WEIGHTS.get(activity.action)
        if weight is None:
            unknown += 1
            weight = 0
        scores[activity.product_id] = scores.get(activity.product_id, 0) + weight

    if unknown:
        logger.warning(
            "Ignoring activities with unknown action kinds",
            extra={"num_unknown": unknown},
        )

    return scores


def rank_product_ids(
    scores: Dict[str, int], limit: int = RECOMMENDATION_LIMIT
) -> List[str]:
    """Rank product ids by score, highest first.

    Ties keep the order in which the products appear in ``scores``.

    Args:
        scores: Mapping from product id to score.
        limit: Maximum number of ids to return.

    Returns:
        Up to ``limit`` product ids, best first.
    """
    # sorted() is stable, so equal scores stay in insertion order
    ranked = sorted(scores, key=lambda pid: scores[pid], reverse=True)
    return ranked[:limit]
