"""Activity recording for storefront operations.

Product views, cart additions and purchases are logged here so the
recommender can score them later.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from storefront.store.base import ActivityStore
from storefront.store.models import ActionKind, ActivityRecord

# Configure module logger
logger = logging.getLogger(__name__)


class ActivityRecorder:
    """Writes activity records without ever failing the calling request.

    Attributes:
        store: Activity store records are written to.
    """

    def __init__(self, store: ActivityStore):
        self.store = store

    def record(
        self,
        user_id: Optional[str],
        product_id: Optional[str],
        action: Union[ActionKind, str],
    ) -> Optional[ActivityRecord]:
        """Record that a user performed an action on a product.

        Args:
            user_id: Acting user, may be None for anonymous callers.
            product_id: Product acted on.
            action: Kind of action.

        Returns:
            The stored record, or None if nothing was recorded.
        """
        action_value = action.value if isinstance(action, ActionKind) else action

        if not user_id or not product_id:
            logger.debug(
                "User or product id missing, activity not recorded",
                extra={"action": action_value},
            )
            return None

        record = ActivityRecord(
            user_id=user_id,
            product_id=product_id,
            action=action_value,
            timestamp=datetime.now(timezone.utc),
        )

        try:
            self.store.add(record)
        except Exception as e:
            logger.error(
                "Error recording user activity",
                extra={
                    "user_id": user_id,
                    "product_id": product_id,
                    "action": action_value,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            return None

        logger.info(
            "User activity recorded",
            extra={"user_id": user_id, "product_id": product_id, "action": action_value},
        )
        return record
