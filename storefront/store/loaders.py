"""CSV loaders for seeding the in-memory stores.

This module reads activity logs and product catalogs exported as CSV and
turns them into domain models.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from storefront.store.models import ActionKind, ActivityRecord, Product

# Configure module logger
logger = logging.getLogger(__name__)

ACTIVITY_COLUMNS = {"user_id", "product_id", "action"}
CATALOG_COLUMNS = {
    "product_id",
    "name",
    "price",
    "description",
    "image_url",
    "quantity",
    "category",
}

# Older logs recorded purchases as "ordered".
LEGACY_ACTION_ALIASES: Dict[str, str] = {"ordered": ActionKind.PURCHASED.value}


def _read_csv(csv_path: str, required_columns: set, id_columns: List[str]) -> pd.DataFrame:
    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    logger.info(f"Loading CSV from {csv_path}")
    df = pd.read_csv(csv_path, dtype={col: str for col in id_columns})

    if not required_columns.issubset(df.columns):
        missing = required_columns - set(df.columns)
        raise ValueError(f"CSV missing required columns: {sorted(missing)}")

    return df


def load_activity_log(csv_path: str) -> List[ActivityRecord]:
    """Load user activity records from a CSV file.

    The CSV must have ``user_id``, ``product_id`` and ``action`` columns and
    may have a ``timestamp`` column. Unrecognized actions are kept as-is so
    the recommender can decide how to weight them; the legacy ``ordered``
    label is normalized to ``purchased``.

    Args:
        csv_path: Path to the activity CSV.

    Returns:
        List of activity records in file order.

    Raises:
        FileNotFoundError: If the CSV file does not exist.
        ValueError: If required columns are missing.

    Example:
        >>> records = load_activity_log("data/activity.csv")
        >>> print(f"Loaded {len(records)} activities")
    """
    df = _read_csv(csv_path, ACTIVITY_COLUMNS, ["user_id", "product_id"])
    df = df.dropna(subset=["user_id", "product_id"])
    df["action"] = (
        df["action"].fillna("").astype(str).str.strip().replace(LEGACY_ACTION_ALIASES)
    )

    if "timestamp" in df.columns:
        timestamps = pd.to_datetime(df["timestamp"], utc=True, errors="coerce")
    else:
        timestamps = pd.Series([pd.NaT] * len(df), index=df.index)

    now = datetime.now(timezone.utc)
    records = []
    for row, ts in zip(df.itertuples(index=False), timestamps):
        records.append(
            ActivityRecord(
                user_id=row.user_id,
                product_id=row.product_id,
                action=row.action,
                timestamp=now if pd.isna(ts) else ts.to_pydatetime(),
            )
        )

    unknown = (~df["action"].isin([kind.value for kind in ActionKind])).sum()
    logger.info(
        "Loaded activity log",
        extra={
            "num_records": len(records),
            "num_users": df["user_id"].nunique(),
            "num_unknown_actions": int(unknown),
        },
    )
    return records


def load_catalog(csv_path: str) -> List[Product]:
    """Load catalog products from a CSV file.

    Args:
        csv_path: Path to the catalog CSV.

    Returns:
        List of products in file order. Reviews are not part of the export
        and start empty.

    Raises:
        FileNotFoundError: If the CSV file does not exist.
        ValueError: If required columns are missing or a row is invalid.
    """
    df = _read_csv(csv_path, CATALOG_COLUMNS, ["product_id"])

    products = [
        Product(
            product_id=row["product_id"],
            name=row["name"],
            price=float(row["price"]),
            description=row["description"],
            image_url=row["image_url"],
            quantity=int(row["quantity"]),
            category=row["category"],
        )
        for row in df.to_dict(orient="records")
    ]

    logger.info(f"Loaded {len(products)} catalog products")
    return products


def load_if_present(csv_path: Optional[str], loader) -> list:
    """Run ``loader`` on ``csv_path`` if it is set and exists, else return []."""
    if not csv_path:
        return []
    if not Path(csv_path).exists():
        logger.warning(f"Seed file {csv_path} not found, starting empty")
        return []
    return loader(csv_path)
