"""Generate fake catalog and activity data for testing and development.

This module creates a synthetic product catalog and a user activity log
(views, cart additions and purchases) as CSV files that can seed the
in-memory stores via ``STOREFRONT_CATALOG_CSV`` and ``STOREFRONT_ACTIVITY_CSV``.

Example:
    Run the script directly to generate default data:
        $ python scripts/generate_fake_data.py

    Or import and use programmatically:
        from scripts.generate_fake_data import generate_fake_activity
        df = generate_fake_activity(num_users=100, num_products=200)
"""

import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import pandas as pd

# Default configuration constants
DEFAULT_NUM_USERS = 50
DEFAULT_NUM_PRODUCTS = 100
DEFAULT_NUM_ACTIVITIES = 2000
DEFAULT_DAYS_BACK = 90
SECONDS_PER_DAY = 86400

# Views are far more common than cart additions, which beat purchases
ACTION_PROBABILITIES = {
    "viewed": 0.7,
    "added_to_cart": 0.2,
    "purchased": 0.1,
}

CATEGORIES = ["electronics", "books", "clothing", "home", "toys", "sports"]


def product_id_for(index: int) -> str:
    return f"p{index}"


def user_id_for(index: int) -> str:
    return f"u{index}"


def generate_fake_catalog(num_products: int = DEFAULT_NUM_PRODUCTS) -> pd.DataFrame:
    """Generate a synthetic product catalog.

    Args:
        num_products: Number of products. Must be positive.

    Returns:
        DataFrame with product_id, name, price, description, image_url,
        quantity and category columns.

    Raises:
        ValueError: If num_products is not positive.
    """
    if num_products <= 0:
        raise ValueError("num_products must be positive")

    products = []
    for i in range(1, num_products + 1):
        category = random.choice(CATEGORIES)
        products.append({
            "product_id": product_id_for(i),
            "name": f"{category.title()} item {i}",
            "price": round(random.uniform(1.0, 500.0), 2),
            "description": f"A fine {category} product",
            "image_url": f"https://example.com/images/{i}.jpg",
            "quantity": random.randint(1, 100),
            "category": category,
        })

    return pd.DataFrame(products)


def generate_fake_activity(
    num_users: int = DEFAULT_NUM_USERS,
    num_products: int = DEFAULT_NUM_PRODUCTS,
    num_activities: int = DEFAULT_NUM_ACTIVITIES,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> pd.DataFrame:
    """Generate a synthetic user activity log.

    Args:
        num_users: Number of unique users to simulate. Must be positive.
        num_products: Number of unique products available. Must be positive.
        num_activities: Total number of activity records. Must be positive.
        start_date: Start of the timestamp range. Defaults to 90 days before
            end_date.
        end_date: End of the timestamp range. Defaults to now.

    Returns:
        DataFrame with user_id, product_id, action and timestamp columns,
        sorted by timestamp.

    Raises:
        ValueError: If any numeric parameter is non-positive or if
            start_date is not before end_date.
    """
    if num_users <= 0 or num_products <= 0 or num_activities <= 0:
        raise ValueError(
            "num_users, num_products, and num_activities must be positive"
        )

    if end_date is None:
        end_date = datetime.now()
    if start_date is None:
        start_date = end_date - timedelta(days=DEFAULT_DAYS_BACK)

    if start_date >= end_date:
        raise ValueError("start_date must be before end_date")

    actions = list(ACTION_PROBABILITIES)
    weights = list(ACTION_PROBABILITIES.values())
    days_range = max((end_date - start_date).days, 1)

    activities = []
    for _ in range(num_activities):
        timestamp = start_date + timedelta(
            days=random.randrange(days_range),
            seconds=random.randrange(SECONDS_PER_DAY),
        )
        activities.append({
            "user_id": user_id_for(random.randint(1, num_users)),
            "product_id": product_id_for(random.randint(1, num_products)),
            "action": random.choices(actions, weights=weights)[0],
            "timestamp": min(timestamp, end_date),
        })

    df = pd.DataFrame(activities)
    df = df.sort_values("timestamp").reset_index(drop=True)

    return df


def main() -> None:
    """Generate default data and save it under data/."""
    print(f"Generating {DEFAULT_NUM_PRODUCTS} products and {DEFAULT_NUM_ACTIVITIES} activities...")

    try:
        catalog = generate_fake_catalog(DEFAULT_NUM_PRODUCTS)
        activity = generate_fake_activity(
            num_users=DEFAULT_NUM_USERS,
            num_products=DEFAULT_NUM_PRODUCTS,
            num_activities=DEFAULT_NUM_ACTIVITIES,
        )
    except ValueError as e:
        print(f"Error generating data: {e}")
        return

    data_dir = Path(__file__).parent.parent / "data"
    data_dir.mkdir(exist_ok=True)

    catalog_path = data_dir / "fake_catalog.csv"
    activity_path = data_dir / "fake_activity.csv"
    catalog.to_csv(catalog_path, index=False)
    activity.to_csv(activity_path, index=False)

    print(f"\nData generated successfully!")
    print(f"Catalog saved to: {catalog_path}")
    print(f"Activity saved to: {activity_path}")
    print(f"\nActivity summary:")
    print(f"  Total activities: {len(activity)}")
    print(f"  Unique users: {activity['user_id'].nunique()}")
    print(f"  Unique products: {activity['product_id'].nunique()}")
    print(f"  Actions: {activity['action'].value_counts().to_dict()}")


if __name__ == "__main__":
    main()
