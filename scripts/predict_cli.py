"""CLI script for getting product recommendations.

Useful for testing and evaluation. Loads a catalog and an activity log from
CSV, gets recommendations for a user and prints them to the console.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Tuple

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from storefront.exceptions import RecommendationUnavailableError
from storefront.recommender.infer import explain_recommendations
from storefront.store.loaders import load_activity_log, load_catalog
from storefront.store.memory import InMemoryActivityStore, InMemoryCatalogStore
from storefront.store.models import Product

# Setup logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s"
)
logger = logging.getLogger(__name__)


def get_recommendations(
    user_id: str,
    activity_csv: str,
    catalog_csv: str,
) -> Tuple[List[Product], Dict[str, int]]:
    """Get recommendations for a user from CSV data.

    Args:
        user_id: User ID to get recommendations for
        activity_csv: Path to the activity log CSV
        catalog_csv: Path to the catalog CSV

    Returns:
        Tuple of (ranked products, score per product id)
    """
    try:
        activity_store = InMemoryActivityStore(load_activity_log(activity_csv))
        catalog_store = InMemoryCatalogStore(load_catalog(catalog_csv))
        return explain_recommendations(user_id, activity_store, catalog_store)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, RecommendationUnavailableError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    """Main CLI function."""
    parser = argparse.ArgumentParser(
        description="Get product recommendations for a user",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/predict_cli.py u42
  python scripts/predict_cli.py u42 --explain
  python scripts/predict_cli.py u42 --activity data/activity.csv --catalog data/catalog.csv
        """
    )

    parser.add_argument(
        "user_id",
        type=str,
        help="User ID to get recommendations for"
    )

    parser.add_argument(
        "--activity",
        type=str,
        default="data/fake_activity.csv",
        help="Activity log CSV (default: data/fake_activity.csv)"
    )

    parser.add_argument(
        "--catalog",
        type=str,
        default="data/fake_catalog.csv",
        help="Catalog CSV (default: data/fake_catalog.csv)"
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show the score of every candidate product"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    products, scores = get_recommendations(
        user_id=args.user_id,
        activity_csv=args.activity,
        catalog_csv=args.catalog,
    )

    print(f"\nRecommendations for user {args.user_id}:")
    if not products:
        print("  No recommendations (no recorded activity)")
    for rank, product in enumerate(products, start=1):
        print(
            f"  {rank:2d}. {product.product_id} {product.name} "
            f"(score {scores[product.product_id]})"
        )

    if args.explain and scores:
        print(f"\nScore breakdown:")
        for product_id, score in sorted(scores.items(), key=lambda kv: kv[1], reverse=True):
            print(f"  {product_id}: {score}")

    print()


if __name__ == "__main__":
    main()
