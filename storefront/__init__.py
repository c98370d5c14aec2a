"""Storefront: e-commerce backend with activity-based product recommendations.

This package provides a REST backend for a small shop (products, reviews,
per-user carts, orders) and a recommendation scorer that ranks products for
a user from their logged activity.

Modules:
    api: FastAPI application and REST API endpoints
    recommender: Activity scoring and recommendation logic
    store: Domain models, store interfaces and in-memory implementations
"""

__version__ = "0.1.0"
