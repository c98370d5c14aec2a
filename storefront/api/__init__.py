"""FastAPI application module for Storefront.

This module contains the FastAPI application, route handlers, and API
endpoints for products, carts, orders and recommendations.
"""
