"""Recommendation module for the storefront.

This module scores products from a user's logged activity (views, cart
additions and purchases) and resolves the highest scoring products from the
catalog into a ranked recommendation list.
"""
