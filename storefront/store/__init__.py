"""Storage layer for the storefront.

Holds the domain models, the abstract store interfaces the rest of the
package depends on, in-memory implementations of those interfaces and CSV
loaders used to seed them.
"""
