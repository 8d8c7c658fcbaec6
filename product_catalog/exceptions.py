"""Catalog error hierarchy.

Raised by the store and service layers. The application maps each kind to
an HTTP status in ``product_catalog.main``.
"""
from typing import Any, List, Optional


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductValidationError(CatalogError):
    """Product data failed required-field or range checks."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class ProductNotFoundError(CatalogError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class InvalidSortFieldError(CatalogError):
    def __init__(self, sort_by: Optional[str]):
        super().__init__(f"Invalid sort criteria: {sort_by!r}")
        self.sort_by = sort_by


class StoreError(CatalogError):
    """The backing store failed (connection, transaction or constraint error)."""
