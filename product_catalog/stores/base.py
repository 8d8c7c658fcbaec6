from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from product_catalog.models.schemas.product import ProductBase

T = TypeVar("T")


class ProductStore(ABC, Generic[T]):
    """Persistent collection of product records keyed by integer id.

    Implementations assign ids on ``add`` and never hand out an id twice,
    even after the record holding it was deleted. ``T`` is whatever record
    type the store returns; it must expose the ``Product`` attributes so the
    service can build response models from it.
    """

    @abstractmethod
    def add(self, data: ProductBase) -> T:
        """Persist a new record and return it with its assigned id."""

    @abstractmethod
    def list_all(self) -> List[T]:
        """Return every record in insertion order."""

    @abstractmethod
    def get(self, product_id: int) -> Optional[T]:
        """Return the record with ``product_id`` or None."""

    @abstractmethod
    def find_by_name(self, substring: str) -> List[T]:
        """Return records whose name contains ``substring``."""

    @abstractmethod
    def find_by_category(self, category: str) -> List[T]:
        """Return records whose category equals ``category`` exactly."""

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def update(self, product_id: int, data: ProductBase) -> Optional[T]:
        """Replace every field of an existing record; None if it does not exist."""

    @abstractmethod
    def delete(self, product_id: int) -> int:
        """Remove one record in a single step and return the affected count (0 or 1)."""

    @abstractmethod
    def delete_all(self) -> int:
        """Remove every record and return how many were removed."""
