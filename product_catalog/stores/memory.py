import itertools
import threading
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel

from product_catalog.models.schemas.product import ProductBase
from product_catalog.stores.base import ProductStore


class StoredProduct(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    category: str


class InMemoryProductStore(ProductStore[StoredProduct]):
    """Dict-backed store with the same contract as the SQL one.

    Name matching is case-sensitive. Records are copied on the way in and out
    so callers cannot mutate stored state.
    """

    def __init__(self):
        self._products: Dict[int, StoredProduct] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, data: ProductBase) -> StoredProduct:
        with self._lock:
            product = StoredProduct(id=next(self._ids), **data.to_orm_dict())
            self._products[product.id] = product
            return product.model_copy()

    def list_all(self) -> List[StoredProduct]:
        with self._lock:
            return [p.model_copy() for p in self._products.values()]

    def get(self, product_id: int) -> Optional[StoredProduct]:
        with self._lock:
            product = self._products.get(product_id)
            return product.model_copy() if product else None

    def find_by_name(self, substring: str) -> List[StoredProduct]:
        return [p for p in self.list_all() if substring in p.name]

    def find_by_category(self, category: str) -> List[StoredProduct]:
        return [p for p in self.list_all() if p.category == category]

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def update(self, product_id: int, data: ProductBase) -> Optional[StoredProduct]:
        with self._lock:
            if product_id not in self._products:
                return None
            product = StoredProduct(id=product_id, **data.to_orm_dict())
            self._products[product_id] = product
            return product.model_copy()

    def delete(self, product_id: int) -> int:
        with self._lock:
            return 1 if self._products.pop(product_id, None) is not None else 0

    def delete_all(self) -> int:
        with self._lock:
            removed = len(self._products)
            self._products.clear()
            return removed
