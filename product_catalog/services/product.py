# services/product.py
from typing import Any, Callable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from product_catalog.exceptions import (
    InvalidSortFieldError,
    ProductNotFoundError,
    ProductValidationError,
)
from product_catalog.models.enums import SortField, SortOrder
from product_catalog.models.schemas.product import Product, ProductCreate, ProductUpdate
from product_catalog.stores.base import ProductStore
from product_catalog.utils.logging import get_logger

logger = get_logger(__name__)

S = TypeVar("S", bound=BaseModel)


def _validate(schema: Type[S], data: Union[BaseModel, Mapping[str, Any], None]) -> S:
    if data is None:
        raise ProductValidationError("Product data is empty")
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ProductValidationError(
            "Invalid product data", e.errors(include_url=False, include_context=False)
        ) from e


class ProductService:
    """Catalog operations over an injected ``ProductStore``.

    Store failures surface as ``StoreError`` and are not retried.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def _to_schema(self, records) -> List[Product]:
        return [Product.model_validate(record) for record in records]

    def add_product(self, data) -> Product:
        product = _validate(ProductCreate, data)
        created = self.store.add(product)
        logger.info("Created product {} ({})", created.id, created.name)
        return Product.model_validate(created)

    def get_all_products(self) -> List[Product]:
        return self._to_schema(self.store.list_all())

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        product = self.store.get(product_id)
        if product is None:
            logger.debug("Product {} not found", product_id)
            return None
        return Product.model_validate(product)

    def get_products_by_name(self, name: str) -> List[Product]:
        return self._to_schema(self.store.find_by_name(name))

    def get_products_by_category(self, category: str) -> List[Product]:
        return self._to_schema(self.store.find_by_category(category))

    def get_total_product_count(self) -> int:
        return self.store.count()

    def update_product(self, data) -> Product:
        """Replace the record whose id matches ``data.id``; absent records are not created."""
        product = _validate(ProductUpdate, data)
        updated = self.store.update(product.id, product)
        if updated is None:
            raise ProductNotFoundError(product.id)
        logger.info("Updated product {}", product.id)
        return Product.model_validate(updated)

    def delete_product(self, product_id: int) -> bool:
        deleted = self.store.delete(product_id) > 0
        if deleted:
            logger.info("Deleted product {}", product_id)
        return deleted

    def delete_all_products(self) -> int:
        removed = self.store.delete_all()
        logger.info("Deleted all products ({} removed)", removed)
        return removed

    def _sorted(self, key: Callable[[Product], Any], sort_order: Optional[str]) -> List[Product]:
        # Loads the whole catalog; sorted() is stable for both directions.
        products = self.get_all_products()
        descending = SortOrder.parse(sort_order) is SortOrder.DESC
        return sorted(products, key=key, reverse=descending)

    def sort_products_by_name(self, sort_order: Optional[str] = None) -> List[Product]:
        return self._sorted(lambda p: p.name, sort_order)

    def sort_products_by_category(self, sort_order: Optional[str] = None) -> List[Product]:
        return self._sorted(lambda p: p.category, sort_order)

    def sort_products_by_price(self, sort_order: Optional[str] = None) -> List[Product]:
        return self._sorted(lambda p: p.price, sort_order)

    def sort_products(self, sort_by: Optional[str], sort_order: Optional[str] = None) -> List[Product]:
        try:
            field = SortField((sort_by or "").lower())
        except ValueError as e:
            raise InvalidSortFieldError(sort_by) from e

        if field is SortField.NAME:
            return self.sort_products_by_name(sort_order)
        if field is SortField.CATEGORY:
            return self.sort_products_by_category(sort_order)
        return self.sort_products_by_price(sort_order)
