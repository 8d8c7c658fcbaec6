from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.orm import Session

from product_catalog.exceptions import StoreError
from product_catalog.models.database_models import Product
from product_catalog.models.schemas.product import ProductBase
from product_catalog.stores.base import ProductStore
from product_catalog.utils.logging import get_logger

logger = get_logger(__name__)


class SqlProductStore(ProductStore[Product]):
    """Product store backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _handle_db_operation(self, operation):
        try:
            result = operation()
            self.db.commit()
            return result
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database operation error: {}", str(e))
            raise StoreError("Database operation failed") from e

    def _query(self, operation):
        try:
            return operation()
        except SQLAlchemyError as e:
            logger.error("Database query error: {}", str(e))
            raise StoreError("Database query failed") from e

    def add(self, data: ProductBase) -> Product:
        product = Product(**data.to_orm_dict())

        def _add():
            self.db.add(product)
            self.db.flush()
            return product

        product = self._handle_db_operation(_add)
        self._query(lambda: self.db.refresh(product))
        return product

    def list_all(self) -> List[Product]:
        return self._query(lambda: self.db.query(Product).order_by(Product.id).all())

    def get(self, product_id: int) -> Optional[Product]:
        return self._query(lambda: self.db.get(Product, product_id))

    def find_by_name(self, substring: str) -> List[Product]:
        return self._query(
            lambda: self.db.query(Product)
            .filter(Product.name.contains(substring, autoescape=True))
            .order_by(Product.id)
            .all()
        )

    def find_by_category(self, category: str) -> List[Product]:
        return self._query(
            lambda: self.db.query(Product)
            .filter(Product.category == category)
            .order_by(Product.id)
            .all()
        )

    def count(self) -> int:
        return self._query(lambda: self.db.query(Product).count())

    def update(self, product_id: int, data: ProductBase) -> Optional[Product]:
        product = self.get(product_id)
        if product is None:
            return None

        def _update():
            for field, value in data.to_orm_dict().items():
                setattr(product, field, value)
            return product

        try:
            product = self._handle_db_operation(_update)
        except StoreError as e:
            # Row deleted between the read and the commit
            if isinstance(e.__cause__, StaleDataError):
                return None
            raise
        self._query(lambda: self.db.refresh(product))
        return product

    def delete(self, product_id: int) -> int:
        return self._handle_db_operation(
            lambda: self.db.query(Product)
            .filter(Product.id == product_id)
            .delete(synchronize_session=False)
        )

    def delete_all(self) -> int:
        return self._handle_db_operation(
            lambda: self.db.query(Product).delete(synchronize_session=False)
        )
