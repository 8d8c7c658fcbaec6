from fastapi import Depends
from sqlalchemy.orm import Session

from product_catalog.database.database import get_db
from product_catalog.services.product import ProductService
from product_catalog.stores.base import ProductStore
from product_catalog.stores.sql import SqlProductStore


def get_product_store(db: Session = Depends(get_db)) -> ProductStore:
    return SqlProductStore(db)


def get_product_service(store: ProductStore = Depends(get_product_store)) -> ProductService:
    return ProductService(store)
