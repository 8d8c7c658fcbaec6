# models/schemas/product.py
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from .base import ORMModel


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=255)

    @field_validator("name", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    def to_orm_dict(self):
        return self.model_dump(include={"name", "description", "price", "category"}, mode="python")


class ProductCreate(ProductBase):
    # Ids are assigned by the store; a client-supplied one is ignored.
    id: Optional[int] = None


class ProductUpdate(ProductBase):
    id: int


class Product(ProductBase, ORMModel):
    id: int
