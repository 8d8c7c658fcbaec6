# models/schemas/base.py
from pydantic import BaseModel, ConfigDict


class ORMModel(BaseModel):
    """Response model that can be built straight from an ORM row."""

    model_config = ConfigDict(from_attributes=True)
