# shopcart/models/product.py
from sqlmodel import SQLModel, Field


class Product(SQLModel):
    """
    Catalog entry.

    Products are not persisted; the catalog is a static list
    (see ProductRepository). Only cart lines snapshot their fields.
    """

    id: str
    name: str = Field(max_length=100)
    price: float = Field(ge=0, description="Unit price")
    description: str = ""
    image_url: str = ""
