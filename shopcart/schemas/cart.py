# shopcart/schemas/cart.py
from sqlmodel import SQLModel, Field


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart.

    quantity = number of single-unit adds; 0 adds nothing.
    """

    product_id: str
    quantity: int = Field(default=1, ge=0)


class CartItemUpdate(SQLModel):
    """
    Payload for setting the quantity of a cart line.
    A quantity <= 0 removes the line.
    """

    quantity: int


class CartItemRead(SQLModel):
    """
    Read model for a single cart line, including line_total.
    """

    product_id: str
    product_name: str
    product_price: float
    product_image_url: str
    quantity: int
    line_total: float


class CartSummary(SQLModel):
    """
    Full cart response model with totals.
    """

    items: list[CartItemRead]
    total_quantity: int
    total_price: float
