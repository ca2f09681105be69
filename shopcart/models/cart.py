# shopcart/models/cart.py
from sqlmodel import SQLModel, Field


class CartItem(SQLModel, table=True):
    """
    One shopping cart line.

    The cart is not scoped per user: there is at most one row per product,
    and a row only exists while its quantity is >= 1.
    """

    __tablename__ = "cart_items"

    product_id: str = Field(
        primary_key=True,
        description="Catalog product id (one line per product)",
    )

    product_name: str
    product_price: float = Field(
        ge=0,
        description="Unit price when added to cart",
    )
    product_image_url: str = ""

    quantity: int = Field(
        gt=0,
        description="Must be >= 1",
    )
