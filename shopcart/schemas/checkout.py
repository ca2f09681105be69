# shopcart/schemas/checkout.py
from datetime import datetime
from typing import Literal

from pydantic import EmailStr, ConfigDict, field_validator
from sqlmodel import SQLModel

from shopcart.schemas.cart import CartItemRead

PaymentMethod = Literal["Tarjeta de Crédito", "Efectivo", "Transferencia Bancaria"]

CHECKOUT_PHONE_DIGITS = 10


class CheckoutRequest(SQLModel):
    """
    Payload for placing an order with the current cart.

    User provides:
      - name (>= 3 characters)
      - email
      - phone (exactly 10 digits)
      - address (>= 10 characters)
      - payment_method
      - save_address: also store the shipping data as a saved address
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    email: EmailStr
    phone: str
    address: str
    payment_method: PaymentMethod
    save_address: bool = False

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        if len(v) < 3:
            raise ValueError("name must have at least 3 characters")
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("phone is required")
        if len(v) != CHECKOUT_PHONE_DIGITS:
            raise ValueError(f"phone must have {CHECKOUT_PHONE_DIGITS} digits")
        if not v.isdigit():
            raise ValueError("phone may only contain digits")
        return v

    @field_validator("address")
    @classmethod
    def check_address(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("address is required")
        if len(v) < 10:
            raise ValueError("address must have at least 10 characters")
        return v


class OrderConfirmation(SQLModel):
    """
    Result of a successful checkout. Orders are not persisted.
    """

    order_id: str
    items: list[CartItemRead]
    total_quantity: int
    total: float
    payment_method: PaymentMethod
    name: str
    email: str
    phone: str
    address: str
    saved_address_id: str | None = None
    placed_at: datetime
