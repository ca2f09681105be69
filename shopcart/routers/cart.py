# shopcart/routers/cart.py
from fastapi import APIRouter, Depends

from shopcart.core.auth import get_facade
from shopcart.facade import ShopFacade
from shopcart.schemas.cart import CartSummary, CartItemCreate, CartItemUpdate

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=CartSummary)
def get_cart(facade: ShopFacade = Depends(get_facade)):
    """
    Get the cart summary.

    The cart is shared by the whole app, so no login is needed.
    """
    return facade.get_cart_summary()


@router.post("", response_model=CartSummary)
def add_to_cart(
    payload: CartItemCreate,
    facade: ShopFacade = Depends(get_facade),
):
    """
    Add `quantity` units of a catalog product to the cart.

    Returns the updated cart summary. Unknown products => 404.
    """
    product = facade.require_product(payload.product_id)
    facade.add_to_cart_quantity(product, payload.quantity)
    return facade.get_cart_summary()


@router.patch("/{product_id}", response_model=CartSummary)
def update_cart_item(
    product_id: str,
    payload: CartItemUpdate,
    facade: ShopFacade = Depends(get_facade),
):
    """
    Set the quantity of a product in the cart.

    quantity <= 0 removes the line; products not in the cart are ignored.
    Returns the updated cart summary.
    """
    facade.set_cart_line_quantity(product_id, payload.quantity)
    return facade.get_cart_summary()


@router.delete("/{product_id}", response_model=CartSummary)
def remove_cart_item(
    product_id: str,
    facade: ShopFacade = Depends(get_facade),
):
    """
    Remove a product from the cart.

    Returns the updated cart summary.
    """
    facade.remove_cart_line(product_id)
    return facade.get_cart_summary()


@router.delete("", response_model=CartSummary)
def clear_cart(facade: ShopFacade = Depends(get_facade)):
    """
    Clear the entire cart.

    Returns an empty cart summary.
    """
    facade.clear_cart()
    return CartSummary(items=[], total_quantity=0, total_price=0.0)
