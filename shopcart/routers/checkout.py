# shopcart/routers/checkout.py
from fastapi import APIRouter, Depends

from shopcart.core.auth import get_facade
from shopcart.facade import ShopFacade
from shopcart.schemas.checkout import CheckoutRequest, OrderConfirmation

router = APIRouter(prefix="/checkout", tags=["Checkout"])


@router.post("", response_model=OrderConfirmation)
def checkout(payload: CheckoutRequest, facade: ShopFacade = Depends(get_facade)):
    """
    Place an order with the current cart and empty it.

    Errors:
      - 400 if the cart is empty
      - 401 if save_address is set and nobody is logged in
    """
    return facade.checkout(payload)
