# shopcart/services/checkout_service.py
import logging
import uuid
from datetime import datetime, timezone

from sqlmodel import Session

from shopcart.core.errors import EmptyCartError, NotAuthenticatedError
from shopcart.database import atomic
from shopcart.models.address import Address
from shopcart.schemas.checkout import CheckoutRequest, OrderConfirmation
from shopcart.services.address_service import AddressService
from shopcart.services.cart_service import CartService
from shopcart.services.user_service import UserService

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Business logic for checkout.

    Responsibilities:
      - refuse an empty cart
      - compute totals from the cart lines
      - optionally keep the shipping data as a saved address
      - clear the cart after success

    Orders are not persisted; the confirmation is the only record.
    """

    def __init__(
        self,
        cart_service: CartService,
        address_service: AddressService,
        user_service: UserService,
    ):
        self.cart_service = cart_service
        self.address_service = address_service
        self.user_service = user_service

    def checkout(self, session: Session, payload: CheckoutRequest) -> OrderConfirmation:
        """
        Place an order with the current cart.

        Steps:
          1. Load cart lines; error if empty.
          2. If save_address, require a logged-in user.
          3. Compute totals.
          4. Save the shipping address (default if it is the owner's first)
             and clear the cart, in one transaction.
        """
        # 1) Load cart
        items = self.cart_service.list_items(session)
        if not items:
            raise EmptyCartError()

        # 2) Saving an address needs an owner
        owner = None
        if payload.save_address:
            owner = self.user_service.get_profile(session)
            if owner is None or not owner.is_logged_in:
                raise NotAuthenticatedError()

        # 3) Totals
        summary = CartService.summarize(items)

        # 4) Saved address and cart clear commit together
        saved_address_id: str | None = None
        with atomic(session):
            if owner is not None:
                first = self.address_service.count(session, owner.id) == 0
                saved = self.address_service.save(
                    session,
                    Address(
                        owner_id=owner.id,
                        full_name=payload.name,
                        phone=payload.phone,
                        full_address=payload.address,
                        is_default=first,
                    ),
                )
                saved_address_id = saved.id

            self.cart_service.discard_lines(session)

        order_id = str(uuid.uuid4())
        logger.info(
            "Order %s placed: %d units, total %.2f",
            order_id,
            summary.total_quantity,
            summary.total_price,
        )

        return OrderConfirmation(
            order_id=order_id,
            items=summary.items,
            total_quantity=summary.total_quantity,
            total=summary.total_price,
            payment_method=payload.payment_method,
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            address=payload.address,
            saved_address_id=saved_address_id,
            placed_at=datetime.now(timezone.utc),
        )
