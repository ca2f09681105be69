# shopcart/services/cart_service.py
import logging

from sqlmodel import Session

from shopcart.models.cart import CartItem
from shopcart.models.product import Product
from shopcart.repositories.cart_repo import CartRepository
from shopcart.schemas.cart import CartItemRead, CartSummary

logger = logging.getLogger(__name__)


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - merge repeated adds of a product into one line
      - delete a line instead of storing a quantity <= 0
      - treat missing lines as no-ops
      - compute line totals and cart totals

    Every write commits on its own, except discard_lines. Two callers racing
    on the same product can lose an increment (read-then-write, last write
    wins).
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    # ---- queries ----

    def list_items(self, session: Session) -> list[CartItem]:
        return self.cart_repo.list_all(session)

    def get_item(self, session: Session, product_id: str) -> CartItem | None:
        return self.cart_repo.get_item(session, product_id)

    def get_cart_summary(self, session: Session) -> CartSummary:
        """
        Return full cart summary:
          - list of CartItemRead (with line_total)
          - total_quantity
          - total_price
        """
        return self.summarize(self.cart_repo.list_all(session))

    @staticmethod
    def summarize(items: list[CartItem]) -> CartSummary:
        item_reads: list[CartItemRead] = []
        total_qty = 0
        total_price = 0.0

        for it in items:
            line_total = it.quantity * it.product_price
            total_qty += it.quantity
            total_price += line_total

            item_reads.append(
                CartItemRead(
                    product_id=it.product_id,
                    product_name=it.product_name,
                    product_price=it.product_price,
                    product_image_url=it.product_image_url,
                    quantity=it.quantity,
                    line_total=round(line_total, 2),
                )
            )

        return CartSummary(
            items=item_reads,
            total_quantity=total_qty,
            total_price=round(total_price, 2),
        )

    # ---- public operations ----

    def add_one(self, session: Session, product: Product) -> CartItem:
        """
        Add one unit of a product.

        Rules:
          - existing line => quantity + 1, other fields unchanged
          - no line       => new line with quantity 1
        """
        existing = self.cart_repo.get_item(session, product.id)

        if existing:
            existing.quantity = existing.quantity + 1
            return self.cart_repo.update(session, existing)

        return self.cart_repo.create_from_product(session, product=product, quantity=1)

    def add_n(self, session: Session, product: Product, quantity: int) -> CartItem | None:
        """
        Add `quantity` units as that many single-unit adds.

        Each unit commits separately, so subscribers see every intermediate
        quantity. quantity <= 0 writes nothing and returns the current line.
        """
        item = self.cart_repo.get_item(session, product.id)
        for _ in range(quantity):
            item = self.add_one(session, product)
        return item

    def set_quantity(self, session: Session, product_id: str, quantity: int) -> CartItem | None:
        """
        Overwrite the quantity of a line.

        - line missing  => no-op
        - quantity <= 0 => line deleted, returns None
        """
        item = self.cart_repo.get_item(session, product_id)
        if not item:
            return None

        if quantity <= 0:
            self.cart_repo.delete(session, item)
            return None

        item.quantity = quantity
        return self.cart_repo.update(session, item)

    def remove_item(self, session: Session, product_id: str) -> bool:
        """Remove a line if present; returns whether something was deleted."""
        item = self.cart_repo.get_item(session, product_id)
        if not item:
            return False

        self.cart_repo.delete(session, item)
        return True

    def clear_cart(self, session: Session) -> None:
        """Delete every line."""
        self.cart_repo.clear(session)
        logger.debug("Cart cleared")

    def discard_lines(self, session: Session) -> None:
        """Delete every line without committing; the caller owns the transaction."""
        self.cart_repo.delete_all(session)
