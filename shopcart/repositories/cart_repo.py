# shopcart/repositories/cart_repo.py
from sqlmodel import Session, select

from shopcart.database import mark_changed
from shopcart.models.cart import CartItem
from shopcart.models.product import Product

TABLE = CartItem.__tablename__


class CartRepository:

    # Get all lines (the cart is shared, not per user)
    def list_all(self, session: Session) -> list[CartItem]:
        stmt = select(CartItem)
        return list(session.exec(stmt).all())

    def get_item(self, session: Session, product_id: str) -> CartItem | None:
        return session.get(CartItem, product_id)

    # CRUD
    def create(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        mark_changed(session, TABLE)
        session.commit()
        session.refresh(item)
        return item

    def update(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        mark_changed(session, TABLE)
        session.commit()
        session.refresh(item)
        return item

    def delete(self, session: Session, item: CartItem) -> None:
        session.delete(item)
        mark_changed(session, TABLE)
        session.commit()

    def clear(self, session: Session) -> None:
        self.delete_all(session)
        session.commit()

    # No commit; used inside a larger transaction
    def delete_all(self, session: Session) -> None:
        for row in self.list_all(session):
            session.delete(row)
        session.flush()
        mark_changed(session, TABLE)

    def create_from_product(
            self,
            session: Session,
            *,
            product: Product,
            quantity: int = 1,
    ) -> CartItem:
        """
        Create a CartItem from a Product, snapshotting:
          - product_name
          - product_price
          - product_image_url

        Business logic (merging, zero-quantity deletes) lives in the service.
        """
        item = CartItem(
            product_id=product.id,
            product_name=product.name,
            product_price=product.price,
            product_image_url=product.image_url,
            quantity=quantity,
        )
        return self.create(session, item)
