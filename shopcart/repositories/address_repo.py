# shopcart/repositories/address_repo.py
from datetime import datetime, timezone

from sqlalchemy import update
from sqlmodel import Session, func, select

from shopcart.database import mark_changed
from shopcart.models.address import Address

TABLE = Address.__tablename__


class AddressRepository:
    """
    Data access layer for addresses.

    NOTE:
      - No commits here; changing the default address is a multi-step
        transaction. The service is responsible for committing.
    """

    # ---- Queries ----

    def list_for_owner(self, session: Session, owner_id: str) -> list[Address]:
        stmt = (
            select(Address)
            .where(Address.owner_id == owner_id)
            .order_by(Address.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def get_by_id(self, session: Session, address_id: str) -> Address | None:
        return session.get(Address, address_id)

    def get_default(self, session: Session, owner_id: str) -> Address | None:
        stmt = (
            select(Address)
            .where(Address.owner_id == owner_id, Address.is_default == True)  # noqa: E712
            .limit(1)
        )
        return session.exec(stmt).first()

    def count_for_owner(self, session: Session, owner_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(Address)
            .where(Address.owner_id == owner_id)
        )
        return session.exec(stmt).one()

    # ---- Writes (flush only) ----

    def upsert(self, session: Session, address: Address) -> Address:
        """
        Insert an address, replacing any row with the same id.
        """
        persisted = session.merge(address)
        session.flush()
        mark_changed(session, TABLE)
        return persisted

    def update_fields(self, session: Session, target: Address, source: Address) -> Address:
        """
        Copy the editable fields of `source` onto the persisted `target`.
        """
        target.owner_id = source.owner_id
        target.full_name = source.full_name
        target.phone = source.phone
        target.full_address = source.full_address
        target.is_default = source.is_default
        target.updated_at = datetime.now(timezone.utc)
        session.add(target)
        session.flush()
        mark_changed(session, TABLE)
        return target

    def clear_default_for_owner(self, session: Session, owner_id: str) -> None:
        """
        Set is_default = False (and bump updated_at) on every address of
        the owner, as one UPDATE statement.

        The WHERE clause is evaluated inside the write transaction, so a
        default committed by another writer just before is cleared too.
        """
        stmt = (
            update(Address)
            .where(Address.owner_id == owner_id)
            .values(is_default=False, updated_at=datetime.now(timezone.utc))
        )
        session.exec(stmt)
        mark_changed(session, TABLE)

    def mark_default(self, session: Session, address: Address) -> Address:
        address.is_default = True
        address.updated_at = datetime.now(timezone.utc)
        session.add(address)
        session.flush()
        mark_changed(session, TABLE)
        return address

    def delete_by_id(self, session: Session, address_id: str) -> bool:
        address = self.get_by_id(session, address_id)
        if address is None:
            return False
        session.delete(address)
        session.flush()
        mark_changed(session, TABLE)
        return True
