# shopcart/services/address_service.py
import logging
from typing import Callable, TypeVar

from sqlmodel import Session

from shopcart.database import atomic
from shopcart.models.address import Address
from shopcart.repositories.address_repo import AddressRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AddressService:
    """
    Business logic for saved addresses.

    Invariant: for one owner, at most one address has is_default = True.

    Every path that can set the flag (save, update, set_as_default) goes
    through `_clear_then_write`: clear the flag on all of the owner's
    addresses, then write the target, in a single transaction. Readers see
    either the old default or the new one, never two.
    """

    def __init__(self, repo: AddressRepository):
        self.repo = repo

    # -------- Queries --------

    def list_for_owner(self, session: Session, owner_id: str) -> list[Address]:
        """Addresses of the owner, newest first."""
        return self.repo.list_for_owner(session, owner_id)

    def get_default(self, session: Session, owner_id: str) -> Address | None:
        return self.repo.get_default(session, owner_id)

    def get_by_id(self, session: Session, address_id: str) -> Address | None:
        return self.repo.get_by_id(session, address_id)

    def count(self, session: Session, owner_id: str) -> int:
        """Number of addresses of the owner (for UI decisions only)."""
        return self.repo.count_for_owner(session, owner_id)

    # -------- Writes --------

    def save(self, session: Session, address: Address) -> Address:
        """
        Insert an address (replacing a row with the same id).

        If it is flagged default, every other address of the owner loses
        the flag in the same transaction.
        """
        if not address.is_default:
            with atomic(session):
                return self.repo.upsert(session, address)

        saved = self._clear_then_write(
            session,
            address.owner_id,
            lambda: self.repo.upsert(session, address),
        )
        logger.info("Address %s saved as default for %s", saved.id, saved.owner_id)
        return saved

    def update(self, session: Session, address: Address) -> Address | None:
        """
        Overwrite an existing address by id.

        Unknown ids are a no-op (returns None) and nothing is cleared.
        """
        target = self.repo.get_by_id(session, address.id)
        if target is None:
            session.rollback()
            return None

        if not address.is_default:
            with atomic(session):
                return self.repo.update_fields(session, target, address)

        return self._clear_then_write(
            session,
            address.owner_id,
            lambda: self.repo.update_fields(session, target, address),
        )

    def set_as_default(self, session: Session, owner_id: str, address_id: str) -> bool:
        """
        Make `address_id` the owner's only default address.

        Returns False, without writing anything, when the address does not
        exist or belongs to another owner.
        """
        target = self.repo.get_by_id(session, address_id)
        if target is None or target.owner_id != owner_id:
            session.rollback()
            return False

        self._clear_then_write(
            session,
            owner_id,
            lambda: self.repo.mark_default(session, target),
        )
        logger.info("Address %s is now the default for %s", address_id, owner_id)
        return True

    def remove(self, session: Session, address_id: str) -> bool:
        """
        Delete by id. Removing the default address leaves the owner with no
        default; no other address is promoted.
        """
        with atomic(session):
            return self.repo.delete_by_id(session, address_id)

    # -------- Shared primitive --------

    def _clear_then_write(
        self,
        session: Session,
        owner_id: str,
        write: Callable[[], T],
    ) -> T:
        with atomic(session):
            self.repo.clear_default_for_owner(session, owner_id)
            return write()
