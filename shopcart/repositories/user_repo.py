# shopcart/repositories/user_repo.py
from sqlmodel import Session, select

from shopcart.database import mark_changed
from shopcart.models.address import Address
from shopcart.models.user import UserProfile

TABLE = UserProfile.__tablename__


class UserRepository:
    """
    Data access layer for UserProfile.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Basic CRUD -----

    def get_by_id(self, session: Session, user_id: str) -> UserProfile | None:
        """Return a UserProfile by primary key, or None if not found."""
        return session.get(UserProfile, user_id)

    def get_by_email(self, session: Session, email: str) -> UserProfile | None:
        """Return a UserProfile by unique email, or None if not found."""
        stmt = select(UserProfile).where(UserProfile.email == email)
        return session.exec(stmt).first()

    def create(self, session: Session, user: UserProfile) -> UserProfile:
        """Insert a new UserProfile and return the persisted row."""
        session.add(user)
        mark_changed(session, TABLE)
        session.commit()
        session.refresh(user)
        return user

    def update(self, session: Session, user: UserProfile) -> UserProfile:
        """Persist changes to an existing UserProfile."""
        session.add(user)
        mark_changed(session, TABLE)
        session.commit()
        session.refresh(user)
        return user

    def delete(self, session: Session, user: UserProfile) -> None:
        """Delete a UserProfile; its addresses go with it (FK cascade)."""
        session.delete(user)
        mark_changed(session, TABLE, Address.__tablename__)
        session.commit()
