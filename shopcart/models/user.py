# shopcart/models/user.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class UserProfile(SQLModel, table=True):
    """
    The single local user of the application.

    Identity:
      - id: always settings.PRINCIPAL_USER_ID; at most one row exists

    Session:
      - is_logged_in is flipped by login / logout

    The password is stored and compared as plaintext (known risk).
    """

    __tablename__ = "user_profile"

    id: str = Field(
        primary_key=True,
        description="Fixed principal user id",
    )

    name: str = Field(
        max_length=50,
        description="Display name",
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login credential",
    )

    password: str

    is_logged_in: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
