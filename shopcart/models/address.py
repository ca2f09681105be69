# shopcart/models/address.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Address(SQLModel, table=True):
    """
    Saved shipping address of a user.

    For a given owner_id at most one row has is_default = True; the
    AddressService is the only writer of that flag.
    Rows are removed together with their owner (ON DELETE CASCADE).
    """

    __tablename__ = "addresses"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
    )

    owner_id: str = Field(
        foreign_key="user_profile.id",
        ondelete="CASCADE",
        index=True,
    )

    full_name: str
    phone: str
    full_address: str

    is_default: bool = Field(
        default=False,
        index=True,
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
