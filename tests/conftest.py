"""Pytest fixtures for shopcart tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from shopcart.core.config import Settings
from shopcart.database import Database
from shopcart.facade import ShopFacade
from shopcart.models.address import Address
from shopcart.models.product import Product

PRINCIPAL = "usuario_principal"


@pytest.fixture
def db(tmp_path):
    """A fresh SQLite store in a temporary directory."""
    database = Database(f"sqlite:///{tmp_path / 'test.db'}")
    database.create_db_and_tables()
    yield database
    database.dispose()


@pytest.fixture
def facade(db):
    return ShopFacade(db, principal_id=PRINCIPAL)


@pytest.fixture
def registered(facade):
    """Facade with the principal user registered (and logged in)."""
    facade.register_user("Ana Perez", "ana@shop.com", "secret123")
    return facade


@pytest.fixture
def phone():
    return Product(
        id="1",
        name="Smartphone Galaxy",
        price=299.99,
        description="Android smartphone",
        image_url="file:///images/test1.webp",
    )


@pytest.fixture
def laptop():
    return Product(
        id="2",
        name="Laptop Pro",
        price=1299.99,
        description="Professional laptop",
        image_url="file:///images/test2.webp",
    )


@pytest.fixture
def make_address():
    """Build (unsaved) addresses with increasing created_at timestamps."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(is_default=False, owner_id=PRINCIPAL, full_name="Ana Perez", **kwargs):
        counter["n"] += 1
        stamp = base + timedelta(minutes=counter["n"])
        return Address(
            owner_id=owner_id,
            full_name=full_name,
            phone=kwargs.pop("phone", "5512345678"),
            full_address=kwargs.pop("full_address", f"Calle Falsa {counter['n']}, Ciudad"),
            is_default=is_default,
            created_at=stamp,
            updated_at=stamp,
            **kwargs,
        )

    return _make


@pytest.fixture
def client(tmp_path):
    """TestClient on an app wired to a temporary store."""
    from shopcart.main import create_app

    settings = Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'api.db'}",
        PRINCIPAL_USER_ID=PRINCIPAL,
    )
    with TestClient(create_app(settings)) as test_client:
        yield test_client
