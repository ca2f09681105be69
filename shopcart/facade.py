# shopcart/facade.py
"""
Single access point to the store for UI-state holders and HTTP routers.

Each call is one unit of work: it opens a session on the injected
Database, delegates to a service and closes the session. Lookups return
None for "not found"; store failures raise StorageError.
"""
from shopcart.core.config import get_settings
from shopcart.core.events import LiveQuery
from shopcart.database import Database
from shopcart.models.address import Address
from shopcart.models.cart import CartItem
from shopcart.models.product import Product
from shopcart.models.user import UserProfile
from shopcart.repositories.address_repo import AddressRepository
from shopcart.repositories.cart_repo import CartRepository
from shopcart.repositories.product_repo import ProductRepository
from shopcart.repositories.user_repo import UserRepository
from shopcart.schemas.address import AddressBase, AddressCreate, AddressUpdate
from shopcart.schemas.cart import CartSummary
from shopcart.schemas.checkout import CheckoutRequest, OrderConfirmation
from shopcart.schemas.user import (
    LoginResult,
    RegisterResult,
    UserInfo,
    UserLogin,
    UserRegister,
)
from shopcart.services.address_service import AddressService
from shopcart.services.cart_service import CartService
from shopcart.services.checkout_service import CheckoutService
from shopcart.services.product_service import ProductService
from shopcart.services.user_service import UserService


def _check_address_fields(address: Address, schema: type[AddressBase]) -> None:
    """Validate the editable fields of `address` and write back the trimmed values."""
    fields = schema(
        full_name=address.full_name,
        phone=address.phone,
        full_address=address.full_address,
        is_default=address.is_default,
    )
    address.full_name = fields.full_name
    address.phone = fields.phone
    address.full_address = fields.full_address


class ShopFacade:
    def __init__(self, db: Database, principal_id: str | None = None):
        self.db = db
        self.principal_id = principal_id or get_settings().PRINCIPAL_USER_ID

        self.product_service = ProductService(ProductRepository())
        self.cart_service = CartService(CartRepository())
        self.user_service = UserService(UserRepository(), self.principal_id)
        self.address_service = AddressService(AddressRepository())
        self.checkout_service = CheckoutService(
            self.cart_service,
            self.address_service,
            self.user_service,
        )

    # ========== Products ==========

    def list_products(self) -> list[Product]:
        return self.product_service.list_products()

    def get_product(self, product_id: str) -> Product | None:
        return self.product_service.get_product(product_id)

    def require_product(self, product_id: str) -> Product:
        return self.product_service.require_product(product_id)

    def search_products(self, query: str | None) -> list[Product]:
        return self.product_service.search(query)

    # ========== Cart ==========

    def get_cart_lines(self) -> LiveQuery[list[CartItem]]:
        """Live view of all cart lines, pushed again after every cart write."""
        return LiveQuery(self.db, CartItem.__tablename__, self.cart_service.list_items)

    def get_cart_summary(self) -> CartSummary:
        with self.db.session() as session:
            return self.cart_service.get_cart_summary(session)

    def add_to_cart(self, product: Product) -> CartItem:
        with self.db.session() as session:
            return self.cart_service.add_one(session, product)

    def add_to_cart_quantity(self, product: Product, quantity: int) -> CartItem | None:
        with self.db.session() as session:
            return self.cart_service.add_n(session, product, quantity)

    def set_cart_line_quantity(self, product_id: str, quantity: int) -> CartItem | None:
        with self.db.session() as session:
            return self.cart_service.set_quantity(session, product_id, quantity)

    def remove_cart_line(self, product_id: str) -> bool:
        with self.db.session() as session:
            return self.cart_service.remove_item(session, product_id)

    def clear_cart(self) -> None:
        with self.db.session() as session:
            self.cart_service.clear_cart(session)

    # ========== User ==========

    def get_user_profile(self) -> UserProfile | None:
        with self.db.session() as session:
            return self.user_service.get_profile(session)

    def get_user_profile_stream(self) -> LiveQuery[UserProfile | None]:
        return LiveQuery(self.db, UserProfile.__tablename__, self.user_service.get_profile)

    def get_user_info(self) -> UserInfo:
        with self.db.session() as session:
            return self.user_service.get_user_info(session)

    def is_logged_in(self) -> bool:
        with self.db.session() as session:
            return self.user_service.is_logged_in(session)

    def register_user(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: str | None = None,
    ) -> RegisterResult:
        """
        Raises pydantic.ValidationError for bad input before touching the
        store; returns ALREADY_EXISTS when a profile is already there.
        """
        payload = UserRegister(
            name=name,
            email=email,
            password=password,
            confirm_password=confirm_password,
        )
        with self.db.session() as session:
            return self.user_service.register(session, payload)

    def login(self, email: str, password: str) -> LoginResult:
        payload = UserLogin(email=email, password=password)
        with self.db.session() as session:
            return self.user_service.login(session, payload)

    def logout(self) -> None:
        with self.db.session() as session:
            self.user_service.logout(session)

    def set_login_flag(self, logged_in: bool) -> UserProfile | None:
        with self.db.session() as session:
            return self.user_service.set_login_flag(session, logged_in)

    def wipe_user(self) -> bool:
        with self.db.session() as session:
            return self.user_service.wipe(session)

    # ========== Addresses ==========

    def get_addresses(self, owner_id: str) -> LiveQuery[list[Address]]:
        """Live view of the owner's addresses, newest first."""
        return LiveQuery(
            self.db,
            Address.__tablename__,
            lambda session: self.address_service.list_for_owner(session, owner_id),
        )

    def get_default_address(self, owner_id: str) -> Address | None:
        with self.db.session() as session:
            return self.address_service.get_default(session, owner_id)

    def get_address_by_id(self, address_id: str) -> Address | None:
        with self.db.session() as session:
            return self.address_service.get_by_id(session, address_id)

    def save_address(self, address: Address) -> Address:
        """
        Raises pydantic.ValidationError for bad fields before touching the
        store. Accepted values are stored trimmed.
        """
        _check_address_fields(address, AddressCreate)
        with self.db.session() as session:
            return self.address_service.save(session, address)

    def update_address(self, address: Address) -> Address | None:
        _check_address_fields(address, AddressUpdate)
        with self.db.session() as session:
            return self.address_service.update(session, address)

    def remove_address(self, address_id: str) -> bool:
        with self.db.session() as session:
            return self.address_service.remove(session, address_id)

    def set_default_address(self, owner_id: str, address_id: str) -> bool:
        with self.db.session() as session:
            return self.address_service.set_as_default(session, owner_id, address_id)

    def count_addresses(self, owner_id: str) -> int:
        with self.db.session() as session:
            return self.address_service.count(session, owner_id)

    # ========== Checkout ==========

    def checkout(self, payload: CheckoutRequest) -> OrderConfirmation:
        with self.db.session() as session:
            return self.checkout_service.checkout(session, payload)
