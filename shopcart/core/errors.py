"""Custom exceptions for shopcart."""


class ShopcartError(Exception):
    """Base exception for all shopcart errors."""

    pass


class StorageError(ShopcartError):
    """Raised when the embedded store fails (I/O, constraint violation)."""

    def __init__(self, reason: str | None = None):
        self.reason = reason
        msg = "Storage failure"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ProductNotFoundError(ShopcartError):
    """Raised when a product id is not in the catalog."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class EmptyCartError(ShopcartError):
    """Raised when checking out with no cart lines."""

    def __init__(self):
        super().__init__("Cart is empty")


class NotAuthenticatedError(ShopcartError):
    """Raised when an operation needs the principal user to be logged in."""

    def __init__(self):
        super().__init__("Authentication required")
