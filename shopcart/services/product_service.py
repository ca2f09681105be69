# shopcart/services/product_service.py
from shopcart.core.errors import ProductNotFoundError
from shopcart.models.product import Product
from shopcart.repositories.product_repo import ProductRepository


class ProductService:
    """
    Catalog browsing and search.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self) -> list[Product]:
        return self.repo.list()

    def get_product(self, product_id: str) -> Product | None:
        return self.repo.get_by_id(product_id)

    def require_product(self, product_id: str) -> Product:
        """Like get_product, but raises ProductNotFoundError when missing."""
        product = self.repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def search(self, query: str | None) -> list[Product]:
        """
        Case-insensitive match on name or description.
        A blank query returns the whole catalog.
        """
        if query is None or not query.strip():
            return self.repo.list()

        needle = query.strip().lower()
        return [
            p
            for p in self.repo.list()
            if needle in p.name.lower() or needle in p.description.lower()
        ]
