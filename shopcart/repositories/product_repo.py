# shopcart/repositories/product_repo.py
from shopcart.models.product import Product

# Static catalog; products are not stored in the database.
CATALOG: tuple[Product, ...] = (
    Product(
        id="1",
        name="Smartphone Galaxy",
        price=299.99,
        description="Android smartphone with a 6.1 inch screen and 48MP camera",
        image_url="file:///android_asset/images/test1.webp",
    ),
    Product(
        id="2",
        name="Laptop Pro",
        price=1299.99,
        description="Professional laptop with Intel i7 processor and 16GB RAM",
        image_url="file:///android_asset/images/test2.webp",
    ),
    Product(
        id="3",
        name="Wireless Headphones",
        price=89.99,
        description="Wireless headphones with noise cancelling",
        image_url="file:///android_asset/images/test3.webp",
    ),
    Product(
        id="4",
        name="Smart Watch",
        price=199.99,
        description="Smart watch with GPS and heart rate monitor",
        image_url="file:///android_asset/images/test4.webp",
    ),
    Product(
        id="5",
        name='Tablet 10"',
        price=399.99,
        description="Android tablet with a 10 inch HD screen",
        image_url="file:///android_asset/images/test5.webp",
    ),
)


class ProductRepository:
    """
    Read-only access to the product catalog.
    """

    def __init__(self, products: tuple[Product, ...] = CATALOG):
        self.products = products

    def list(self) -> list[Product]:
        return list(self.products)

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None
