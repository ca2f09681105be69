# shopcart/routers/products.py
from fastapi import APIRouter, Depends, Query

from shopcart.core.auth import get_facade
from shopcart.facade import ShopFacade
from shopcart.models.product import Product

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[Product])
def list_products(
    q: str | None = Query(default=None, description="Search in name and description"),
    facade: ShopFacade = Depends(get_facade),
):
    """List the catalog, optionally filtered by a search term."""
    return facade.search_products(q)


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: str, facade: ShopFacade = Depends(get_facade)):
    """Get a single product. Unknown ids => 404."""
    return facade.require_product(product_id)
