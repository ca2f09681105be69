# shopcart/routers/addresses.py
from fastapi import APIRouter, Depends, HTTPException, Response, status

from shopcart.core.auth import get_facade, require_user
from shopcart.facade import ShopFacade
from shopcart.models.address import Address
from shopcart.models.user import UserProfile
from shopcart.schemas.address import (
    AddressCount,
    AddressCreate,
    AddressRead,
    AddressUpdate,
)

router = APIRouter(prefix="/addresses", tags=["Addresses"])


def _get_own_address(facade: ShopFacade, user: UserProfile, address_id: str) -> Address:
    address = facade.get_address_by_id(address_id)
    if address is None or address.owner_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Address not found",
        )
    return address


@router.get("", response_model=list[AddressRead])
def list_addresses(
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    """List saved addresses, newest first."""
    return facade.get_addresses(current_user.id).get()


@router.get("/default", response_model=AddressRead)
def get_default_address(
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    """
    Return the default address.

    - 404 if no address is flagged default
    """
    address = facade.get_default_address(current_user.id)
    if address is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No default address",
        )
    return address


@router.get("/count", response_model=AddressCount)
def count_addresses(
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    return AddressCount(count=facade.count_addresses(current_user.id))


@router.get("/{address_id}", response_model=AddressRead)
def get_address(
    address_id: str,
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    return _get_own_address(facade, current_user, address_id)


@router.post("", response_model=AddressRead, status_code=status.HTTP_201_CREATED)
def create_address(
    payload: AddressCreate,
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    """
    Save a new address.

    If is_default is true, the previous default loses its flag.
    """
    address = Address(owner_id=current_user.id, **payload.model_dump())
    return facade.save_address(address)


@router.put("/{address_id}", response_model=AddressRead)
def update_address(
    address_id: str,
    payload: AddressUpdate,
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    """
    Replace the fields of an address.

    If is_default is true, the previous default loses its flag.
    """
    _get_own_address(facade, current_user, address_id)
    address = Address(id=address_id, owner_id=current_user.id, **payload.model_dump())
    updated = facade.update_address(address)
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Address not found",
        )
    return updated


@router.delete("/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_address(
    address_id: str,
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    """
    Delete an address.

    Deleting the default address does not promote another one.
    """
    _get_own_address(facade, current_user, address_id)
    facade.remove_address(address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{address_id}/default", response_model=AddressRead)
def set_default_address(
    address_id: str,
    facade: ShopFacade = Depends(get_facade),
    current_user: UserProfile = Depends(require_user),
):
    """Make this address the only default one."""
    if not facade.set_default_address(current_user.id, address_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Address not found",
        )
    return facade.get_address_by_id(address_id)
