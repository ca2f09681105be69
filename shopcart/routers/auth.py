# shopcart/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, Response, status

from shopcart.core.auth import get_facade
from shopcart.facade import ShopFacade
from shopcart.schemas.user import (
    LoginResult,
    RegisterResult,
    UserInfo,
    UserLogin,
    UserRead,
    UserRegister,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, facade: ShopFacade = Depends(get_facade)):
    """
    Create the local account and log it in.

    Only one account can exist:
      - 409 if an account is already registered
    """
    result = facade.register_user(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        confirm_password=payload.confirm_password,
    )
    if result is RegisterResult.ALREADY_EXISTS:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account is already registered",
        )
    return facade.get_user_profile()


@router.post("/login", response_model=UserInfo)
def login(payload: UserLogin, facade: ShopFacade = Depends(get_facade)):
    """
    Log in with email + password.

    - 401 on wrong credentials (same message whatever was wrong)
    """
    result = facade.login(payload.email, payload.password)
    if result is LoginResult.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return facade.get_user_info()


@router.post("/logout", response_model=UserInfo)
def logout(facade: ShopFacade = Depends(get_facade)):
    """Clear the logged-in flag. Safe to call when nobody is registered."""
    facade.logout()
    return facade.get_user_info()


@router.get("/me", response_model=UserRead)
def get_me(facade: ShopFacade = Depends(get_facade)):
    """
    Return the local account.

    - 404 if nobody registered yet
    """
    user = facade.get_user_profile()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No account registered",
        )
    return user


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def wipe_me(facade: ShopFacade = Depends(get_facade)):
    """
    Delete the local account together with its saved addresses.
    """
    facade.wipe_user()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
