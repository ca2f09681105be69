# shopcart/core/auth.py
from fastapi import Depends, HTTPException, Request, status

from shopcart.facade import ShopFacade
from shopcart.models.user import UserProfile


def get_facade(request: Request) -> ShopFacade:
    """
    FastAPI dependency returning the facade built by the composition root.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(facade: ShopFacade = Depends(get_facade)):
            ...
    """
    return request.app.state.facade


def get_current_user(facade: ShopFacade = Depends(get_facade)) -> UserProfile | None:
    """
    Resolve the principal user.

    Returns:
        UserProfile if registered and logged in, else None (guest).
    """
    user = facade.get_user_profile()
    if user is None or not user.is_logged_in:
        return None
    return user


def require_user(user: UserProfile | None = Depends(get_current_user)) -> UserProfile:
    """
    Enforce authentication.

    Raises:
        HTTPException(401): if nobody is logged in.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user
