"""Request dependencies: the session user and product-admin guard."""

from fastapi import Depends, Request

from storefront.config import get_settings
from storefront.errors import ErrorCode, StorefrontError
from storefront.identity.credentials import decode_token
from storefront.identity.user import UserRole


def session_token(request: Request) -> str | None:
    """Token from the session cookie, falling back to an ``Authorization: Bearer`` header."""
    token = request.cookies.get(get_settings().auth_cookie_name)
    if token:
        return token
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def current_user(request: Request) -> dict:
    token = session_token(request)
    if not token:
        raise StorefrontError(ErrorCode.NOT_AUTHENTICATED, cause="No session token")
    return decode_token(token)


def optional_user(request: Request) -> dict | None:
    try:
        return current_user(request)
    except StorefrontError:
        return None


def require_product_admin(user: dict | None = Depends(optional_user)) -> dict | None:
    """Product mutations are open unless ``REQUIRE_ADMIN_FOR_PRODUCTS`` is set."""
    if not get_settings().require_admin_for_products:
        return user
    if user is None:
        raise StorefrontError(ErrorCode.NOT_AUTHENTICATED, cause="Log in as an administrator")
    if user.get("role") != UserRole.ADMIN.value:
        raise StorefrontError(ErrorCode.FORBIDDEN, cause="Administrator role required")
    return user
