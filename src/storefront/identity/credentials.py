"""Password hashing and session tokens.

Hashing is bcrypt; session tokens are HS256 JWTs carrying the public user
claims, so a request can be authenticated without a store lookup.
"""

from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from storefront.config import get_settings
from storefront.errors import ErrorCode, StorefrontError


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash
        return False


def issue_token(claims: dict, expires_in: timedelta | None = None) -> str:
    settings = get_settings()
    now = datetime.now(UTC)
    payload = {
        **claims,
        "sub": claims.get("id") or claims.get("email"),
        "iat": now,
        "exp": now + (expires_in or timedelta(minutes=settings.jwt_expires_minutes)),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Return the claims of a valid token; raise NOT_AUTHENTICATED otherwise."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise StorefrontError(ErrorCode.NOT_AUTHENTICATED, cause="Session expired") from None
    except jwt.InvalidTokenError:
        raise StorefrontError(ErrorCode.NOT_AUTHENTICATED, cause="Invalid session token") from None
