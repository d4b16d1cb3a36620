"""Identifier checks for ids arriving from URLs and socket payloads."""

from uuid import UUID

from storefront.errors import ErrorCode, StorefrontError


def is_valid_identifier(value) -> bool:
    """Documents are keyed by UUID strings; anything else cannot name one."""
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def ensure_identifier(value, code: ErrorCode) -> str:
    if not is_valid_identifier(value):
        raise StorefrontError(code, cause=f"Invalid identifier format: {value!r}")
    return value
