"""Error catalogue shared by command handlers and the HTTP layer."""

from enum import Enum


class ErrorCode(Enum):
    """Known failure kinds, each with a human message and the HTTP status it maps to."""

    INVALID_PRODUCT_ID = ("Invalid product ID", 400)
    INVALID_CART_ID = ("Invalid cart ID", 400)
    PRODUCT_NOT_FOUND = ("Product not found", 404)
    CART_NOT_FOUND = ("Cart not found", 404)
    PRODUCT_NOT_IN_CART = ("Product not found in cart", 404)
    DUPLICATE_PRODUCT_CODE = ("Product with that code already exist", 400)
    INVALID_PRODUCT_DATA = ("Invalid product data", 400)
    INVALID_QUANTITY = ("Quantity must be a positive integer", 400)
    INVALID_REQUEST = ("Invalid request", 400)
    USER_ALREADY_EXISTS = ("A user with that email already exists", 409)
    INVALID_CREDENTIALS = ("Invalid email or password", 401)
    NOT_AUTHENTICATED = ("Authentication required", 401)
    FORBIDDEN = ("You are not allowed to perform this action", 403)
    INTERNAL_SERVER_ERROR = ("Internal server error", 500)

    @property
    def message(self) -> str:
        return self.value[0]

    @property
    def status(self) -> int:
        return self.value[1]


class StorefrontError(Exception):
    """A failure with a catalogued error code and an optional cause."""

    def __init__(self, code: ErrorCode, cause=None):
        super().__init__(code.message)
        self.code = code
        self.cause = cause

    @property
    def status(self) -> int:
        return self.code.status

    def to_dict(self) -> dict:
        return {
            "name": self.code.name,
            "code": self.code.status,
            "message": self.code.message,
            "cause": self.cause,
        }
