"""Exception handlers mapping failures onto the error catalogue."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.errors import ErrorCode, StorefrontError

logger = structlog.get_logger(__name__)

PAGE_NOT_FOUND = {"message": "Page not found"}


def error_body(code: ErrorCode, cause=None) -> dict:
    return StorefrontError(code, cause=cause).to_dict()


def describe_pydantic_errors(errors) -> list[dict]:
    """Reduce pydantic error entries to JSON-safe location/message pairs."""
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg"), "type": error.get("type")}
        for error in errors
    ]


async def storefront_error_handler(request: Request, exc: StorefrontError):
    if exc.status >= 500:
        logger.error("Request failed", code=exc.code.name, cause=exc.cause)
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


async def not_found_handler(request: Request, exc: ObjectNotFoundError):
    return JSONResponse(status_code=404, content=error_body(ErrorCode.PRODUCT_NOT_FOUND, cause=str(exc)))


def _code_for_fields(fields) -> ErrorCode:
    return ErrorCode.INVALID_QUANTITY if "quantity" in fields else ErrorCode.INVALID_REQUEST


async def validation_error_handler(request: Request, exc: ValidationError):
    code = _code_for_fields(exc.messages)
    return JSONResponse(status_code=400, content=error_body(code, cause=exc.messages))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = describe_pydantic_errors(exc.errors())
    code = _code_for_fields({part for error in errors for part in error["loc"]})
    return JSONResponse(status_code=400, content=error_body(code, cause=errors))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content=PAGE_NOT_FOUND)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", path=request.url.path, error=type(exc).__name__)
    return JSONResponse(status_code=500, content=error_body(ErrorCode.INTERNAL_SERVER_ERROR, cause=str(exc)))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
