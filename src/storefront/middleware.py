"""HTTP middleware: domain context and request logging."""

import time
import uuid

import structlog
from fastapi import Request

from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


async def domain_context_middleware(request: Request, call_next):
    """Push the Protean domain context for each request."""
    with storefront.domain_context():
        return await call_next(request)


async def request_logging_middleware(request: Request, call_next):
    """Bind request details to the log context and log one line per request."""
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    add_context(request_id=request_id, method=request.method, path=request.url.path)
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request crashed")
        clear_context()
        raise

    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    log = logger.error if response.status_code >= 500 else logger.info
    log("Request handled", status=response.status_code, duration_ms=duration_ms)
    response.headers["X-Request-ID"] = request_id
    clear_context()
    return response
