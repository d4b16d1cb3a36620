"""Socket.IO server for the live product list.

Every connected client receives the ``productos`` event carrying the first
page of the catalogue: once on connect, and again after each committed
product or stock change.
"""

from __future__ import annotations

import json
from typing import Any

import socketio
import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from protean.utils.reflection import declared_fields

from storefront.catalogue.creation import PRODUCT_DUPLICATED, AddProduct
from storefront.catalogue.listing import list_products
from storefront.catalogue.removal import RemoveProduct
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.errors import ErrorCode, StorefrontError
from storefront.utils.identifiers import ensure_identifier

logger = structlog.get_logger(__name__)

PRODUCTS_EVENT = "productos"
ERROR_EVENT = "error"

sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=get_settings().socket_cors_origins,
    logger=False,
    engineio_logger=False,
)


def current_product_feed() -> list[dict]:
    """First page of products at the default page size, as sent to clients."""
    with storefront.domain_context():
        return list_products().products


async def broadcast_products() -> list[dict]:
    """Re-read the catalogue and push it to every connected client.

    Call only after the write has been committed, so that the feed reflects it.
    """
    payload = current_product_feed()
    await sio.emit(PRODUCTS_EVENT, payload)
    logger.debug("Product feed broadcast", products=len(payload))
    return payload


async def _send_error(sid: str, error: StorefrontError) -> None:
    await sio.emit(ERROR_EVENT, error.to_dict(), to=sid)


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    await sio.emit(PRODUCTS_EVENT, current_product_feed(), to=sid)
    logger.debug("Live feed client connected", sid=sid)


@sio.event
async def disconnect(sid: str):
    logger.debug("Live feed client disconnected", sid=sid)


@sio.event
async def add_product(sid: str, data: Any):
    if not isinstance(data, dict):
        await _send_error(sid, StorefrontError(ErrorCode.INVALID_PRODUCT_DATA, cause="Expected a product object"))
        return

    fields = {name: value for name, value in data.items() if name in declared_fields(AddProduct)}
    if "thumbnails" in fields:
        fields["thumbnails"] = json.dumps(fields["thumbnails"])
    try:
        with storefront.domain_context():
            product_id = current_domain.process(AddProduct(**fields), asynchronous=False)
    except ValidationError as exc:
        await _send_error(sid, StorefrontError(ErrorCode.INVALID_PRODUCT_DATA, cause=exc.messages))
        return

    if product_id is None:
        await _send_error(sid, StorefrontError(ErrorCode.DUPLICATE_PRODUCT_CODE, cause=PRODUCT_DUPLICATED))
        return
    await broadcast_products()


@sio.event
async def delete_product(sid: str, data: Any):
    product_id = data.get("id") if isinstance(data, dict) else data
    try:
        ensure_identifier(product_id, ErrorCode.INVALID_PRODUCT_ID)
        with storefront.domain_context():
            current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    except StorefrontError as exc:
        await _send_error(sid, exc)
        return
    await broadcast_products()
