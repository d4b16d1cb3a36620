"""Mock data and logger check endpoints."""

import structlog
from fastapi import APIRouter

from storefront.catalogue.mocks import mock_products
from storefront.config import get_settings

logger = structlog.get_logger(__name__)

diagnostics_router = APIRouter(tags=["diagnostics"])

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@diagnostics_router.get("/mockingproducts")
async def mocking_products() -> dict:
    products = mock_products(get_settings().mock_product_count)
    return {"status": "success", "payload": products}


@diagnostics_router.get("/loggertest")
async def logger_test() -> dict:
    for level in LOG_LEVELS:
        getattr(logger, level)("Logger test", checked_level=level)
    return {"status": "ok", "levels": list(LOG_LEVELS)}
