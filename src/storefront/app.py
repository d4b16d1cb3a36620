"""Storefront FastAPI application.

``create_app`` builds the HTTP app; ``create_asgi_app`` initialises the domain
and mounts the Socket.IO server in front of it.

Usage:
    uvicorn storefront.app:create_asgi_app --factory --host 0.0.0.0 --port 8000
"""

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.carts import cart_router
from storefront.api.diagnostics import diagnostics_router
from storefront.api.errors import register_error_handlers
from storefront.api.products import product_router
from storefront.api.sessions import session_router
from storefront.api.views import view_router
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.middleware import domain_context_middleware, request_logging_middleware
from storefront.realtime import sio


def create_app() -> FastAPI:
    """Build the FastAPI app. The domain must already be initialised."""
    app = FastAPI(
        title="Storefront API",
        description="Product catalogue, carts and sessions with a live product feed",
    )

    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Registered last runs first: logging wraps the domain context
    app.middleware("http")(domain_context_middleware)
    app.middleware("http")(request_logging_middleware)

    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(session_router)
    app.include_router(diagnostics_router)
    app.include_router(view_router)
    register_error_handlers(app)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok", "domain": storefront.name}

    return app


def create_asgi_app():
    """Initialise the domain and serve HTTP and Socket.IO from one ASGI app."""
    storefront.init()
    return socketio.ASGIApp(sio, other_asgi_app=create_app())
