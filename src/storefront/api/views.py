"""Server-rendered pages."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from storefront.api.dependencies import optional_user
from storefront.catalogue.listing import ProductQuery, list_products
from storefront.errors import ErrorCode
from storefront.ordering.summary import populated_cart
from storefront.utils.identifiers import ensure_identifier

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

view_router = APIRouter(tags=["views"], include_in_schema=False)


@view_router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    page = list_products(base_path="/products")
    return templates.TemplateResponse(request, "home.html", {"products": page.products})


@view_router.get("/products", response_class=HTMLResponse)
async def products(request: Request):
    page = list_products(ProductQuery.from_params(request.query_params), base_path="/products")
    return templates.TemplateResponse(
        request,
        "products.html",
        {"page": page.to_response(), "user": optional_user(request)},
    )


@view_router.get("/carts/{cart_id}", response_class=HTMLResponse)
async def cart(request: Request, cart_id: str):
    ensure_identifier(cart_id, ErrorCode.INVALID_CART_ID)
    return templates.TemplateResponse(request, "cart.html", {"cart": populated_cart(cart_id)})


@view_router.get("/realtimeproducts", response_class=HTMLResponse)
async def realtime_products(request: Request):
    page = list_products()
    return templates.TemplateResponse(request, "realtime_products.html", {"products": page.products})


@view_router.get("/login", response_class=HTMLResponse)
async def login(request: Request):
    return templates.TemplateResponse(request, "login.html", {})


@view_router.get("/register", response_class=HTMLResponse)
async def register(request: Request):
    return templates.TemplateResponse(request, "register.html", {})


@view_router.get("/profile", response_class=HTMLResponse)
async def profile(request: Request):
    user = optional_user(request)
    if user is None:
        return RedirectResponse(url="/login", status_code=302)
    return templates.TemplateResponse(request, "profile.html", {"user": user})
