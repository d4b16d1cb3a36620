"""Product listing: query-string parsing, pagination and the response envelope."""

import math
from dataclasses import dataclass
from urllib.parse import urlencode

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.config import get_settings
from storefront.errors import ErrorCode, StorefrontError

SORT_DIRECTIONS = ("asc", "desc")


def _positive_int(name, raw, default):
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise StorefrontError(ErrorCode.INVALID_REQUEST, cause=f"{name} must be an integer") from None
    if value < 1:
        raise StorefrontError(ErrorCode.INVALID_REQUEST, cause=f"{name} must be greater than zero")
    return value


def _availability(raw):
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return None
    lowered = str(raw).strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


@dataclass(frozen=True)
class ProductQuery:
    page: int = 1
    limit: int = 10
    category: str | None = None
    available: bool | None = None
    sort_by_price: str | None = None

    @classmethod
    def from_params(cls, params) -> "ProductQuery":
        """Build a query from raw query-string values.

        ``page`` and ``limit`` must be positive integers; unknown ``available``
        and ``sortByPrice`` values are ignored rather than rejected.
        """
        sort = params.get("sortByPrice")
        sort = sort.lower() if isinstance(sort, str) else None
        return cls(
            page=_positive_int("page", params.get("page"), 1),
            limit=_positive_int("limit", params.get("limit"), get_settings().default_page_size),
            category=params.get("category") or None,
            available=_availability(params.get("available")),
            sort_by_price=sort if sort in SORT_DIRECTIONS else None,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def query_params(self, page: int) -> dict:
        params = {"page": page, "limit": self.limit}
        if self.category:
            params["category"] = self.category
        if self.available is not None:
            params["available"] = "true" if self.available else "false"
        if self.sort_by_price:
            params["sortByPrice"] = self.sort_by_price
        return params


@dataclass
class ProductPage:
    query: ProductQuery
    products: list[dict]
    total: int
    base_path: str = "/api/products"

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.query.limit))

    @property
    def has_prev_page(self) -> bool:
        return self.query.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.query.page < self.total_pages

    def link(self, page: int | None) -> str | None:
        if page is None:
            return None
        return f"{self.base_path}?{urlencode(self.query.query_params(page))}"

    def to_response(self) -> dict:
        prev_page = self.query.page - 1 if self.has_prev_page else None
        next_page = self.query.page + 1 if self.has_next_page else None
        return {
            "status": "success",
            "payload": self.products,
            "totalPages": self.total_pages,
            "prevPage": prev_page,
            "nextPage": next_page,
            "page": self.query.page,
            "hasPrevPage": self.has_prev_page,
            "hasNextPage": self.has_next_page,
            "prevLink": self.link(prev_page),
            "nextLink": self.link(next_page),
        }


def list_products(query: ProductQuery | None = None, base_path: str = "/api/products") -> ProductPage:
    """Read one page of the catalogue."""
    query = query or ProductQuery(limit=get_settings().default_page_size)
    results = current_domain.repository_for(Product).find_page(query)
    return ProductPage(
        query=query,
        products=[product.to_document() for product in results.items],
        total=results.total,
        base_path=base_path,
    )
