"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users. State tracks ids returned by the API so follow-up requests can use them.
"""

from dataclasses import dataclass, field


@dataclass
class AdminState:
    """Tracks the products a simulated administrator has added."""

    product_codes: list[str] = field(default_factory=list)
    product_ids: list[str] = field(default_factory=list)


@dataclass
class ShopperState:
    """Tracks a simulated shopper's session and cart."""

    email: str | None = None
    password: str | None = None
    cart_id: str | None = None
    cart_product_ids: list[str] = field(default_factory=list)
    tickets: int = 0
