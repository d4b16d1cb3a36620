"""Ticket aggregate: the receipt generated when a cart is purchased."""

import json
import uuid
from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront
from storefront.ordering.events import TicketIssued


@storefront.aggregate
class Ticket:
    code = String(required=True, max_length=64, unique=True)
    purchase_datetime = DateTime(required=True)
    amount = Float(required=True, min_value=0.0)
    purchaser = String(required=True, max_length=254)
    cart_id = Identifier(required=True)
    items = Text()  # JSON array of purchased lines

    @classmethod
    def issue(cls, cart_id, purchaser, lines):
        """Create a ticket for the purchased ``lines`` (dicts with subtotal)."""
        now = datetime.now(UTC)
        amount = round(sum(line["subtotal"] for line in lines), 2)
        ticket = cls(
            code=uuid.uuid4().hex.upper(),
            purchase_datetime=now,
            amount=amount,
            purchaser=purchaser,
            cart_id=cart_id,
            items=json.dumps(lines),
        )
        ticket.raise_(
            TicketIssued(
                ticket_id=str(ticket.id),
                code=ticket.code,
                cart_id=str(cart_id),
                purchaser=purchaser,
                amount=amount,
                purchased_at=now,
            )
        )
        return ticket

    def to_document(self) -> dict:
        return {
            "id": str(self.id),
            "code": self.code,
            "purchase_datetime": self.purchase_datetime.isoformat(),
            "amount": self.amount,
            "purchaser": self.purchaser,
            "cart_id": str(self.cart_id),
            "products": json.loads(self.items) if self.items else [],
        }
