"""Populated cart view: cart lines joined with their catalogue documents."""

from storefront.ordering.lookup import find_product, load_cart


def populated_cart(cart_id) -> dict:
    cart = load_cart(cart_id)
    lines = []
    total = 0.0
    for item in cart.items:
        product = find_product(item.product_id)
        subtotal = round(product.price * item.quantity, 2) if product else 0.0
        total += subtotal
        lines.append(
            {
                "product": product.to_document() if product else None,
                "product_id": str(item.product_id),
                "quantity": item.quantity,
                "subtotal": subtotal,
            }
        )
    return {"id": str(cart.id), "products": lines, "total": round(total, 2)}
