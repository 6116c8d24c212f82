"""
Cart — lines produced by a confirmed purchase dialog.

    from storefront import cart as Ct

    match Ct.add_to_cart(cart, product, index, draft):
        case Ok(cart):
            print(cart.total_items, cart.subtotal)
        case Error(e):
            print(e.kind, e.message)
"""

from __future__ import annotations

from storefront.cart._types import line_key, CartLine, Cart
from storefront.cart._quote import quote_line, add_to_cart

__all__ = (
    "line_key",
    "CartLine",
    "Cart",
    "quote_line",
    "add_to_cart",
)
