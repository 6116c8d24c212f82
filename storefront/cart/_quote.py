"""
quote_line() — the one confirm path shared by catalog quick-add and the
product detail page.

    selection complete?  → INVALID_SELECTION
    stock for quantity?  → OUT_OF_STOCK / INSUFFICIENT_STOCK
    price + image        → CartLine
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from storefront.cart._types import Cart, CartLine, line_key
from storefront.catalog import Product, VariantIndex
from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.pricing import display_image, unit_price
from storefront.selection import PurchaseDraft
from storefront.stock import PurchaseError, validate_purchase


def quote_line(
    product: Product,
    index: VariantIndex,
    draft: PurchaseDraft,
    in_cart: int = 0,
    settings: Settings = DEFAULT_SETTINGS,
) -> Result[CartLine, PurchaseError]:
    """
    Turn a dialog's draft into a cart line.

    in_cart is the quantity of the same line already in the cart; the
    draft quantity on top of it must still fit in stock.
    """
    selection = draft.selection

    missing = index.missing_dimensions(selection)
    if missing:
        return Error(PurchaseError.invalid_selection(tuple(d.value for d in missing)))

    match validate_purchase(selection, draft.quantity + in_cart, index, product.stock, settings):
        case Error(e):
            return Error(e)
        case Ok(_):
            pass

    return Ok(CartLine(
        product_id=product.id,
        unit_price=unit_price(selection, index, product),
        image=display_image(selection, index, product),
        quantity=draft.quantity,
        name=product.name,
        color=selection.color,
        size=selection.size,
    ))


def add_to_cart(
    cart: Cart,
    product: Product,
    index: VariantIndex,
    draft: PurchaseDraft,
    settings: Settings = DEFAULT_SETTINGS,
) -> Result[Cart, PurchaseError]:
    """quote_line() against what the cart already holds, then add."""
    key = line_key(product.id, draft.selection.color, draft.selection.size)
    return quote_line(product, index, draft, cart.quantity_of(key), settings).map(cart.add)


__all__ = (
    "quote_line",
    "add_to_cart",
)
