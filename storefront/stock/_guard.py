"""
StockGuard — stock resolution and quantity validation for a selection.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from storefront.catalog import Selection, VariantIndex
from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.stock._types import PurchaseError

# ═══════════════════════════════════════════════════════════════════════════════
# resolve_stock()
# ═══════════════════════════════════════════════════════════════════════════════


def resolve_stock(
    selection: Selection,
    index: VariantIndex,
    fallback_stock: int | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> int:
    """
    Stock attributable to `selection`. Never negative.

    - Simple product (no variant data): the product's own stock (0 if unset).
    - Incomplete selection on a product with variants: 0.
    - Complete selection: the matching variant's stock; 0 when no variant
      has that combination.

    A combination known only from the legacy colour list has no stock field;
    it resolves to the product stock when the product has one, else to
    settings.unknown_stock_cap.
    """
    if not index.has_variants():
        return max(0, fallback_stock or 0)

    if not index.is_complete(selection):
        return 0

    variant = index.lookup(selection)
    if variant is not None:
        return variant.stock

    if index.legacy_entry(selection.color, selection.size) is not None:
        if fallback_stock is not None:
            return max(0, fallback_stock)
        return settings.unknown_stock_cap

    return 0


# ═══════════════════════════════════════════════════════════════════════════════
# clamp_quantity()
# ═══════════════════════════════════════════════════════════════════════════════


def clamp_quantity(requested: int, stock: int) -> Result[int, PurchaseError]:
    """
    Clamp `requested` into [1, stock].

    With no stock the request is rejected rather than clamped to 0.

    Example:
        clamp_quantity(5, 2)  # Ok(2)
        clamp_quantity(0, 2)  # Ok(1)
        clamp_quantity(1, 0)  # Error(OUT_OF_STOCK)
    """
    if stock <= 0:
        return Error(PurchaseError.out_of_stock())
    return Ok(max(1, min(requested, stock)))


# ═══════════════════════════════════════════════════════════════════════════════
# validate_purchase()
# ═══════════════════════════════════════════════════════════════════════════════


def validate_purchase(
    selection: Selection,
    quantity: int,
    index: VariantIndex,
    fallback_stock: int | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Result[int, PurchaseError]:
    """
    Check `quantity` against the resolved stock.

    Returns Ok(resolved stock) when the purchase can go ahead.
    """
    stock = resolve_stock(selection, index, fallback_stock, settings)
    if stock <= 0:
        return Error(PurchaseError.out_of_stock())
    if quantity < 1:
        return Error(PurchaseError.invalid_quantity(quantity))
    if quantity > stock:
        return Error(PurchaseError.insufficient(stock))
    return Ok(stock)


__all__ = (
    "resolve_stock",
    "clamp_quantity",
    "validate_purchase",
)
