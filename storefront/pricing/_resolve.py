"""
PriceResolver — unit price and display image for a selection.

Fallback chain, price:  variant price → product priceDiscount (if lower) → product price
Fallback chain, image:  variant image → product cover → placeholder
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from storefront._types import Money
from storefront.catalog import Product, Selection, VariantIndex
from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.pricing._types import (
    PLACEHOLDER,
    ImageRef,
    Placeholder,
    ProductCover,
    VariantImage,
)

CENT = Decimal("0.01")


def unit_price(selection: Selection, index: VariantIndex, product: Product) -> Money:
    variant = index.lookup(selection)
    if variant is not None and variant.price is not None:
        return variant.price
    return product.base_price


def display_image(selection: Selection, index: VariantIndex, product: Product) -> ImageRef:
    variant = index.lookup(selection)
    if variant is not None and variant.image:
        return VariantImage(variant.image)
    if product.image_cover:
        return ProductCover(product.image_cover)
    return PLACEHOLDER


def resolve_image_url(ref: ImageRef, settings: Settings = DEFAULT_SETTINGS) -> str:
    """Turn an ImageRef into a URL; absolute URLs pass through untouched."""
    match ref:
        case VariantImage(image_id):
            return _join(settings.variant_image_base, image_id)
        case ProductCover(image_id):
            return _join(settings.product_image_base, image_id)
        case Placeholder():
            return settings.placeholder_image


def _join(base: str, image_id: str) -> str:
    if image_id.startswith(("http://", "https://", "/")):
        return image_id
    return base.rstrip("/") + "/" + image_id


# ═══════════════════════════════════════════════════════════════════════════════
# Presentation
# ═══════════════════════════════════════════════════════════════════════════════


def round_money(amount: Money) -> Money:
    """Round to cents. Presentation / payload boundary only."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Money, settings: Settings = DEFAULT_SETTINGS) -> str:
    """
    Example:
        format_money(Decimal("1234.5"))  # "1234.50 MZN"
    """
    return f"{round_money(amount)} {settings.currency}"


__all__ = (
    "unit_price",
    "display_image",
    "resolve_image_url",
    "round_money",
    "format_money",
)
