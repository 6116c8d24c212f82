"""
Pricing — unit price and display image for a selection.

    from storefront import pricing as P

    price = P.unit_price(selection, index, product)
    image = P.display_image(selection, index, product)
    url = P.resolve_image_url(image, settings)
"""

from __future__ import annotations

from storefront.pricing._types import (
    VariantImage,
    ProductCover,
    Placeholder,
    ImageRef,
    PLACEHOLDER,
)
from storefront.pricing._resolve import (
    unit_price,
    display_image,
    resolve_image_url,
    round_money,
    format_money,
)

__all__ = (
    "VariantImage",
    "ProductCover",
    "Placeholder",
    "ImageRef",
    "PLACEHOLDER",
    "unit_price",
    "display_image",
    "resolve_image_url",
    "round_money",
    "format_money",
)
