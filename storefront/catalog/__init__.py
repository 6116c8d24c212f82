"""
Catalog — product snapshots, colour identity and the variant index.

    from storefront import catalog as K

    product = K.Product.from_record(raw_product)
    index = K.VariantIndex(
        [K.Variant.from_record(v) for v in raw_variants],
        legacy=[K.LegacyColorEntry.from_record(c) for c in raw_colors],
        product_sizes=product.sizes,
    )
"""

from __future__ import annotations

from storefront.catalog._color import (
    NAMED_COLORS,
    ColorKey,
    normalize_color,
    optional_color,
    hex_to_rgb,
)
from storefront.catalog._types import (
    Variant,
    LegacyColorEntry,
    Product,
    Selection,
    EMPTY_SELECTION,
)
from storefront.catalog._index import Dimension, VariantIndex

__all__ = (
    "NAMED_COLORS",
    "ColorKey",
    "normalize_color",
    "optional_color",
    "hex_to_rgb",
    "Variant",
    "LegacyColorEntry",
    "Product",
    "Selection",
    "EMPTY_SELECTION",
    "Dimension",
    "VariantIndex",
)
