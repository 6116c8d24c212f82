"""
Stock — resolve stock for a selection and guard requested quantities.

    from storefront import stock as S

    match S.validate_purchase(selection, quantity, index, product.stock):
        case Ok(available):
            ...
        case Error(e) if e.kind is S.PurchaseErrorKind.INSUFFICIENT_STOCK:
            quantity = e.available
"""

from __future__ import annotations

from storefront.stock._types import PurchaseErrorKind, PurchaseError
from storefront.stock._guard import resolve_stock, clamp_quantity, validate_purchase

__all__ = (
    "PurchaseErrorKind",
    "PurchaseError",
    "resolve_stock",
    "clamp_quantity",
    "validate_purchase",
)
