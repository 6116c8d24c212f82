"""
Discount — coupon validation and application.

    from storefront import discount as D

    match D.validate_code(typed):
        case Ok(code):
            ...
    match D.apply_coupon(coupon, subtotal):
        case Ok(summary):
            print(summary.final_price, summary.savings)
        case Error(rejected):
            print(rejected.reason, rejected.message)
"""

from __future__ import annotations

from storefront.discount._types import (
    CouponType,
    Coupon,
    DiscountSummary,
    RejectReason,
    CouponRejected,
)
from storefront.discount._engine import validate_code, apply_coupon, discount_for

__all__ = (
    "CouponType",
    "Coupon",
    "DiscountSummary",
    "RejectReason",
    "CouponRejected",
    "validate_code",
    "apply_coupon",
    "discount_for",
)
