"""
DiscountEngine — coupon code validation and discount computation.

The coupon collaborator stays authoritative; this only re-derives the
discount for display and for the order payload.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from decimal import Decimal

from kungfu import Error, Ok, Result

from storefront._types import Money, ZERO
from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.discount._types import (
    Coupon,
    CouponRejected,
    CouponType,
    DiscountSummary,
    RejectReason,
    as_utc,
)

logger = logging.getLogger(__name__)

_CODE = re.compile(r"^[A-Z0-9]+$")
_HUNDRED = Decimal(100)

# ═══════════════════════════════════════════════════════════════════════════════
# validate_code()
# ═══════════════════════════════════════════════════════════════════════════════


def validate_code(code: str, settings: Settings = DEFAULT_SETTINGS) -> Result[str, CouponRejected]:
    """
    Normalise a typed coupon code (uppercase, trimmed) and check its syntax.

    Example:
        validate_code(" save10 ")  # Ok("SAVE10")
        validate_code("ab")        # Error(INVALID_FORMAT)
    """
    normalized = code.upper().strip()
    low, high = settings.coupon_min_length, settings.coupon_max_length

    if len(normalized) < low:
        return Error(_reject(RejectReason.INVALID_FORMAT, f"code must have at least {low} characters"))
    if len(normalized) > high:
        return Error(_reject(RejectReason.INVALID_FORMAT, f"code must have at most {high} characters"))
    if not _CODE.match(normalized):
        return Error(_reject(RejectReason.INVALID_FORMAT, "code may only contain letters and digits"))
    return Ok(normalized)


# ═══════════════════════════════════════════════════════════════════════════════
# apply_coupon()
# ═══════════════════════════════════════════════════════════════════════════════


def apply_coupon(
    coupon: Coupon,
    subtotal: Money,
    now: datetime | None = None,
) -> Result[DiscountSummary, CouponRejected]:
    """
    Apply `coupon` to a pre-discount subtotal.

    Checks run in order: inactive, expired, exhausted, below minimum.
    maxDiscountAmount caps percentage coupons only; fixed coupons are never
    capped by it.

    Example:
        apply_coupon(Coupon.percentage("SAVE20", 20, max_discount_amount=Decimal(15)), Decimal(100))
        # Ok(DiscountSummary(subtotal=100, discount_value=15, final_price=85))
    """
    moment = as_utc(now) if now is not None else datetime.now(UTC)

    if not coupon.is_active:
        return Error(_reject(RejectReason.INACTIVE, f"coupon {coupon.code} is not active"))
    if coupon.expires_at is not None and moment >= coupon.expires_at:
        return Error(_reject(RejectReason.EXPIRED, f"coupon {coupon.code} has expired"))
    if coupon.usage_limit is not None and coupon.usage_count >= coupon.usage_limit:
        return Error(_reject(RejectReason.EXHAUSTED, f"coupon {coupon.code} has no uses left"))
    if coupon.min_purchase_amount is not None and subtotal < coupon.min_purchase_amount:
        return Error(_reject(
            RejectReason.BELOW_MINIMUM,
            f"coupon {coupon.code} requires a minimum purchase of {coupon.min_purchase_amount}",
        ))

    discount_value = discount_for(coupon, subtotal)
    final_price = max(ZERO, subtotal - discount_value)
    return Ok(DiscountSummary(subtotal=subtotal, discount_value=discount_value, final_price=final_price))


def discount_for(coupon: Coupon, subtotal: Money) -> Money:
    """Nominal discount of `coupon` on `subtotal`, eligibility not checked."""
    match coupon.type:
        case CouponType.PERCENTAGE:
            raw = subtotal * coupon.discount / _HUNDRED
            if coupon.max_discount_amount is not None:
                return min(raw, coupon.max_discount_amount)
            return raw
        case CouponType.FIXED:
            return coupon.discount


def _reject(reason: RejectReason, message: str) -> CouponRejected:
    logger.debug("coupon rejected (%s): %s", reason.name, message)
    return CouponRejected(reason, message)


__all__ = (
    "validate_code",
    "apply_coupon",
    "discount_for",
)
