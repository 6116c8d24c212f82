"""
Discount types — coupon snapshot, summary and rejection reasons.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum, auto
from typing import Any

from storefront._types import Money, ZERO, to_money, to_optional_money

# ═══════════════════════════════════════════════════════════════════════════════
# Coupon — Stored Rules
# ═══════════════════════════════════════════════════════════════════════════════


class CouponType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


def _timestamp(raw: object) -> datetime | None:
    """ISO-8601 string or datetime; naive values are taken as UTC."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        value = raw
    else:
        text = str(raw).strip()
        try:
            value = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"expiresAt: invalid timestamp {raw!r}") from e
    return as_utc(value)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


_TRUE = frozenset({"true", "1", "yes"})
_FALSE = frozenset({"false", "0", "no"})


def _flag(raw: object, field: str, default: bool) -> bool:
    if raw is None or raw == "":
        return default
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{field}: expected a boolean, got {raw!r}")


def _optional_count(raw: object, field: str) -> int | None:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise ValueError(f"{field}: expected an integer, got {raw!r}") from e


@dataclass(frozen=True, slots=True)
class Coupon:
    """
    Coupon as stored by the coupon collaborator.

    discount is a percentage (0–100) for PERCENTAGE coupons and a currency
    amount for FIXED ones. Issuance and redemption bookkeeping is not ours.
    """

    code: str
    type: CouponType
    discount: Money
    is_active: bool = True
    expires_at: datetime | None = None
    min_purchase_amount: Money | None = None
    max_discount_amount: Money | None = None
    usage_limit: int | None = None
    usage_count: int = 0

    def __post_init__(self) -> None:
        if self.discount < 0:
            raise ValueError(f"Coupon {self.code}: discount must be >= 0")
        if self.type is CouponType.PERCENTAGE and self.discount > 100:
            raise ValueError(f"Coupon {self.code}: percentage discount must be <= 100")
        if self.min_purchase_amount is not None and self.min_purchase_amount < 0:
            raise ValueError(f"Coupon {self.code}: minPurchaseAmount must be >= 0")
        if self.max_discount_amount is not None and self.max_discount_amount < 0:
            raise ValueError(f"Coupon {self.code}: maxDiscountAmount must be >= 0")
        if self.expires_at is not None and self.expires_at.tzinfo is None:
            raise ValueError(f"Coupon {self.code}: expires_at must be timezone-aware")

    @classmethod
    def percentage(cls, code: str, discount: Money | int | str, **kwargs: Any) -> Coupon:
        return cls(code=code, type=CouponType.PERCENTAGE, discount=to_money(discount), **kwargs)

    @classmethod
    def fixed(cls, code: str, discount: Money | int | str, **kwargs: Any) -> Coupon:
        return cls(code=code, type=CouponType.FIXED, discount=to_money(discount), **kwargs)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Coupon:
        """
        Build from the collaborator's ICoupon mapping.

        Example:
            Coupon.from_record({
                "code": "SAVE20", "type": "percentage", "discount": 20,
                "isActive": True, "expiresAt": "2030-01-01T00:00:00Z",
                "maxDiscountAmount": 15,
            })
        """
        try:
            coupon_type = CouponType(str(record.get("type")))
        except ValueError as e:
            raise ValueError(f"type: unknown coupon type {record.get('type')!r}") from e
        return cls(
            code=str(record.get("code") or "").strip().upper(),
            type=coupon_type,
            discount=to_money(record.get("discount"), field="discount"),
            is_active=_flag(record.get("isActive"), "isActive", True),
            expires_at=_timestamp(record.get("expiresAt")),
            min_purchase_amount=to_optional_money(
                record.get("minPurchaseAmount"), field="minPurchaseAmount"
            ),
            max_discount_amount=to_optional_money(
                record.get("maxDiscountAmount"), field="maxDiscountAmount"
            ),
            usage_limit=_optional_count(record.get("usageLimit"), "usageLimit"),
            usage_count=_optional_count(record.get("usageCount"), "usageCount") or 0,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Result Types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class DiscountSummary:
    """
    Discount applied to a subtotal. Unrounded; round only for display.

    discount_value is the coupon's nominal discount; savings is what the
    customer actually saves (a fixed coupon can exceed a small subtotal).
    """

    subtotal: Money
    discount_value: Money
    final_price: Money

    @property
    def savings(self) -> Money:
        return self.subtotal - self.final_price

    @classmethod
    def none(cls, subtotal: Money) -> DiscountSummary:
        return cls(subtotal=subtotal, discount_value=ZERO, final_price=subtotal)


class RejectReason(Enum):
    """Why a coupon was not applied."""

    INVALID_FORMAT = auto()
    INACTIVE = auto()
    EXPIRED = auto()
    EXHAUSTED = auto()
    BELOW_MINIMUM = auto()
    NOT_FOUND = auto()  # Gateway only: valid code, no such coupon


@dataclass(frozen=True, slots=True)
class CouponRejected:
    """Coupon rejection. Always recoverable: the coupon is simply not applied."""

    reason: RejectReason
    message: str


__all__ = (
    "CouponType",
    "Coupon",
    "DiscountSummary",
    "RejectReason",
    "CouponRejected",
)
