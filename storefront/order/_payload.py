"""
Order payload — what the client submits when a cart is checked out.

The order collaborator recomputes and stays authoritative; this payload
carries the client's view of the totals so both sides can be compared.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from kungfu import Error, Ok, Result

from storefront._types import Money
from storefront.cart import Cart, CartLine
from storefront.catalog import ColorKey
from storefront.discount import Coupon, CouponRejected, DiscountSummary, apply_coupon
from storefront.pricing import round_money
from storefront.stock import PurchaseError

# ═══════════════════════════════════════════════════════════════════════════════
# Types
# ═══════════════════════════════════════════════════════════════════════════════


class PaymentMethod(Enum):
    CARD = "cartao"
    TRANSFER = "transferencia"
    MPESA = "mpesa"
    EMOLA = "emola"
    CASH = "numerario"


@dataclass(frozen=True, slots=True)
class OrderLine:
    """One product line, priced at order time."""

    product_id: str
    quantity: int
    price: Money
    color: ColorKey | None = None
    size: str | None = None

    @classmethod
    def from_cart_line(cls, line: CartLine) -> OrderLine:
        return cls(
            product_id=line.product_id,
            quantity=line.quantity,
            price=line.unit_price,
            color=line.color,
            size=line.size,
        )

    @property
    def total(self) -> Money:
        return self.price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "product": self.product_id,
            "quantity": self.quantity,
            "price": float(round_money(self.price)),
        }
        if self.color is not None:
            data["color"] = self.color.value
        if self.size is not None:
            data["size"] = self.size
        return data


@dataclass(frozen=True, slots=True)
class OrderPayload:
    """
    Order ready for submission.

    total_price is the pre-discount subtotal, discount what the coupon
    actually saves, final_price what the customer pays. Unrounded until
    to_dict().
    """

    products: tuple[OrderLine, ...]
    total_price: Money
    discount: Money
    final_price: Money
    payment_method: PaymentMethod = PaymentMethod.CARD
    coupon_code: str | None = None
    notes: str = ""

    @property
    def total_items(self) -> int:
        return sum(p.quantity for p in self.products)

    def to_dict(self) -> dict[str, Any]:
        """Collaborator payload: camelCase keys, money rounded to cents."""
        data: dict[str, Any] = {
            "products": [p.to_dict() for p in self.products],
            "totalPrice": float(round_money(self.total_price)),
            "totalItems": self.total_items,
            "discount": float(round_money(self.discount)),
            "finalPrice": float(round_money(self.final_price)),
            "paymentMethod": self.payment_method.value,
        }
        if self.coupon_code is not None:
            data["couponCode"] = self.coupon_code
        if self.notes:
            data["notes"] = self.notes
        return data


# ═══════════════════════════════════════════════════════════════════════════════
# build_order()
# ═══════════════════════════════════════════════════════════════════════════════


def build_order(
    cart: Cart,
    coupon: Coupon | None = None,
    payment_method: PaymentMethod = PaymentMethod.CARD,
    notes: str = "",
    now: datetime | None = None,
) -> Result[OrderPayload, CouponRejected | PurchaseError]:
    """
    Build the checkout payload for `cart`, applying `coupon` to its subtotal.

    Example:
        match build_order(cart, coupon, PaymentMethod.MPESA):
            case Ok(order):
                submit(order.to_dict())
            case Error(CouponRejected() as rejected):
                ...
    """
    if cart.is_empty:
        return Error(PurchaseError.invalid_quantity(0))

    subtotal = cart.subtotal
    summary = DiscountSummary.none(subtotal)
    if coupon is not None:
        match apply_coupon(coupon, subtotal, now):
            case Ok(applied):
                summary = applied
            case Error(rejected):
                return Error(rejected)

    return Ok(OrderPayload(
        products=tuple(OrderLine.from_cart_line(line) for line in cart.lines),
        total_price=summary.subtotal,
        discount=summary.savings,
        final_price=summary.final_price,
        payment_method=payment_method,
        coupon_code=coupon.code if coupon is not None else None,
        notes=notes.strip(),
    ))


__all__ = (
    "PaymentMethod",
    "OrderLine",
    "OrderPayload",
    "build_order",
)
