"""
Invoice figures for a submitted order. Layout and rendering are not ours.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from storefront._types import Money, ZERO
from storefront.catalog import ColorKey
from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.order._payload import OrderPayload, PaymentMethod


@dataclass(frozen=True, slots=True)
class InvoiceItem:
    name: str
    quantity: int
    unit_price: Money
    total: Money
    color: ColorKey | None = None
    size: str | None = None


@dataclass(frozen=True, slots=True)
class Invoice:
    items: tuple[InvoiceItem, ...]
    subtotal: Money
    tax: Money
    discount: Money
    total: Money
    currency: str
    payment_method: PaymentMethod
    number: str = ""


def build_invoice(
    order: OrderPayload,
    names: Mapping[str, str] | None = None,
    settings: Settings = DEFAULT_SETTINGS,
    *,
    number: str = "",
) -> Invoice:
    """
    Compute invoice figures.

    names maps product ids to display names; unknown ids fall back to the id.
    Tax is levied on the pre-discount subtotal.
    """
    names = names or {}
    items = tuple(
        InvoiceItem(
            name=names.get(line.product_id, line.product_id),
            quantity=line.quantity,
            unit_price=line.price,
            total=line.total,
            color=line.color,
            size=line.size,
        )
        for line in order.products
    )
    subtotal = sum((item.total for item in items), ZERO)
    tax = subtotal * settings.tax_rate
    return Invoice(
        items=items,
        subtotal=subtotal,
        tax=tax,
        discount=order.discount,
        total=max(ZERO, subtotal + tax - order.discount),
        currency=settings.currency,
        payment_method=order.payment_method,
        number=number,
    )


__all__ = (
    "InvoiceItem",
    "Invoice",
    "build_invoice",
)
