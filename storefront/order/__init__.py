"""
Order — checkout payload and invoice figures.

    from storefront import order as O

    match O.build_order(cart, coupon, O.PaymentMethod.MPESA):
        case Ok(payload):
            invoice = O.build_invoice(payload, names, settings)
"""

from __future__ import annotations

from storefront.order._payload import PaymentMethod, OrderLine, OrderPayload, build_order
from storefront.order._invoice import InvoiceItem, Invoice, build_invoice

__all__ = (
    "PaymentMethod",
    "OrderLine",
    "OrderPayload",
    "build_order",
    "InvoiceItem",
    "Invoice",
    "build_invoice",
)
