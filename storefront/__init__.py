"""
storefront — variant, stock and price resolution for a storefront purchase flow.

    from storefront import catalog as K     # Products, variants, VariantIndex
    from storefront import selection as Sel  # Colour/size reconciliation
    from storefront import stock as S       # Stock resolution and guards
    from storefront import pricing as P     # Unit price and display image
    from storefront import discount as D    # Coupon validation and application
    from storefront import cart as Ct       # Cart lines
    from storefront import order as O       # Order payload and invoice
    from storefront import gateway as G     # Async collaborator fetches
"""

import logging

from storefront import catalog
from storefront import selection
from storefront import stock
from storefront import pricing
from storefront import discount
from storefront import cart
from storefront import order
from storefront import gateway
from storefront.config import Settings, DEFAULT_SETTINGS
from storefront._types import (
    Result,
    Ok,
    Error,
    LazyCoroResult,
    Money,
    ZERO,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = (
    "catalog",
    "selection",
    "stock",
    "pricing",
    "discount",
    "cart",
    "order",
    "gateway",
    "Settings",
    "DEFAULT_SETTINGS",
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    "Money",
    "ZERO",
)
