"""
Gateway — async fetches from the catalog and coupon collaborators.

    from storefront import gateway as G

    cache = G.product_cache(source, settings).build()

    match await cache.get("p1"):
        case Ok(lookup):
            view = lookup.value
        case Error(e):
            print(e.kind, e.message)

    match await G.lookup_coupon(coupons, typed):
        case Ok(coupon):
            ...
"""

from __future__ import annotations

from storefront.gateway._types import (
    Record,
    CatalogSource,
    CouponSource,
    GatewayErrorKind,
    GatewayError,
    ProductView,
)
from storefront.gateway._load import load_product, build_view
from storefront.gateway._cache import (
    Tier,
    LocalTier,
    CacheLookup,
    ProductCacheBuilder,
    ProductCache,
    product_cache,
)
from storefront.gateway._coupons import lookup_coupon

__all__ = (
    "Record",
    "CatalogSource",
    "CouponSource",
    "GatewayErrorKind",
    "GatewayError",
    "ProductView",
    "load_product",
    "build_view",
    "Tier",
    "LocalTier",
    "CacheLookup",
    "ProductCacheBuilder",
    "ProductCache",
    "product_cache",
    "lookup_coupon",
)
