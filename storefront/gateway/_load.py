"""
load_product() — fetch a product's three records concurrently and index them.

    product ─┐
    variants ├─ gather3 ─ retry (upstream only) ─ ingest ─ ProductView
    legacy  ─┘
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence

import combinators as C
from kungfu import Error, LazyCoroResult, Ok, Result

from storefront.catalog import LegacyColorEntry, Product, Variant, VariantIndex
from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.gateway._types import (
    CatalogSource,
    GatewayError,
    GatewayErrorKind,
    ProductView,
    Record,
)

logger = logging.getLogger(__name__)


def upstream_error(what: str) -> Callable[[Exception], GatewayError]:
    """on_error for catching_async: log the failure and wrap it as UPSTREAM."""

    def on_error(exc: Exception) -> GatewayError:
        logger.warning("fetching %s failed: %s", what, exc)
        return GatewayError(GatewayErrorKind.UPSTREAM, f"{what}: {exc}")

    return on_error


def retry_policy(settings: Settings) -> C.RetryPolicy[GatewayError]:
    return C.RetryPolicy.fixed(
        times=settings.fetch_retries + 1,
        retry_on=lambda e: e.retryable,
    )


def _fetch[T](call: Callable[[], Awaitable[T]], what: str) -> LazyCoroResult[T, GatewayError]:
    return C.catching_async(call, on_error=upstream_error(what))


def load_product(
    source: CatalogSource,
    product_id: str,
    settings: Settings = DEFAULT_SETTINGS,
) -> LazyCoroResult[ProductView, GatewayError]:
    """
    Load one product for a purchase dialog.

    Example:
        match await load_product(source, "p1"):
            case Ok(view):
                reconciler = view.reconciler()
            case Error(e) if e.kind is GatewayErrorKind.NOT_FOUND:
                ...
    """
    records = C.gather3(
        _fetch(lambda: source.get_product(product_id), f"product {product_id}"),
        _fetch(lambda: source.get_variants(product_id), f"variants of {product_id}"),
        _fetch(lambda: source.get_legacy_colors(product_id), f"colours of {product_id}"),
    )

    async def ingest(
        fetched: tuple[Record | None, Sequence[Record], Sequence[Record]],
    ) -> Result[ProductView, GatewayError]:
        return build_view(product_id, *fetched)

    return C.retry(records, policy=retry_policy(settings)).then(ingest)


def build_view(
    product_id: str,
    raw_product: Record | None,
    raw_variants: Sequence[Record],
    raw_legacy: Sequence[Record],
) -> Result[ProductView, GatewayError]:
    """Ingest fetched records. Variants owned by another product are dropped."""
    if raw_product is None:
        return Error(GatewayError(GatewayErrorKind.NOT_FOUND, f"product {product_id} not found"))

    try:
        product = Product.from_record(raw_product)
        variants = [Variant.from_record(r) for r in raw_variants or ()]
        legacy = [LegacyColorEntry.from_record(r) for r in raw_legacy or ()]
    except ValueError as e:
        logger.warning("product %s has a malformed record: %s", product_id, e)
        return Error(GatewayError(GatewayErrorKind.MALFORMED, f"product {product_id}: {e}"))

    owned = [v for v in variants if v.product_id in ("", product.id, product_id)]
    if len(owned) != len(variants):
        logger.warning(
            "product %s: dropped %d variants owned by other products",
            product_id,
            len(variants) - len(owned),
        )

    index = VariantIndex(owned, legacy=legacy, product_sizes=product.sizes)
    return Ok(ProductView(product=product, index=index))


__all__ = (
    "load_product",
    "build_view",
    "upstream_error",
    "retry_policy",
)
