"""
lookup_coupon() — resolve a typed code into a Coupon snapshot.
"""

from __future__ import annotations

import logging

import combinators as C
from kungfu import Error, LazyCoroResult, Ok, Result

from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.discount import Coupon, CouponRejected, RejectReason, validate_code
from storefront.gateway._load import retry_policy, upstream_error
from storefront.gateway._types import CouponSource, GatewayError, GatewayErrorKind, Record

logger = logging.getLogger(__name__)


def lookup_coupon(
    source: CouponSource,
    code: str,
    settings: Settings = DEFAULT_SETTINGS,
) -> LazyCoroResult[Coupon, CouponRejected | GatewayError]:
    """
    Validate `code` locally, then fetch it.

    A syntactically invalid code never reaches the collaborator.
    An unknown code is a CouponRejected(NOT_FOUND), not a gateway failure.
    """
    match validate_code(code, settings):
        case Error(rejected):
            return C.from_result(Error(rejected))
        case Ok(normalized):
            pass

    fetch = C.retry(
        C.catching_async(
            lambda: source.get_coupon(normalized),
            on_error=upstream_error(f"coupon {normalized}"),
        ),
        policy=retry_policy(settings),
    )

    async def ingest(record: Record | None) -> Result[Coupon, CouponRejected | GatewayError]:
        if record is None:
            logger.debug("coupon %s not found", normalized)
            return Error(CouponRejected(RejectReason.NOT_FOUND, f"coupon {normalized} not found"))
        try:
            return Ok(Coupon.from_record(record))
        except ValueError as e:
            logger.warning("coupon %s has a malformed record: %s", normalized, e)
            return Error(GatewayError(GatewayErrorKind.MALFORMED, f"coupon {normalized}: {e}"))

    return fetch.then(ingest)


__all__ = ("lookup_coupon",)
