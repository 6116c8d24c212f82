"""
Gateway types — collaborator protocols, errors and the loaded product view.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol

from storefront.catalog import Product, VariantIndex
from storefront.selection import SelectionReconciler

type Record = Mapping[str, Any]

# ═══════════════════════════════════════════════════════════════════════════════
# Collaborator Protocols — Users Implement These
# ═══════════════════════════════════════════════════════════════════════════════


class CatalogSource(Protocol):
    """
    Product catalog collaborator.

    Implement this over whatever serves product records (HTTP API, database).

    Example:
        class HttpCatalog:
            def __init__(self, client: httpx.AsyncClient) -> None:
                self.client = client

            async def get_product(self, product_id: str) -> Record | None:
                resp = await self.client.get(f"/products/{product_id}")
                return None if resp.status_code == 404 else resp.json()["data"]

            async def get_variants(self, product_id: str) -> Sequence[Record]:
                resp = await self.client.get(f"/products/{product_id}/variations")
                return resp.json()["data"]

            async def get_legacy_colors(self, product_id: str) -> Sequence[Record]:
                return []
    """

    async def get_product(self, product_id: str) -> Record | None:
        """Product record, or None if there is no such product."""
        ...

    async def get_variants(self, product_id: str) -> Sequence[Record]:
        ...

    async def get_legacy_colors(self, product_id: str) -> Sequence[Record]:
        """Pre-variant colour list; empty for products created with variants."""
        ...


class CouponSource(Protocol):
    """Coupon collaborator. Stays authoritative over redemption."""

    async def get_coupon(self, code: str) -> Record | None:
        """Coupon record for a normalised code, or None if unknown."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class GatewayErrorKind(Enum):
    NOT_FOUND = auto()
    UPSTREAM = auto()  # Collaborator raised
    MALFORMED = auto()  # Record failed ingestion


@dataclass(frozen=True, slots=True)
class GatewayError:
    kind: GatewayErrorKind
    message: str

    @property
    def retryable(self) -> bool:
        return self.kind is GatewayErrorKind.UPSTREAM


# ═══════════════════════════════════════════════════════════════════════════════
# ProductView
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ProductView:
    """A product and its variant index, ready for a purchase dialog."""

    product: Product
    index: VariantIndex

    def reconciler(self) -> SelectionReconciler:
        return SelectionReconciler(self.index)


__all__ = (
    "Record",
    "CatalogSource",
    "CouponSource",
    "GatewayErrorKind",
    "GatewayError",
    "ProductView",
)
