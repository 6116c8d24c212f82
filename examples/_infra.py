"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


# Fake collaborators
@dataclass(slots=True)
class MemoryCatalog:
    """CatalogSource over seeded records, with a little latency."""

    products: dict[str, dict[str, Any]] = field(default_factory=lambda: {
        "tee": {
            "_id": "tee",
            "name": "Cotton Tee",
            "price": 750,
            "priceDiscount": 650,
            "imageCover": "tee.jpg",
        },
        "cap": {
            "_id": "cap",
            "name": "Canvas Cap",
            "price": 400,
            "stock": 12,
        },
        "mug": {
            "_id": "mug",
            "name": "Enamel Mug",
            "price": 250,
            "stock": 0,
        },
    })
    variants: dict[str, list[dict[str, Any]]] = field(default_factory=lambda: {
        "tee": [
            {"_id": "t1", "product": "tee", "color": "Preto", "size": "M", "stock": 3, "image": "tee-black.jpg"},
            {"_id": "t2", "product": "tee", "color": "Preto", "size": "L", "stock": 0},
            {"_id": "t3", "product": "tee", "color": "#FFF", "size": "L", "stock": 5, "price": 700},
            {"_id": "t4", "product": "tee", "color": "vermelho", "size": "S", "stock": 1},
        ],
    })
    legacy: dict[str, list[dict[str, Any]]] = field(default_factory=lambda: {
        "cap": [{"color": "azul"}, {"color": "bege"}],
    })
    calls: int = 0

    async def get_product(self, product_id: str) -> Mapping[str, Any] | None:
        await asyncio.sleep(0.01)
        self.calls += 1
        return self.products.get(product_id)

    async def get_variants(self, product_id: str) -> Sequence[Mapping[str, Any]]:
        await asyncio.sleep(0.01)
        return self.variants.get(product_id, [])

    async def get_legacy_colors(self, product_id: str) -> Sequence[Mapping[str, Any]]:
        await asyncio.sleep(0.01)
        return self.legacy.get(product_id, [])


@dataclass(slots=True)
class MemoryCoupons:
    coupons: dict[str, dict[str, Any]] = field(default_factory=lambda: {
        "BEMVINDO": {"code": "BEMVINDO", "type": "percentage", "discount": 15, "maxDiscountAmount": 200},
        "MENOS100": {"code": "MENOS100", "type": "fixed", "discount": 100, "minPurchaseAmount": 1000},
        "VELHO": {"code": "VELHO", "type": "fixed", "discount": 50, "expiresAt": "2020-01-01T00:00:00Z"},
    })

    async def get_coupon(self, code: str) -> Mapping[str, Any] | None:
        await asyncio.sleep(0.01)
        return self.coupons.get(code)


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
