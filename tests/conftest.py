"""Pytest fixtures: sample products, variant indexes and fake collaborators."""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import pytest

from storefront.catalog import (
    LegacyColorEntry,
    Product,
    Variant,
    VariantIndex,
    normalize_color,
)
from storefront.selection import SelectionReconciler

RED = normalize_color("red")
BLUE = normalize_color("blue")
GREEN = normalize_color("green")


@pytest.fixture
def shirt() -> Product:
    return Product(
        id="shirt",
        name="Linen Shirt",
        price=Decimal("25.00"),
        price_discount=Decimal("20.00"),
        image_cover="shirt-cover.jpg",
    )


@pytest.fixture
def shirt_index() -> VariantIndex:
    """
    red/M  stock 2, price 10, image
    red/L  stock 0
    blue/M stock 0
    blue/L stock 4
    green/S stock 1
    """
    return VariantIndex([
        Variant("v1", "shirt", RED, "M", stock=2, price=Decimal("10"), image="red-m.jpg"),
        Variant("v2", "shirt", RED, "L", stock=0),
        Variant("v3", "shirt", BLUE, "M", stock=0),
        Variant("v4", "shirt", BLUE, "L", stock=4),
        Variant("v5", "shirt", GREEN, "S", stock=1),
    ])


@pytest.fixture
def reconciler(shirt_index: VariantIndex) -> SelectionReconciler:
    return SelectionReconciler(shirt_index)


@pytest.fixture
def mug() -> Product:
    """Simple product: no variants, stock on the record."""
    return Product(id="mug", name="Mug", price=Decimal("8.50"), stock=3)


@pytest.fixture
def legacy_index() -> VariantIndex:
    """Pre-variant product: colours only, one of them also a real variant."""
    return VariantIndex(
        [Variant("v9", "scarf", RED, None, stock=0)],
        legacy=[
            LegacyColorEntry(RED),
            LegacyColorEntry(BLUE),
            LegacyColorEntry(GREEN),
        ],
    )


@pytest.fixture
def mixed_index() -> VariantIndex:
    """
    red/M   stock 1
    red/L   stock 0 (red's legacy entry is shadowed)
    blue    legacy, any size
    green/M legacy
    """
    return VariantIndex(
        [
            Variant("h1", "hat", RED, "M", stock=1),
            Variant("h2", "hat", RED, "L", stock=0),
        ],
        legacy=[
            LegacyColorEntry(RED),
            LegacyColorEntry(BLUE),
            LegacyColorEntry(GREEN, "M"),
        ],
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Fake collaborators
# ═══════════════════════════════════════════════════════════════════════════════


class FakeCatalog:
    """In-memory CatalogSource. failures makes the next N product fetches raise."""

    def __init__(self) -> None:
        self.products: dict[str, dict[str, Any]] = {}
        self.variants: dict[str, list[dict[str, Any]]] = {}
        self.legacy: dict[str, list[dict[str, Any]]] = {}
        self.failures = 0
        self.product_calls = 0

    async def get_product(self, product_id: str) -> Mapping[str, Any] | None:
        self.product_calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise ConnectionError("catalog unavailable")
        return self.products.get(product_id)

    async def get_variants(self, product_id: str) -> Sequence[Mapping[str, Any]]:
        return self.variants.get(product_id, [])

    async def get_legacy_colors(self, product_id: str) -> Sequence[Mapping[str, Any]]:
        return self.legacy.get(product_id, [])


class FakeCoupons:
    def __init__(self, coupons: dict[str, dict[str, Any]] | None = None) -> None:
        self.coupons = coupons or {}
        self.requested: list[str] = []

    async def get_coupon(self, code: str) -> Mapping[str, Any] | None:
        self.requested.append(code)
        return self.coupons.get(code)


@pytest.fixture
def catalog() -> FakeCatalog:
    source = FakeCatalog()
    source.products["shirt"] = {
        "_id": "shirt",
        "name": "Linen Shirt",
        "price": 25,
        "priceDiscount": "20.00",
        "imageCover": "shirt-cover.jpg",
    }
    source.variants["shirt"] = [
        {"_id": "v1", "product": "shirt", "color": "Vermelho", "size": "M", "stock": 2, "price": 10},
        {"_id": "v4", "product": {"_id": "shirt"}, "color": "#00F", "size": "L", "stock": 4},
    ]
    source.products["scarf"] = {"_id": "scarf", "price": 12.5, "stock": 7}
    source.legacy["scarf"] = [{"color": "preto"}, {"color": "branco"}]
    return source


@pytest.fixture
def coupons() -> FakeCoupons:
    return FakeCoupons({
        "SAVE20": {
            "code": "SAVE20",
            "type": "percentage",
            "discount": 20,
            "isActive": True,
            "maxDiscountAmount": 15,
        },
        "BROKEN": {"code": "BROKEN", "type": "bogus", "discount": 1},
    })
