"""
Catalog types — read-only snapshots of collaborator records.

Collaborators hand these over per invocation. Nothing in storefront mutates them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from storefront._types import Money, to_money, to_optional_money
from storefront.catalog._color import ColorKey, optional_color

# ═══════════════════════════════════════════════════════════════════════════════
# Record Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _record_id(record: Mapping[str, Any]) -> str:
    return str(record.get("_id") or record.get("id") or "")


def _owner_id(raw: object) -> str:
    """Product reference: either an id string or a populated product mapping."""
    if isinstance(raw, Mapping):
        return _record_id(raw)
    return "" if raw is None else str(raw)


def _optional_text(raw: object) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def _stock(raw: object) -> int:
    if raw is None or raw == "":
        return 0
    try:
        value = int(raw)  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise ValueError(f"stock: expected an integer, got {raw!r}") from e
    return max(0, value)


# ═══════════════════════════════════════════════════════════════════════════════
# Variant — Purchasable Colour × Size
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Variant:
    """
    Concrete colour × size combination with its own stock and overrides.

    stock is never negative; price and image override the product when set.
    """

    id: str
    product_id: str
    color: ColorKey | None = None
    size: str | None = None
    stock: int = 0
    price: Money | None = None
    image: str | None = None
    sku: str | None = None

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValueError(f"Variant {self.id}: stock must be >= 0")
        if self.price is not None and self.price < 0:
            raise ValueError(f"Variant {self.id}: price must be >= 0")

    @property
    def combination(self) -> tuple[ColorKey | None, str | None]:
        return (self.color, self.size)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Variant:
        """
        Build from a collaborator mapping.

        Example:
            Variant.from_record({
                "_id": "v1", "product": "p1", "color": "#FF0000",
                "size": "M", "stock": 3, "price": 19.9, "image": "v1.jpg",
            })
        """
        return cls(
            id=_record_id(record),
            product_id=_owner_id(record.get("product")),
            color=optional_color(record.get("color")),
            size=_optional_text(record.get("size")),
            stock=_stock(record.get("stock")),
            price=to_optional_money(record.get("price"), field="price"),
            image=_optional_text(record.get("image")),
            sku=_optional_text(record.get("sku")),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# LegacyColorEntry — Pre-variant Colour List
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LegacyColorEntry:
    """
    Colour (and optional size) from products that predate variants.

    Carries no stock: its combinations count as "available, unknown stock".
    """

    color: ColorKey | None = None
    size: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> LegacyColorEntry:
        return cls(
            color=optional_color(record.get("color")),
            size=_optional_text(record.get("size")),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Product — Base Pricing + Fallback Stock
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Product:
    """Product record fields the engine reads."""

    id: str
    price: Money
    name: str = ""
    price_discount: Money | None = None
    stock: int | None = None
    image_cover: str | None = None
    sizes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product {self.id}: price must be >= 0")
        if self.price_discount is not None and self.price_discount < 0:
            raise ValueError(f"Product {self.id}: priceDiscount must be >= 0")

    @property
    def base_price(self) -> Money:
        """priceDiscount when present and lower than price, else price."""
        if self.price_discount is not None and self.price_discount < self.price:
            return self.price_discount
        return self.price

    @property
    def has_discount(self) -> bool:
        return self.base_price < self.price

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Product:
        # "sizes" is deprecated upstream in favour of "availableSizes"
        raw_sizes = record.get("availableSizes") or record.get("sizes") or ()
        sizes = tuple(s for s in (_optional_text(x) for x in raw_sizes) if s is not None)
        stock = record.get("stock")
        return cls(
            id=_record_id(record),
            name=str(record.get("name") or ""),
            price=to_money(record.get("price"), field="price"),
            price_discount=to_optional_money(record.get("priceDiscount"), field="priceDiscount"),
            stock=None if stock is None else _stock(stock),
            image_cover=_optional_text(record.get("imageCover")),
            sizes=sizes,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Selection — In-progress Choice
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Selection:
    """
    User's current colour / size choice. Either, both or neither may be set.

    Immutable: every transition returns a new Selection.
    """

    color: ColorKey | None = None
    size: str | None = None

    @classmethod
    def of(cls, color: str | ColorKey | None = None, size: str | None = None) -> Selection:
        """Build from raw UI values, normalising the colour."""
        return cls(color=optional_color(color), size=_optional_text(size))

    @property
    def is_empty(self) -> bool:
        return self.color is None and self.size is None

    def with_color(self, color: ColorKey | None) -> Selection:
        return Selection(color=color, size=self.size)

    def with_size(self, size: str | None) -> Selection:
        return Selection(color=self.color, size=size)


EMPTY_SELECTION = Selection()


__all__ = (
    "Variant",
    "LegacyColorEntry",
    "Product",
    "Selection",
    "EMPTY_SELECTION",
)
