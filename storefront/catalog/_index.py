"""
VariantIndex — queryable lookups over a product's variants.

    index = VariantIndex(variants, legacy=legacy_colors, product_sizes=product.sizes)

    index.colors_with_stock("M")      # colours still buyable in size M
    index.sizes_with_stock(red)       # sizes still buyable in red
    index.lookup(selection)           # Variant for a complete selection, or None

Both input shapes (Variant list, legacy colour list) end up in one structure.
Variant data has real stock and wins over legacy data for the same colour.
A legacy entry without a size covers every known size.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from storefront.catalog._color import ColorKey
from storefront.catalog._types import LegacyColorEntry, Selection, Variant

logger = logging.getLogger(__name__)

type Combination = tuple[ColorKey | None, str | None]


class Dimension(Enum):
    """Selectable axes of a product."""

    COLOR = "color"
    SIZE = "size"


def _ordered[T](values: Iterable[T | None]) -> tuple[T, ...]:
    """Distinct non-None values in first-seen order."""
    seen: dict[T, None] = {}
    for value in values:
        if value is not None:
            seen.setdefault(value, None)
    return tuple(seen)


# ═══════════════════════════════════════════════════════════════════════════════
# VariantIndex
# ═══════════════════════════════════════════════════════════════════════════════


class VariantIndex:
    """
    Hash-based lookups over one product's purchasable combinations.

    Build once per product snapshot; every query is O(1) average for exact
    lookups and O(number of variants) for the filtered availability sets.
    """

    __slots__ = (
        "_variants",
        "_legacy",
        "_by_combination",
        "_colors",
        "_sizes",
        "_variant_colors",
        "_product_sizes",
    )

    def __init__(
        self,
        variants: Iterable[Variant] = (),
        *,
        legacy: Iterable[LegacyColorEntry] = (),
        product_sizes: Iterable[str] = (),
    ) -> None:
        self._variants = tuple(variants)
        self._legacy = tuple(legacy)
        self._product_sizes = _ordered(product_sizes)

        by_combination: dict[Combination, Variant] = {}
        for variant in self._variants:
            existing = by_combination.get(variant.combination)
            if existing is not None:
                logger.warning(
                    "duplicate variant combination %s/%s: keeping %s, ignoring %s",
                    variant.color, variant.size, existing.id, variant.id,
                )
                continue
            by_combination[variant.combination] = variant
        self._by_combination = by_combination

        self._variant_colors = frozenset(
            v.color for v in by_combination.values() if v.color is not None
        )

        self._colors = _ordered(
            [v.color for v in self._variants] + [e.color for e in self._legacy]
        )
        self._sizes = _ordered(
            [v.size for v in self._variants] + [e.size for e in self._legacy]
        )

    @classmethod
    def empty(cls) -> VariantIndex:
        return cls()

    # ───────────────────────────────────────────────────────────────────────────
    # Shape
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def variants(self) -> tuple[Variant, ...]:
        return self._variants

    def has_variants(self) -> bool:
        """True iff any variant or legacy entry carries a colour or a size."""
        return bool(self._colors or self._sizes)

    def colors(self) -> tuple[ColorKey, ...]:
        """Every known colour, in catalogue order (for rendering swatches)."""
        return self._colors

    def sizes(self) -> tuple[str, ...]:
        """Every size in catalogue order; product sizes only for simple products."""
        if self._sizes or self.has_variants():
            return self._sizes
        return self._product_sizes

    def all_sizes(self) -> frozenset[str]:
        return frozenset(self.sizes())

    def dimensions(self) -> frozenset[Dimension]:
        """Axes that have at least one possible value."""
        dims: set[Dimension] = set()
        if self._colors:
            dims.add(Dimension.COLOR)
        if self.sizes():
            dims.add(Dimension.SIZE)
        return frozenset(dims)

    def missing_dimensions(self, selection: Selection) -> tuple[Dimension, ...]:
        """Required axes the selection leaves unset (colour first)."""
        dims = self.dimensions()
        missing: list[Dimension] = []
        if Dimension.COLOR in dims and selection.color is None:
            missing.append(Dimension.COLOR)
        if Dimension.SIZE in dims and selection.size is None:
            missing.append(Dimension.SIZE)
        return tuple(missing)

    def is_complete(self, selection: Selection) -> bool:
        return not self.missing_dimensions(selection)

    # ───────────────────────────────────────────────────────────────────────────
    # Availability
    # ───────────────────────────────────────────────────────────────────────────

    def colors_with_stock(self, size: str | None = None) -> frozenset[ColorKey]:
        """
        Colours with a stocked variant in `size` (any size when omitted).

        Colours known only from the legacy list are included regardless of
        stock, as long as the entry is compatible with the size filter.
        """
        found: set[ColorKey] = {
            v.color
            for v in self._by_combination.values()
            if v.color is not None and v.stock > 0 and (size is None or v.size == size)
        }
        for entry in self._claimable_legacy():
            if size is None or entry.size is None or entry.size == size:
                found.add(entry.color)
        return frozenset(found)

    def sizes_with_stock(self, color: ColorKey | None = None) -> frozenset[str]:
        """
        Sizes with a stocked variant in `color` (any colour when omitted).

        Legacy colours contribute their own size, or every known size when
        the entry has none.
        """
        found: set[str] = {
            v.size
            for v in self._by_combination.values()
            if v.size is not None and v.stock > 0 and (color is None or v.color == color)
        }
        for entry in self._claimable_legacy():
            if color is not None and entry.color != color:
                continue
            if entry.size is None:
                found.update(self._sizes)
            else:
                found.add(entry.size)
        return frozenset(found)

    def _claimable_legacy(self) -> Iterable[LegacyColorEntry]:
        """Legacy entries whose colour no variant claims."""
        return (
            e for e in self._legacy
            if e.color is not None and e.color not in self._variant_colors
        )

    def is_available(self, color: ColorKey, size: str | None) -> bool:
        """Whether the (color, size) pair can still be bought."""
        variant = self._by_combination.get((color, size))
        if variant is not None:
            return variant.stock > 0
        return self.legacy_entry(color, size) is not None

    # ───────────────────────────────────────────────────────────────────────────
    # Exact Lookup
    # ───────────────────────────────────────────────────────────────────────────

    def _key(self, selection: Selection) -> Combination:
        dims = self.dimensions()
        return (
            selection.color if Dimension.COLOR in dims else None,
            selection.size if Dimension.SIZE in dims else None,
        )

    def lookup(self, selection: Selection) -> Variant | None:
        """Variant matching a complete selection exactly. None when incomplete."""
        if not self.is_complete(selection):
            return None
        return self._by_combination.get(self._key(selection))

    def legacy_entry(self, color: ColorKey | None, size: str | None) -> LegacyColorEntry | None:
        """
        Legacy entry covering (color, size) that no variant claims.

        A legacy entry without a size covers every size.
        """
        if color is not None and color in self._variant_colors:
            return None
        for entry in self._legacy:
            if entry.color != color:
                continue
            if entry.size is None or entry.size == size:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._variants)

    def __repr__(self) -> str:
        return (
            f"VariantIndex(variants={len(self._variants)}, legacy={len(self._legacy)}, "
            f"colors={len(self._colors)}, sizes={len(self.sizes())})"
        )


__all__ = (
    "Dimension",
    "VariantIndex",
)
