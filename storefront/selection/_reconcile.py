"""
SelectionReconciler — keeps a colour/size selection consistent with stock.

Transitions are toggles: picking the current value deselects it. Picking a
new value clears the other axis when the resulting pair has no stock, and
no axis is ever left pointing at a dead end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.catalog import ColorKey, Dimension, Selection, VariantIndex

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Rendering Options
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Choice[T]:
    """One swatch / size button: value, whether it can be picked, whether it is picked."""

    value: T
    available: bool
    selected: bool


@dataclass(frozen=True, slots=True)
class SelectionOptions:
    colors: tuple[Choice[ColorKey], ...]
    sizes: tuple[Choice[str], ...]


# ═══════════════════════════════════════════════════════════════════════════════
# SelectionReconciler
# ═══════════════════════════════════════════════════════════════════════════════


class SelectionReconciler:
    """
    State machine over Selection, bound to one product's VariantIndex.

    Stateless itself: every call takes the current Selection and returns the
    next one, so one reconciler can serve any number of open dialogs.

    Example:
        reconciler = SelectionReconciler(index)
        sel = reconciler.pick_color(Selection(), red)
        sel = reconciler.pick_size(sel, "M")
    """

    __slots__ = ("_index",)

    def __init__(self, index: VariantIndex) -> None:
        self._index = index

    @property
    def index(self) -> VariantIndex:
        return self._index

    def pick_color(self, selection: Selection, color: ColorKey) -> Selection:
        if selection.color == color:
            nxt = selection.with_color(None)
        else:
            nxt = selection.with_color(color)
            if nxt.size is not None and not self._index.is_available(color, nxt.size):
                nxt = nxt.with_size(None)
        nxt = self._settle(nxt)
        logger.debug("pick color %s: %s -> %s", color, selection, nxt)
        return nxt

    def pick_size(self, selection: Selection, size: str) -> Selection:
        if selection.size == size:
            nxt = selection.with_size(None)
        else:
            nxt = selection.with_size(size)
            if nxt.color is not None and not self._index.is_available(nxt.color, size):
                nxt = nxt.with_color(None)
        nxt = self._settle(nxt)
        logger.debug("pick size %s: %s -> %s", size, selection, nxt)
        return nxt

    def _settle(self, selection: Selection) -> Selection:
        """Clear any axis whose counterpart set is empty."""
        if not self._index.has_variants():
            return selection
        dims = self._index.dimensions()
        if Dimension.SIZE not in dims:
            if selection.color is not None and selection.color not in self._index.colors_with_stock():
                selection = selection.with_color(None)
            return selection
        if Dimension.COLOR not in dims:
            if selection.size is not None and selection.size not in self._index.sizes_with_stock():
                selection = selection.with_size(None)
            return selection

        if selection.size is not None and not self._index.colors_with_stock(selection.size):
            selection = selection.with_size(None)
        if selection.color is not None and not self._index.sizes_with_stock(selection.color):
            selection = selection.with_color(None)
        return selection

    # ───────────────────────────────────────────────────────────────────────────
    # Rendering
    # ───────────────────────────────────────────────────────────────────────────

    def available_colors(self, selection: Selection) -> frozenset[ColorKey]:
        if not self._index.has_variants():
            return frozenset()
        return self._index.colors_with_stock(selection.size)

    def available_sizes(self, selection: Selection) -> frozenset[str]:
        if not self._index.has_variants():
            return self._index.all_sizes()
        return self._index.sizes_with_stock(selection.color)

    def options(self, selection: Selection) -> SelectionOptions:
        """Every colour and size in catalogue order, flagged for rendering."""
        colors = self.available_colors(selection)
        sizes = self.available_sizes(selection)
        return SelectionOptions(
            colors=tuple(
                Choice(c, c in colors, c == selection.color) for c in self._index.colors()
            ),
            sizes=tuple(
                Choice(s, s in sizes, s == selection.size) for s in self._index.sizes()
            ),
        )


__all__ = (
    "Choice",
    "SelectionOptions",
    "SelectionReconciler",
)
