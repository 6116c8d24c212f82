"""
PurchaseDraft — the state of one open "choose variant" dialog.
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Error, Ok, Result

from storefront.catalog import ColorKey, EMPTY_SELECTION, Selection
from storefront.selection._reconcile import SelectionReconciler
from storefront.stock import PurchaseError, clamp_quantity


@dataclass(frozen=True, slots=True)
class PurchaseDraft:
    """
    Selection + quantity held for the lifetime of one dialog.

    Replaced wholesale on every change, so a re-render never observes a
    half-applied update; reset() returns the initial draft in one step.
    """

    selection: Selection = EMPTY_SELECTION
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("PurchaseDraft.quantity must be >= 1")

    @classmethod
    def initial(cls) -> PurchaseDraft:
        return cls()

    def reset(self) -> PurchaseDraft:
        return PurchaseDraft.initial()

    def pick_color(self, reconciler: SelectionReconciler, color: ColorKey) -> PurchaseDraft:
        return PurchaseDraft(reconciler.pick_color(self.selection, color), self.quantity)

    def pick_size(self, reconciler: SelectionReconciler, size: str) -> PurchaseDraft:
        return PurchaseDraft(reconciler.pick_size(self.selection, size), self.quantity)

    def with_quantity(self, requested: int, stock: int) -> Result[PurchaseDraft, PurchaseError]:
        """Set quantity clamped to [1, stock]; fails when there is no stock."""
        match clamp_quantity(requested, stock):
            case Ok(quantity):
                return Ok(PurchaseDraft(self.selection, quantity))
            case Error(e):
                return Error(e)


__all__ = ("PurchaseDraft",)
