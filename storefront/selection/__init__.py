"""
Selection — colour/size reconciliation and per-dialog purchase state.

    from storefront import selection as Sel

    reconciler = Sel.SelectionReconciler(index)
    draft = Sel.PurchaseDraft.initial().pick_color(reconciler, red)
    draft = draft.pick_size(reconciler, "M")
    ...
    draft = draft.reset()  # dialog closed
"""

from __future__ import annotations

from storefront.selection._reconcile import Choice, SelectionOptions, SelectionReconciler
from storefront.selection._draft import PurchaseDraft

__all__ = (
    "Choice",
    "SelectionOptions",
    "SelectionReconciler",
    "PurchaseDraft",
)
