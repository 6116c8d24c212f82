"""
Stock types — purchase outcome errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PurchaseErrorKind(Enum):
    """Why a purchase attempt cannot go ahead."""

    INVALID_SELECTION = auto()  # Required colour/size not chosen
    OUT_OF_STOCK = auto()  # Resolved stock is 0
    INSUFFICIENT_STOCK = auto()  # 0 < stock < requested
    INVALID_QUANTITY = auto()  # Requested quantity below 1


@dataclass(frozen=True, slots=True)
class PurchaseError:
    """
    Purchase error.

    available is set for INSUFFICIENT_STOCK, missing for INVALID_SELECTION.
    """

    kind: PurchaseErrorKind
    message: str
    available: int = 0
    missing: tuple[str, ...] = ()

    @classmethod
    def invalid_selection(cls, missing: tuple[str, ...]) -> PurchaseError:
        return cls(
            PurchaseErrorKind.INVALID_SELECTION,
            f"select {' and '.join(missing)} first",
            missing=missing,
        )

    @classmethod
    def out_of_stock(cls) -> PurchaseError:
        return cls(PurchaseErrorKind.OUT_OF_STOCK, "out of stock")

    @classmethod
    def insufficient(cls, available: int) -> PurchaseError:
        return cls(
            PurchaseErrorKind.INSUFFICIENT_STOCK,
            f"only {available} in stock",
            available=available,
        )

    @classmethod
    def invalid_quantity(cls, requested: int) -> PurchaseError:
        return cls(PurchaseErrorKind.INVALID_QUANTITY, f"quantity must be >= 1, got {requested}")


__all__ = (
    "PurchaseErrorKind",
    "PurchaseError",
)
