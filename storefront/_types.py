"""
Core types for storefront.

Re-exports from kungfu + money helpers shared by every subpackage.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════

type Money = Decimal
"""Currency amount. Never a float inside the engine."""

ZERO = Decimal("0")


def to_money(value: object, *, field: str = "amount") -> Money:
    """
    Coerce a collaborator number (int, float, str, Decimal) into Decimal.

    Floats go through str() so 19.9 stays 19.9 instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"{field}: expected a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)  # type: ignore[arg-type]
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"{field}: expected a number, got {value!r}") from e


def to_optional_money(value: object, *, field: str = "amount") -> Money | None:
    if value is None or value == "":
        return None
    return to_money(value, field=field)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Money
    "Money",
    "ZERO",
    "to_money",
    "to_optional_money",
)
