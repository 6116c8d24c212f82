"""
Cart types — cart lines and the cart value.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront._types import Money, ZERO
from storefront.catalog import ColorKey
from storefront.pricing import ImageRef

# ═══════════════════════════════════════════════════════════════════════════════
# CartLine
# ═══════════════════════════════════════════════════════════════════════════════


def line_key(product_id: str, color: ColorKey | None, size: str | None) -> str:
    """Cart key for one product/colour/size combination."""
    return f"{product_id}-{color.value if color is not None else ''}-{size or ''}"


@dataclass(frozen=True, slots=True)
class CartLine:
    """
    One purchasable line, produced once a selection is complete and stock-checked.

    Ownership passes to the cart; the engine never reads it back.
    """

    product_id: str
    unit_price: Money
    image: ImageRef
    quantity: int
    name: str = ""
    color: ColorKey | None = None
    size: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("CartLine.quantity must be >= 1")

    @property
    def key(self) -> str:
        """Distinguishes variants of the same product inside a cart."""
        return line_key(self.product_id, self.color, self.size)

    @property
    def total(self) -> Money:
        return self.unit_price * self.quantity

    def with_quantity(self, quantity: int) -> CartLine:
        return CartLine(
            product_id=self.product_id,
            unit_price=self.unit_price,
            image=self.image,
            quantity=quantity,
            name=self.name,
            color=self.color,
            size=self.size,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Cart
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Cart:
    """
    Immutable cart. Every operation returns a new Cart.

    Example:
        cart = Cart().add(line).add(line)   # one line, quantity doubled
        cart = cart.update_quantity(line.key, 0)  # removed
    """

    lines: tuple[CartLine, ...] = ()

    def get(self, key: str) -> CartLine | None:
        for line in self.lines:
            if line.key == key:
                return line
        return None

    def quantity_of(self, key: str) -> int:
        line = self.get(key)
        return line.quantity if line is not None else 0

    def add(self, line: CartLine) -> Cart:
        """Add a line, merging quantities with an existing line of the same key."""
        existing = self.get(line.key)
        if existing is None:
            return Cart((*self.lines, line))
        merged = existing.with_quantity(existing.quantity + line.quantity)
        return Cart(tuple(merged if l.key == line.key else l for l in self.lines))

    def update_quantity(self, key: str, quantity: int) -> Cart:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            return self.remove(key)
        return Cart(tuple(l.with_quantity(quantity) if l.key == key else l for l in self.lines))

    def remove(self, key: str) -> Cart:
        return Cart(tuple(l for l in self.lines if l.key != key))

    def clear(self) -> Cart:
        return Cart()

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        return sum(l.quantity for l in self.lines)

    @property
    def subtotal(self) -> Money:
        return sum((l.total for l in self.lines), ZERO)

    def __len__(self) -> int:
        return len(self.lines)


__all__ = (
    "line_key",
    "CartLine",
    "Cart",
)
