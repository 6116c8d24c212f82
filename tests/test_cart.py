"""Tests for the cart value and the shared confirm path."""

from decimal import Decimal

from storefront.cart import Cart, CartLine, add_to_cart, line_key, quote_line
from storefront.catalog import Selection, VariantIndex, normalize_color
from storefront.pricing import PLACEHOLDER, ProductCover, VariantImage
from storefront.selection import PurchaseDraft
from storefront.stock import PurchaseErrorKind
from storefront._types import Error, Ok

RED = normalize_color("red")
BLUE = normalize_color("blue")


def _line(color=RED, size="M", quantity=1, price="10"):
    return CartLine(
        product_id="shirt",
        unit_price=Decimal(price),
        image=PLACEHOLDER,
        quantity=quantity,
        color=color,
        size=size,
    )


class TestCart:
    def test_key(self):
        assert _line().key == "shirt-#ff0000-M"
        assert _line(color=None, size=None).key == "shirt--"
        assert line_key("shirt", RED, "M") == _line().key

    def test_add_merges_same_combination(self):
        cart = Cart().add(_line(quantity=1)).add(_line(quantity=2))
        assert len(cart) == 1
        assert cart.total_items == 3

    def test_add_keeps_distinct_combinations(self):
        cart = Cart().add(_line()).add(_line(color=BLUE, size="L", price="20"))
        assert len(cart) == 2
        assert cart.subtotal == Decimal("30")

    def test_update_quantity(self):
        cart = Cart().add(_line())
        assert cart.update_quantity(_line().key, 4).total_items == 4
        assert cart.update_quantity(_line().key, 0).is_empty
        assert cart.update_quantity(_line().key, -1).is_empty

    def test_remove_and_clear(self):
        cart = Cart().add(_line()).add(_line(color=BLUE))
        assert len(cart.remove(_line().key)) == 1
        assert cart.clear() == Cart()

    def test_cart_is_immutable(self):
        empty = Cart()
        empty.add(_line())
        assert empty.is_empty


class TestQuoteLine:
    def test_variant_line(self, shirt, shirt_index):
        draft = PurchaseDraft(Selection(RED, "M"), 2)
        line = quote_line(shirt, shirt_index, draft).unwrap()
        assert line.unit_price == Decimal("10")
        assert line.image == VariantImage("red-m.jpg")
        assert line.quantity == 2
        assert line.total == Decimal("20")
        assert line.name == "Linen Shirt"

    def test_falls_back_to_product_price_and_cover(self, shirt, shirt_index):
        line = quote_line(shirt, shirt_index, PurchaseDraft(Selection(BLUE, "L"))).unwrap()
        assert line.unit_price == Decimal("20.00")
        assert line.image == ProductCover("shirt-cover.jpg")

    def test_incomplete_selection(self, shirt, shirt_index):
        result = quote_line(shirt, shirt_index, PurchaseDraft(Selection(RED, None)))
        assert isinstance(result, Error)
        assert result.error.kind is PurchaseErrorKind.INVALID_SELECTION
        assert result.error.missing == ("size",)

    def test_counts_quantity_already_in_cart(self, shirt, shirt_index):
        draft = PurchaseDraft(Selection(RED, "M"))
        assert isinstance(quote_line(shirt, shirt_index, draft, in_cart=1), Ok)
        result = quote_line(shirt, shirt_index, draft, in_cart=2)
        assert isinstance(result, Error)
        assert result.error.kind is PurchaseErrorKind.INSUFFICIENT_STOCK

    def test_out_of_stock_combination(self, shirt, shirt_index):
        result = quote_line(shirt, shirt_index, PurchaseDraft(Selection(RED, "L")))
        assert result.error.kind is PurchaseErrorKind.OUT_OF_STOCK

    def test_simple_product(self, mug):
        line = quote_line(mug, VariantIndex.empty(), PurchaseDraft(quantity=3)).unwrap()
        assert line.unit_price == Decimal("8.50")
        assert line.image is PLACEHOLDER
        assert line.key == "mug--"


def test_add_to_cart_respects_stock_across_additions(shirt, shirt_index):
    draft = PurchaseDraft(Selection(RED, "M"))
    cart = add_to_cart(Cart(), shirt, shirt_index, draft).unwrap()
    cart = add_to_cart(cart, shirt, shirt_index, draft).unwrap()
    assert cart.total_items == 2

    result = add_to_cart(cart, shirt, shirt_index, draft)
    assert isinstance(result, Error)
    assert result.error.available == 2
