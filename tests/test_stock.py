"""Tests for stock resolution and purchase validation."""

import pytest

from storefront.catalog import LegacyColorEntry, Selection, Variant, VariantIndex, normalize_color
from storefront.config import Settings
from storefront.stock import (
    PurchaseErrorKind,
    clamp_quantity,
    resolve_stock,
    validate_purchase,
)
from storefront._types import Error, Ok

RED = normalize_color("red")
BLUE = normalize_color("blue")
GREEN = normalize_color("green")


class TestResolveStock:
    def test_matching_variant(self, shirt_index):
        assert resolve_stock(Selection(RED, "M"), shirt_index) == 2
        assert resolve_stock(Selection(BLUE, "L"), shirt_index) == 4

    def test_incomplete_selection_is_zero(self, shirt_index):
        assert resolve_stock(Selection(RED, None), shirt_index, fallback_stock=50) == 0

    def test_unknown_combination_is_zero(self, shirt_index):
        assert resolve_stock(Selection(GREEN, "L"), shirt_index) == 0

    def test_simple_product_uses_fallback(self):
        index = VariantIndex.empty()
        assert resolve_stock(Selection(), index, fallback_stock=3) == 3
        assert resolve_stock(Selection(), index) == 0
        assert resolve_stock(Selection(), index, fallback_stock=-2) == 0

    def test_legacy_combination_uses_product_stock(self, legacy_index):
        assert resolve_stock(Selection(BLUE, None), legacy_index, fallback_stock=7) == 7

    def test_legacy_combination_without_product_stock_uses_cap(self, legacy_index):
        settings = Settings().with_unknown_stock_cap(12)
        assert resolve_stock(Selection(BLUE, None), legacy_index, None, settings) == 12

    def test_variant_wins_over_legacy_entry(self, legacy_index):
        assert resolve_stock(Selection(RED, None), legacy_index, fallback_stock=7) == 0


@pytest.mark.parametrize(
    "selection",
    [
        Selection(),
        Selection(RED, None),
        Selection(None, "M"),
        Selection(RED, "M"),
        Selection(RED, "L"),
        Selection(GREEN, "S"),
        Selection(GREEN, "XL"),
        Selection(normalize_color("pink"), "M"),
    ],
)
@pytest.mark.parametrize("fallback", [None, -1, 0, 5])
def test_resolved_stock_never_negative_and_zero_blocks_purchase(shirt_index, selection, fallback):
    stock = resolve_stock(selection, shirt_index, fallback)
    assert stock >= 0
    if stock == 0:
        assert isinstance(validate_purchase(selection, 1, shirt_index, fallback), Error)


class TestClampQuantity:
    @pytest.mark.parametrize("stock", [1, 2, 5])
    @pytest.mark.parametrize("requested", [-3, 0, 1, 2, 4, 5, 99])
    def test_result_within_bounds(self, requested, stock):
        match clamp_quantity(requested, stock):
            case Ok(quantity):
                assert 1 <= quantity <= stock
                if 1 <= requested <= stock:
                    assert quantity == requested
            case Error(e):
                pytest.fail(f"unexpected {e}")

    @pytest.mark.parametrize("stock", [0, -1])
    def test_no_stock_is_rejected(self, stock):
        result = clamp_quantity(1, stock)
        assert isinstance(result, Error)
        assert result.error.kind is PurchaseErrorKind.OUT_OF_STOCK


class TestValidatePurchase:
    def test_insufficient_stock(self):
        index = VariantIndex([Variant("v", "p", RED, "M", stock=2, price=10)])
        result = validate_purchase(Selection(RED, "M"), 5, index)
        assert isinstance(result, Error)
        assert result.error.kind is PurchaseErrorKind.INSUFFICIENT_STOCK
        assert result.error.available == 2

    def test_simple_product_without_stock(self):
        index = VariantIndex.empty()
        assert resolve_stock(Selection(RED, "M"), index, fallback_stock=0) == 0
        result = validate_purchase(Selection(RED, "M"), 1, index, fallback_stock=0)
        assert isinstance(result, Error)
        assert result.error.kind is PurchaseErrorKind.OUT_OF_STOCK

    def test_ok_returns_resolved_stock(self, shirt_index):
        assert validate_purchase(Selection(BLUE, "L"), 4, shirt_index) == Ok(4)

    def test_quantity_below_one(self, shirt_index):
        result = validate_purchase(Selection(BLUE, "L"), 0, shirt_index)
        assert isinstance(result, Error)
        assert result.error.kind is PurchaseErrorKind.INVALID_QUANTITY

    def test_legacy_combination_is_purchasable(self):
        index = VariantIndex(legacy=[LegacyColorEntry(BLUE, "M")])
        assert validate_purchase(Selection(BLUE, "M"), 3, index) == Ok(99)
