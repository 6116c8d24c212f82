"""Tests for unit price, display image and money presentation."""

from decimal import Decimal

import pytest

from storefront.catalog import Product, Selection, VariantIndex, normalize_color
from storefront.config import Settings
from storefront.pricing import (
    PLACEHOLDER,
    ProductCover,
    VariantImage,
    display_image,
    format_money,
    resolve_image_url,
    round_money,
    unit_price,
)

RED = normalize_color("red")
BLUE = normalize_color("blue")


class TestUnitPrice:
    def test_variant_price_wins(self, shirt, shirt_index):
        assert unit_price(Selection(RED, "M"), shirt_index, shirt) == Decimal("10")

    def test_variant_without_price_falls_back_to_discount_price(self, shirt, shirt_index):
        assert unit_price(Selection(BLUE, "L"), shirt_index, shirt) == Decimal("20.00")

    def test_incomplete_selection_uses_product_price(self, shirt, shirt_index):
        assert unit_price(Selection(RED, None), shirt_index, shirt) == Decimal("20.00")

    def test_without_discount_price(self, mug):
        assert unit_price(Selection(), VariantIndex.empty(), mug) == Decimal("8.50")


class TestDisplayImage:
    def test_variant_image(self, shirt, shirt_index):
        assert display_image(Selection(RED, "M"), shirt_index, shirt) == VariantImage("red-m.jpg")

    def test_product_cover(self, shirt, shirt_index):
        assert display_image(Selection(BLUE, "L"), shirt_index, shirt) == ProductCover("shirt-cover.jpg")

    def test_placeholder(self, mug):
        assert display_image(Selection(), VariantIndex.empty(), mug) is PLACEHOLDER

    def test_namespaces_are_distinct(self):
        assert VariantImage("a.jpg") != ProductCover("a.jpg")


class TestImageUrls:
    def test_each_namespace_has_its_own_base(self):
        assert resolve_image_url(VariantImage("a.jpg")) == "/img/variants/a.jpg"
        assert resolve_image_url(ProductCover("a.jpg")) == "/img/products/a.jpg"
        assert resolve_image_url(PLACEHOLDER) == "/img/placeholder.jpg"

    def test_absolute_urls_pass_through(self):
        url = "https://cdn.example.com/a.jpg"
        assert resolve_image_url(VariantImage(url)) == url

    def test_configured_bases(self):
        settings = Settings().with_image_bases(variant="https://cdn.example.com/v/")
        assert resolve_image_url(VariantImage("a.jpg"), settings) == "https://cdn.example.com/v/a.jpg"
        assert resolve_image_url(ProductCover("a.jpg"), settings) == "/img/products/a.jpg"


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal("1.005"), Decimal("1.01")),
        (Decimal("1.004"), Decimal("1.00")),
        (Decimal("10"), Decimal("10.00")),
    ],
)
def test_round_money(amount, expected):
    assert round_money(amount) == expected


def test_format_money():
    assert format_money(Decimal("1234.5")) == "1234.50 MZN"
    assert format_money(Decimal("3"), Settings().with_currency("USD")) == "3.00 USD"


def test_rounding_happens_after_multiplication():
    product = Product(id="p", price=Decimal("0.335"))
    line_total = product.base_price * 3
    assert round_money(line_total) == Decimal("1.01")
    assert round_money(product.base_price) * 3 == Decimal("1.02")
