"""Tests for Settings defaults, builder and environment loading."""

from decimal import Decimal

import pytest

from storefront.config import DEFAULT_SETTINGS, Settings


def test_defaults():
    assert DEFAULT_SETTINGS.currency == "MZN"
    assert DEFAULT_SETTINGS.tax_rate == Decimal("0")
    assert (DEFAULT_SETTINGS.coupon_min_length, DEFAULT_SETTINGS.coupon_max_length) == (3, 20)
    assert DEFAULT_SETTINGS.unknown_stock_cap == 99


def test_builder_returns_new_settings():
    settings = Settings().with_currency("USD").with_tax_rate("0.16").with_cache_size(8)
    assert settings.currency == "USD"
    assert settings.tax_rate == Decimal("0.16")
    assert settings.cache_size == 8
    assert DEFAULT_SETTINGS.currency == "MZN"


def test_with_image_bases_keeps_unset_bases():
    settings = Settings().with_image_bases(product="https://cdn/p/")
    assert settings.product_image_base == "https://cdn/p/"
    assert settings.variant_image_base == DEFAULT_SETTINGS.variant_image_base


@pytest.mark.parametrize(
    "build",
    [
        lambda: Settings().with_tax_rate(-1),
        lambda: Settings().with_coupon_length(minimum=10, maximum=5),
        lambda: Settings().with_coupon_length(minimum=0, maximum=5),
        lambda: Settings().with_unknown_stock_cap(-1),
        lambda: Settings().with_fetch_retries(-1),
        lambda: Settings().with_cache_size(0),
    ],
)
def test_invalid_values_rejected(build):
    with pytest.raises(ValueError):
        build()


def test_from_env():
    settings = Settings.from_env({
        "STOREFRONT_CURRENCY": "USD",
        "STOREFRONT_TAX_RATE": "0.17",
        "STOREFRONT_UNKNOWN_STOCK_CAP": "10",
        "STOREFRONT_FETCH_RETRIES": " ",
        "UNRELATED": "x",
    })
    assert settings.currency == "USD"
    assert settings.tax_rate == Decimal("0.17")
    assert settings.unknown_stock_cap == 10
    assert settings.fetch_retries == DEFAULT_SETTINGS.fetch_retries


def test_from_env_names_bad_variable():
    with pytest.raises(ValueError, match="STOREFRONT_CACHE_SIZE"):
        Settings.from_env({"STOREFRONT_CACHE_SIZE": "lots"})


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("STOREFRONT_COUPON_MAX_LENGTH", "12")
    assert Settings.from_env().coupon_max_length == 12
