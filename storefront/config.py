"""
Settings — storefront configuration.

    from storefront.config import Settings

    settings = (
        Settings()
        .with_currency("MZN")
        .with_tax_rate("0.17")
        .with_unknown_stock_cap(20)
    )

    settings = Settings.from_env()  # STOREFRONT_* overrides

Note: Immutable — each with_* method returns a new Settings.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation

ENV_PREFIX = "STOREFRONT_"


# ═══════════════════════════════════════════════════════════════════════════════
# Settings — Full Configuration
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Storefront configuration.

    Fluent builder pattern — chain methods to configure.

    Example:
        settings = Settings().with_coupon_length(minimum=4, maximum=16)
    """

    currency: str = "MZN"
    tax_rate: Decimal = Decimal("0")
    coupon_min_length: int = 3
    coupon_max_length: int = 20
    # Quantity ceiling for combinations that exist only in the legacy colour
    # list (no stock field) when the product record has no stock either.
    unknown_stock_cap: int = 99
    variant_image_base: str = "/img/variants/"
    product_image_base: str = "/img/products/"
    placeholder_image: str = "/img/placeholder.jpg"
    fetch_retries: int = 2
    cache_size: int = 256

    def __post_init__(self) -> None:
        if self.tax_rate < 0:
            raise ValueError("tax_rate must be >= 0")
        if not 1 <= self.coupon_min_length <= self.coupon_max_length:
            raise ValueError("coupon length bounds must satisfy 1 <= min <= max")
        if self.unknown_stock_cap < 0:
            raise ValueError("unknown_stock_cap must be >= 0")
        if self.fetch_retries < 0:
            raise ValueError("fetch_retries must be >= 0")
        if self.cache_size < 1:
            raise ValueError("cache_size must be >= 1")

    def with_currency(self, currency: str) -> Settings:
        return replace(self, currency=currency)

    def with_tax_rate(self, rate: Decimal | str | int) -> Settings:
        """
        Set tax rate as a fraction.

        Example:
            .with_tax_rate("0.17")  # 17%
        """
        return replace(self, tax_rate=Decimal(rate))

    def with_coupon_length(self, *, minimum: int, maximum: int) -> Settings:
        return replace(self, coupon_min_length=minimum, coupon_max_length=maximum)

    def with_unknown_stock_cap(self, cap: int) -> Settings:
        return replace(self, unknown_stock_cap=cap)

    def with_image_bases(
        self,
        *,
        variant: str | None = None,
        product: str | None = None,
        placeholder: str | None = None,
    ) -> Settings:
        return replace(
            self,
            variant_image_base=variant if variant is not None else self.variant_image_base,
            product_image_base=product if product is not None else self.product_image_base,
            placeholder_image=placeholder if placeholder is not None else self.placeholder_image,
        )

    def with_fetch_retries(self, retries: int) -> Settings:
        return replace(self, fetch_retries=retries)

    def with_cache_size(self, size: int) -> Settings:
        return replace(self, cache_size=size)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Load settings from STOREFRONT_* environment variables over the defaults."""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        for name, parse in _ENV_FIELDS.items():
            var = ENV_PREFIX + name.upper()
            raw = env.get(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[name] = parse(raw.strip())
            except (ValueError, InvalidOperation) as e:
                raise ValueError(f"{var}: invalid value {raw!r}") from e

        return cls(**overrides)  # type: ignore[arg-type]


_ENV_FIELDS: dict[str, Callable[[str], object]] = {
    "currency": str,
    "tax_rate": Decimal,
    "coupon_min_length": int,
    "coupon_max_length": int,
    "unknown_stock_cap": int,
    "variant_image_base": str,
    "product_image_base": str,
    "placeholder_image": str,
    "fetch_retries": int,
    "cache_size": int,
}

DEFAULT_SETTINGS = Settings()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "ENV_PREFIX",
    "Settings",
    "DEFAULT_SETTINGS",
)
