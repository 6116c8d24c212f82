"""
ProductCache — loaded ProductViews kept in front of load_product().

    cache = (
        product_cache(source, settings)
        .tier(LocalTier(max_size=512))
        .build()
    )

    match await cache.get("p1"):
        case Ok(lookup):
            view, hit = lookup.value, lookup.hit

    await cache.invalidate("p1")          # stock changed
    await cache.invalidate_pattern("*")   # catalog reload
"""

from __future__ import annotations

import fnmatch
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Protocol

from kungfu import Error, LazyCoroResult, Ok, Result

from storefront.config import DEFAULT_SETTINGS, Settings
from storefront.gateway._load import load_product
from storefront.gateway._types import CatalogSource, GatewayError, ProductView

logger = logging.getLogger(__name__)

KEY_PREFIX = "product:"

# ═══════════════════════════════════════════════════════════════════════════════
# Tier Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class Tier(Protocol):
    """
    Storage tier for product views.

    Implement this for a shared backend (Redis, memcached) when several
    storefront processes should share loaded products.
    """

    @property
    def name(self) -> str: ...

    async def get(self, key: str) -> ProductView | None: ...

    async def set(self, key: str, value: ProductView) -> None: ...

    async def delete(self, key: str) -> bool: ...

    async def delete_pattern(self, pattern: str) -> int: ...


# ═══════════════════════════════════════════════════════════════════════════════
# LocalTier — In-Memory LRU
# ═══════════════════════════════════════════════════════════════════════════════


class LocalTier:
    """In-process LRU tier. The least recently read view is evicted first."""

    def __init__(self, max_size: int = DEFAULT_SETTINGS.cache_size) -> None:
        if max_size < 1:
            raise ValueError("LocalTier.max_size must be >= 1")
        self._max_size = max_size
        self._views: OrderedDict[str, ProductView] = OrderedDict()

    @property
    def name(self) -> str:
        return "local"

    async def get(self, key: str) -> ProductView | None:
        view = self._views.get(key)
        if view is not None:
            self._views.move_to_end(key)
        return view

    async def set(self, key: str, value: ProductView) -> None:
        if key in self._views:
            self._views.move_to_end(key)
        elif len(self._views) >= self._max_size:
            evicted, _ = self._views.popitem(last=False)
            logger.debug("evicted %s from %s tier", evicted, self.name)
        self._views[key] = value

    async def delete(self, key: str) -> bool:
        return self._views.pop(key, None) is not None

    async def delete_pattern(self, pattern: str) -> int:
        matched = [k for k in self._views if fnmatch.fnmatch(k, pattern)]
        for key in matched:
            del self._views[key]
        return len(matched)

    def __len__(self) -> int:
        return len(self._views)


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CacheLookup:
    """A cached or freshly loaded view; tier names where a hit came from."""

    value: ProductView
    hit: bool
    tier: str | None = None


@dataclass(frozen=True, slots=True)
class ProductCacheBuilder:
    """Fluent builder. Without explicit tiers, build() uses one LocalTier."""

    _source: CatalogSource
    _settings: Settings
    _tiers: tuple[Tier, ...] = ()

    def tier(self, t: Tier) -> ProductCacheBuilder:
        """Add a tier. Tiers are read in the order they were added."""
        return ProductCacheBuilder(self._source, self._settings, (*self._tiers, t))

    def build(self) -> ProductCache:
        tiers = self._tiers or (LocalTier(max_size=self._settings.cache_size),)
        return ProductCache(source=self._source, settings=self._settings, tiers=tiers)


def product_cache(
    source: CatalogSource,
    settings: Settings = DEFAULT_SETTINGS,
) -> ProductCacheBuilder:
    return ProductCacheBuilder(source, settings)


# ═══════════════════════════════════════════════════════════════════════════════
# ProductCache
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ProductCache:
    source: CatalogSource
    settings: Settings
    tiers: tuple[Tier, ...]

    def get(self, product_id: str) -> LazyCoroResult[CacheLookup, GatewayError]:
        """
        Read tiers in order, then fall back to load_product().

        A successful load populates every tier. Failed loads are not cached.
        """
        key = KEY_PREFIX + product_id

        async def execute() -> Result[CacheLookup, GatewayError]:
            for t in self.tiers:
                try:
                    view = await t.get(key)
                except Exception:
                    logger.warning("%s tier failed reading %s", t.name, key, exc_info=True)
                    continue
                if view is not None:
                    logger.debug("cache hit %s (%s)", key, t.name)
                    return Ok(CacheLookup(value=view, hit=True, tier=t.name))

            logger.debug("cache miss %s", key)
            match await load_product(self.source, product_id, self.settings):
                case Ok(view):
                    for t in self.tiers:
                        try:
                            await t.set(key, view)
                        except Exception:
                            logger.warning("%s tier failed writing %s", t.name, key, exc_info=True)
                    return Ok(CacheLookup(value=view, hit=False))
                case Error(e):
                    return Error(e)

        return LazyCoroResult(execute)

    async def invalidate(self, product_id: str) -> bool:
        """Drop one product from every tier. True if any tier held it."""
        key = KEY_PREFIX + product_id
        deleted = False
        for t in self.tiers:
            if await t.delete(key):
                deleted = True
        return deleted

    async def invalidate_pattern(self, pattern: str) -> int:
        """
        Drop products whose id matches a glob pattern.

        Example:
            await cache.invalidate_pattern("shoe-*")
        """
        total = 0
        for t in self.tiers:
            total += await t.delete_pattern(KEY_PREFIX + pattern)
        return total


__all__ = (
    "Tier",
    "LocalTier",
    "CacheLookup",
    "ProductCacheBuilder",
    "ProductCache",
    "product_cache",
)
