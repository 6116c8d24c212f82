"""
Product cache — loaded ProductViews in front of the catalog.

Key concepts:
- Tier = storage backend (global, inject via DI)
- product_cache() = fluent builder; with no tiers it uses one LocalTier
- Tiers STACK: .tier(L1).tier(L2) = check L1 → L2 → load_product()

Level 4: storefront.gateway
Level 3: combinators (gather3, retry)
Level 2: kungfu.Result
"""

from kungfu import Ok, Error

from storefront import gateway as G
from storefront.config import Settings
from examples._infra import banner, run, MemoryCatalog


catalog = MemoryCatalog()


# ═══════════════════════════════════════════════════════════════════════════════
# Custom tier with distinct name (simulates Redis)
# ═══════════════════════════════════════════════════════════════════════════════


class NamedTier:
    """Wrapper to give a tier a distinct name."""

    def __init__(self, inner: G.Tier, tier_name: str) -> None:
        self._inner = inner
        self._name = tier_name

    @property
    def name(self) -> str:
        return self._name

    async def get(self, key: str) -> G.ProductView | None:
        return await self._inner.get(key)

    async def set(self, key: str, value: G.ProductView) -> None:
        await self._inner.set(key, value)

    async def delete(self, key: str) -> bool:
        return await self._inner.delete(key)

    async def delete_pattern(self, pattern: str) -> int:
        return await self._inner.delete_pattern(pattern)


l1_tier = NamedTier(G.LocalTier(max_size=2), "L1-memory")
l2_tier = NamedTier(G.LocalTier(max_size=1000), "L2-redis")

products = (
    G.product_cache(catalog, Settings().with_fetch_retries(1))
    .tier(l1_tier)
    .tier(l2_tier)
    .build()
)


async def show(product_id: str) -> None:
    match await products.get(product_id):
        case Ok(lookup):
            print(
                f"   {product_id}: tier={lookup.tier} hit={lookup.hit} "
                f"variants={len(lookup.value.index)} (catalog calls: {catalog.calls})"
            )
        case Error(e):
            print(f"   {product_id}: {e.kind.name} {e.message}")


async def main() -> None:
    banner("Product cache: Tier Stacking (L1/L2 Pattern)")

    print("\n1. First request (miss L1 → miss L2 → load from catalog):")
    await show("tee")

    print("\n2. Second request (hit L1):")
    await show("tee")

    print("\n3. Two more products push tee out of L1 (hit L2):")
    await show("cap")
    await show("mug")
    await show("tee")

    print("\n4. Stock changed: invalidate tee everywhere, reload:")
    await products.invalidate("tee")
    await show("tee")

    print("\n5. Unknown product (not cached):")
    await show("hat")

    print(f"\n6. Catalog reload: {await products.invalidate_pattern('*')} entries dropped")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
