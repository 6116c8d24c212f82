"""
Checkout — cart → coupon → order payload → invoice figures.

Key concepts:
- lookup_coupon() validates the code before any network call
- build_order() re-derives the discount; the order service stays authoritative
- money stays unrounded until to_dict() / format_money()

Level 3: storefront.gateway / order / discount
Level 2: kungfu.Result
"""

import json

from kungfu import Ok, Error

from storefront import cart as Ct
from storefront import gateway as G
from storefront import order as O
from storefront import pricing as P
from storefront.catalog import Selection
from storefront.config import Settings
from storefront.selection import PurchaseDraft
from examples._infra import banner, run, MemoryCatalog, MemoryCoupons


catalog = MemoryCatalog()
coupons = MemoryCoupons()
settings = Settings().with_tax_rate("0.16")


async def fill_cart() -> Ct.Cart:
    cart = Ct.Cart()
    picks = [
        ("tee", PurchaseDraft(Selection.of("#ffffff", "L"), 2)),
        ("cap", PurchaseDraft(Selection.of("azul"), 1)),
        ("mug", PurchaseDraft()),
    ]
    for product_id, draft in picks:
        match await G.load_product(catalog, product_id, settings):
            case Ok(view):
                match Ct.add_to_cart(cart, view.product, view.index, draft, settings):
                    case Ok(cart):
                        print(f"   + {view.product.name}")
                    case Error(e):
                        print(f"   ✗ {view.product.name}: {e.kind.name}")
            case Error(e):
                print(f"   ✗ {product_id}: {e.message}")
    return cart


async def main() -> None:
    banner("Checkout")

    print("\n1. Fill the cart:")
    cart = await fill_cart()
    print(f"   {cart.total_items} items, subtotal {P.format_money(cart.subtotal, settings)}")

    print("\n2. Try coupons:")
    coupon = None
    for typed in ("x!", "velho", "MENOS100", "bemvindo"):
        match await G.lookup_coupon(coupons, typed, settings):
            case Ok(found):
                match O.build_order(cart, found):
                    case Ok(_):
                        print(f"   {typed!r}: applies")
                        coupon = found
                    case Error(e):
                        print(f"   {typed!r}: {e.message}")
            case Error(G.GatewayError() as e):
                print(f"   {typed!r}: {e.kind.name}")
            case Error(e):
                print(f"   {typed!r}: {e.reason.name}")

    print("\n3. Order payload:")
    match O.build_order(cart, coupon, O.PaymentMethod.MPESA, "Deliver after 5pm"):
        case Ok(order):
            print(json.dumps(order.to_dict(), indent=2))
        case Error(e):
            print(f"   error: {e.message}")
            return

    print("\n4. Invoice figures:")
    invoice = O.build_invoice(order, {"tee": "Cotton Tee", "cap": "Canvas Cap"}, settings)
    for item in invoice.items:
        print(f"   {item.quantity}x {item.name:12} {P.format_money(item.total, settings)}")
    print(f"   subtotal {P.format_money(invoice.subtotal, settings)}")
    print(f"   tax      {P.format_money(invoice.tax, settings)}")
    print(f"   discount {P.format_money(invoice.discount, settings)}")
    print(f"   total    {P.format_money(invoice.total, settings)}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
