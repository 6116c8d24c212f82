"""
Purchase dialog — one "choose variant" dialog from open to add-to-cart.

Key concepts:
- ProductView = product + VariantIndex, loaded once per dialog
- PurchaseDraft = the dialog's whole state, replaced on every pick
- quote_line() = the single confirm path (quick-add and detail page)

Level 3: storefront.selection / stock / pricing / cart
Level 2: kungfu.Result
"""

from kungfu import Ok, Error

from storefront import cart as Ct
from storefront import gateway as G
from storefront import pricing as P
from storefront import stock as S
from storefront.catalog import normalize_color
from storefront.selection import PurchaseDraft, SelectionOptions
from examples._infra import banner, run, MemoryCatalog


catalog = MemoryCatalog()


def show(options: SelectionOptions) -> None:
    colors = " ".join(
        f"[{c.value}]" if c.selected else (str(c.value) if c.available else f"({c.value})")
        for c in options.colors
    )
    sizes = " ".join(
        f"[{s.value}]" if s.selected else (s.value if s.available else f"({s.value})")
        for s in options.sizes
    )
    print(f"   colours: {colors}")
    print(f"   sizes:   {sizes}")


async def main() -> None:
    banner("Purchase dialog: Cotton Tee")

    match await G.load_product(catalog, "tee"):
        case Ok(view):
            pass
        case Error(e):
            print(f"   error: {e.message}")
            return

    reconciler = view.reconciler()
    draft = PurchaseDraft.initial()
    black, white = normalize_color("preto"), normalize_color("branco")

    print("\n1. Dialog opens (parentheses = not available):")
    show(reconciler.options(draft.selection))

    print("\n2. Pick black:")
    draft = draft.pick_color(reconciler, black)
    show(reconciler.options(draft.selection))

    print("\n3. Pick L (black has none left in L, so black is cleared):")
    draft = draft.pick_size(reconciler, "L")
    show(reconciler.options(draft.selection))

    print("\n4. Confirm too early:")
    match Ct.quote_line(view.product, view.index, draft):
        case Error(e):
            print(f"   {e.kind.name}: {e.message}")
        case Ok(_):
            pass

    print("\n5. Pick white, ask for 9:")
    draft = draft.pick_color(reconciler, white)
    available = S.resolve_stock(draft.selection, view.index, view.product.stock)
    match draft.with_quantity(9, available):
        case Ok(clamped):
            print(f"   quantity clamped to {clamped.quantity} (stock {available})")
            draft = clamped
        case Error(e):
            print(f"   {e.kind.name}: {e.message}")

    print("\n6. Add to cart:")
    match Ct.add_to_cart(Ct.Cart(), view.product, view.index, draft):
        case Ok(cart):
            for line in cart.lines:
                print(
                    f"   {line.quantity}x {line.name} {line.color}/{line.size} "
                    f"@ {P.format_money(line.unit_price)} → {P.resolve_image_url(line.image)}"
                )
        case Error(e):
            print(f"   {e.kind.name}: {e.message}")

    print("\n7. Dialog closes:")
    draft = draft.reset()
    print(f"   {draft}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
