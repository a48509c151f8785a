from decimal import Decimal

from apps.catalog.dtos import ProductSnapshot
from apps.wishlist.commands import AddItem, ClearWishlist, LoadWishlist, RemoveItem
from apps.wishlist.reducers import add_item, contains, reduce_wishlist, remove_item

EARRING = ProductSnapshot(id="E1", price=Decimal("3200"))
NECKLACE = ProductSnapshot(id="N1", price=Decimal("56000"))


def test_add_is_idempotent_per_product():
    items = add_item([], EARRING)
    assert add_item(items, EARRING) == [EARRING]


def test_add_does_not_mutate_input():
    items = [EARRING]
    add_item(items, NECKLACE)
    assert items == [EARRING]


def test_remove_and_contains():
    items = [EARRING, NECKLACE]
    assert contains(items, "N1")
    assert remove_item(items, "N1") == [EARRING]
    assert remove_item(items, "missing") == items


def test_reduce_wishlist_dispatch():
    items = reduce_wishlist([], LoadWishlist(items=[EARRING, EARRING, NECKLACE]))
    assert items == [EARRING, NECKLACE]
    items = reduce_wishlist(items, RemoveItem(product_id="E1"))
    assert items == [NECKLACE]
    items = reduce_wishlist(items, AddItem(product=EARRING))
    assert items == [NECKLACE, EARRING]
    assert reduce_wishlist(items, ClearWishlist()) == []
