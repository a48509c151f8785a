"""Pure wishlist state transitions; inputs are never mutated."""
from __future__ import annotations

from typing import List, Sequence

from apps.catalog.dtos import ProductSnapshot

from .commands import AddItem, ClearWishlist, LoadWishlist, RemoveItem, WishlistCommand


def contains(items: Sequence[ProductSnapshot], product_id: str) -> bool:
    return any(item.id == product_id for item in items)


def add_item(items: Sequence[ProductSnapshot], product: ProductSnapshot) -> List[ProductSnapshot]:
    if contains(items, product.id):
        return list(items)
    return [*items, product]


def remove_item(items: Sequence[ProductSnapshot], product_id: str) -> List[ProductSnapshot]:
    return [item for item in items if item.id != product_id]


def reduce_wishlist(
    items: Sequence[ProductSnapshot], command: WishlistCommand
) -> List[ProductSnapshot]:
    if isinstance(command, AddItem):
        return add_item(items, command.product)
    if isinstance(command, RemoveItem):
        return remove_item(items, command.product_id)
    if isinstance(command, ClearWishlist):
        return []
    if isinstance(command, LoadWishlist):
        # Stored data from older clients may repeat a product; keep the first.
        loaded: List[ProductSnapshot] = []
        for product in command.items:
            loaded = add_item(loaded, product)
        return loaded
    return list(items)
