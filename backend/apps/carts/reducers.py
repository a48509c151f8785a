"""Pure cart state transitions.

Each function takes the current item list and returns a new list; inputs are
never mutated. ``reduce_cart`` dispatches a command to its transition.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, List, Sequence, Type

from apps.catalog.dtos import ProductSnapshot

from .commands import (
    AddItem,
    CartCommand,
    ClearCart,
    LoadCart,
    RemoveItem,
    UpdateQuantity,
)
from .dtos import CartItemDTO


def add_item(
    items: Sequence[CartItemDTO], product: ProductSnapshot, quantity: int = 1
) -> List[CartItemDTO]:
    for index, item in enumerate(items):
        if item.product.id == product.id:
            updated = list(items)
            updated[index] = replace(item, quantity=item.quantity + quantity)
            return updated
    return [*items, CartItemDTO(product=product, quantity=quantity)]


def remove_item(items: Sequence[CartItemDTO], product_id: str) -> List[CartItemDTO]:
    return [item for item in items if item.product.id != product_id]


def update_quantity(
    items: Sequence[CartItemDTO], product_id: str, quantity: int
) -> List[CartItemDTO]:
    if quantity <= 0:
        return remove_item(items, product_id)
    return [
        replace(item, quantity=quantity) if item.product.id == product_id else item
        for item in items
    ]


def clear_cart(items: Sequence[CartItemDTO]) -> List[CartItemDTO]:
    return []


def load_cart(loaded: Sequence[CartItemDTO]) -> List[CartItemDTO]:
    # Repeated products in stored data collapse into one line.
    items: List[CartItemDTO] = []
    for item in loaded:
        items = add_item(items, item.product, item.quantity)
    return items


_HANDLERS: Dict[Type, Callable[[Sequence[CartItemDTO], object], List[CartItemDTO]]] = {
    AddItem: lambda items, cmd: add_item(items, cmd.product, cmd.quantity),
    RemoveItem: lambda items, cmd: remove_item(items, cmd.product_id),
    UpdateQuantity: lambda items, cmd: update_quantity(items, cmd.product_id, cmd.quantity),
    ClearCart: lambda items, cmd: clear_cart(items),
    LoadCart: lambda items, cmd: load_cart(cmd.items),
}


def reduce_cart(items: Sequence[CartItemDTO], command: CartCommand) -> List[CartItemDTO]:
    handler = _HANDLERS.get(type(command))
    if handler is None:
        return list(items)
    return handler(items, command)
