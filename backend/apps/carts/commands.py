from dataclasses import dataclass, field
from typing import List, Union

from apps.catalog.dtos import ProductSnapshot

from .dtos import CartItemDTO


@dataclass(frozen=True)
class AddItem:
    product: ProductSnapshot
    quantity: int = 1


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class LoadCart:
    items: List[CartItemDTO] = field(default_factory=list)


CartCommand = Union[AddItem, RemoveItem, UpdateQuantity, ClearCart, LoadCart]
