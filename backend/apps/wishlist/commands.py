from dataclasses import dataclass, field
from typing import List, Union

from apps.catalog.dtos import ProductSnapshot


@dataclass(frozen=True)
class AddItem:
    product: ProductSnapshot


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class ClearWishlist:
    pass


@dataclass(frozen=True)
class LoadWishlist:
    items: List[ProductSnapshot] = field(default_factory=list)


WishlistCommand = Union[AddItem, RemoveItem, ClearWishlist, LoadWishlist]
