from __future__ import annotations

from typing import List

from apps.catalog.dtos import ProductSnapshot
from apps.common import get_logger

from .commands import (
    AddItem,
    ClearWishlist,
    LoadWishlist,
    RemoveItem,
    WishlistCommand,
)
from .dtos import WishlistDTO
from .protocols import WishlistRepositoryProtocol
from .reducers import contains, reduce_wishlist

logger = get_logger(__name__).bind(component="wishlist", layer="service")


class WishlistService:
    """Saved-for-later products, one entry per product id, persisted like the cart."""

    def __init__(self, repository: WishlistRepositoryProtocol):
        self.repository = repository
        self.logger = logger.bind(service="WishlistService")
        self._items: List[ProductSnapshot] = []
        self._dispatch(LoadWishlist(items=self.repository.load()), persist=False)

    @property
    def items(self) -> List[ProductSnapshot]:
        return list(self._items)

    def add_item(self, product: ProductSnapshot) -> None:
        self.logger.debug("Adding wishlist item", product_id=product.id)
        self._dispatch(AddItem(product=product))

    def remove_item(self, product_id: str) -> None:
        self.logger.debug("Removing wishlist item", product_id=product_id)
        self._dispatch(RemoveItem(product_id=product_id))

    def toggle_item(self, product: ProductSnapshot) -> bool:
        """Remove ``product`` if saved, save it otherwise. Returns the new membership."""
        if self.is_in_wishlist(product.id):
            self.remove_item(product.id)
            return False
        self.add_item(product)
        return True

    def clear_wishlist(self) -> None:
        self.logger.info("Clearing wishlist", count=len(self._items))
        self._dispatch(ClearWishlist())

    def is_in_wishlist(self, product_id: str) -> bool:
        return contains(self._items, product_id)

    def get_total_items(self) -> int:
        return len(self._items)

    def to_dto(self) -> WishlistDTO:
        return WishlistDTO(items=self.items, total_items=self.get_total_items())

    def _dispatch(self, command: WishlistCommand, persist: bool = True) -> None:
        self._items = reduce_wishlist(self._items, command)
        if persist and not self.repository.save(self._items):
            self.logger.warning(
                "Wishlist kept in memory only; persistence failed",
                command=type(command).__name__,
            )
