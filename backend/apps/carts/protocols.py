from __future__ import annotations

from typing import Iterable, List, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.carts.dtos import CartItemDTO


class CartRepositoryProtocol(Protocol):
    def load(self) -> List["CartItemDTO"]:
        ...

    def save(self, items: Iterable["CartItemDTO"]) -> bool:
        ...
