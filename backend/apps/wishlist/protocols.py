from __future__ import annotations

from typing import Iterable, List, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.dtos import ProductSnapshot


class WishlistRepositoryProtocol(Protocol):
    def load(self) -> List["ProductSnapshot"]:
        ...

    def save(self, items: Iterable["ProductSnapshot"]) -> bool:
        ...
