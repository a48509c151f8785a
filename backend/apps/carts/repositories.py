from typing import Any, Optional

from apps.common.repository import SnapshotRepository
from apps.common.storage import KeyValueStorageProtocol

from .dtos import CartItemDTO
from .mappers import CartItemMapper

DEFAULT_CART_STORAGE_KEY = "swastik-cart"


class CartRepository(SnapshotRepository[CartItemDTO]):
    def __init__(
        self,
        storage: KeyValueStorageProtocol,
        key: str = DEFAULT_CART_STORAGE_KEY,
        mapper: Optional[CartItemMapper] = None,
    ):
        super().__init__(storage, key)
        self.mapper = mapper or CartItemMapper()

    def encode(self, item: CartItemDTO) -> Any:
        return self.mapper.to_dict(item)

    def decode(self, raw: Any) -> CartItemDTO:
        return self.mapper.from_dict(raw)
