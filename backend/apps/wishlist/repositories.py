from typing import Any, Optional

from apps.catalog.dtos import ProductSnapshot
from apps.catalog.mappers import ProductSnapshotMapper
from apps.common.repository import SnapshotRepository
from apps.common.storage import KeyValueStorageProtocol

DEFAULT_WISHLIST_STORAGE_KEY = "swastik-wishlist"


class WishlistRepository(SnapshotRepository[ProductSnapshot]):
    def __init__(
        self,
        storage: KeyValueStorageProtocol,
        key: str = DEFAULT_WISHLIST_STORAGE_KEY,
        mapper: Optional[ProductSnapshotMapper] = None,
    ):
        super().__init__(storage, key)
        self.mapper = mapper or ProductSnapshotMapper()

    def encode(self, item: ProductSnapshot) -> Any:
        return self.mapper.to_dict(item)

    def decode(self, raw: Any) -> ProductSnapshot:
        return self.mapper.from_dict(raw)
