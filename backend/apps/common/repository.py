from __future__ import annotations

import json
from typing import Any, Generic, Iterable, List, TypeVar

from .logger import get_logger
from .storage import KeyValueStorageProtocol

T = TypeVar("T")

logger = get_logger(__name__).bind(component="common", layer="repository")


class SnapshotRepository(Generic[T]):
    """
    Persist a whole collection as one JSON document in a named storage slot.

    Every save writes the full snapshot; there are no partial updates. This is
    the only place that talks to storage, and it never raises: unreadable data
    loads as an empty collection and failed writes are logged and reported
    through the return value only.

    Subclasses provide ``encode`` (item -> JSON-compatible value) and
    ``decode`` (JSON value -> item, raising on schema-invalid input).
    """

    def __init__(self, storage: KeyValueStorageProtocol, key: str):
        self.storage = storage
        self.key = key
        self.logger = logger.bind(slot=key)

    def encode(self, item: T) -> Any:
        raise NotImplementedError

    def decode(self, raw: Any) -> T:
        raise NotImplementedError

    def load(self) -> List[T]:
        try:
            text = self.storage.get(self.key)
        except Exception as exc:
            self.logger.warning("Storage slot unreadable", error=str(exc))
            return []
        if text is None:
            self.logger.debug("Storage slot empty")
            return []
        try:
            raw = json.loads(text)
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            items = [self.decode(entry) for entry in raw]
        except Exception as exc:
            self.logger.warning(
                "Discarding corrupt storage slot",
                error=str(exc),
                exception=exc.__class__.__name__,
            )
            return []
        self.logger.debug("Storage slot loaded", count=len(items))
        return items

    def save(self, items: Iterable[T]) -> bool:
        try:
            text = json.dumps([self.encode(item) for item in items])
            self.storage.set(self.key, text)
        except Exception:
            self.logger.exception("Failed to persist storage slot")
            return False
        return True
