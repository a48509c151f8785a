from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorageProtocol(Protocol):
    """Synchronous string-keyed storage scoped to one visitor (browser/device)."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class SessionStorage:
    """Key-value storage backed by the visitor's Django session.

    Values are stored as the JSON text handed in by the caller. The session
    middleware writes the session out when the response is produced, so a
    slot survives page reloads for as long as the session cookie lives.
    """

    def __init__(self, session):
        self.session = session

    def get(self, key: str) -> Optional[str]:
        value = self.session.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(
                f"Session slot {key!r} holds {type(value).__name__}, expected str"
            )
        return value

    def set(self, key: str, value: str) -> None:
        self.session[key] = value
        self.session.modified = True
