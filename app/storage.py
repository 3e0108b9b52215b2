# app/storage.py
from typing import MutableMapping, Optional, Protocol


class KeyValueStorage(Protocol):
    """String key/value store with the same shape as the browser's localStorage."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class SessionStorage:
    """Stores values in the signed session cookie (or any mutable mapping)."""

    def __init__(self, session: MutableMapping):
        self.session = session

    def get_item(self, key: str) -> Optional[str]:
        value = self.session.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        self.session[key] = value

    def remove_item(self, key: str) -> None:
        self.session.pop(key, None)
