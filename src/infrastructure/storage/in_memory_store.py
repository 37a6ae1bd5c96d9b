"""
Infrastructure adapter: process-local dict → IKeyValueStore.
Used by tests, and by the composition root when STOCKWATCH_STATE_PATH is
set to an empty value so nothing touches disk.
"""

from typing import Optional

from src.domain.ports.key_value_store_port import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
