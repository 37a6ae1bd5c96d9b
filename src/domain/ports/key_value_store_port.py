"""
Port (interface) for persisted key-value preference stores.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.
Infrastructure adapters (e.g. JsonFileKeyValueStore) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the stored string for *key*, or None when nothing is stored."""
        ...

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...
