"""
Application service: watchlist, recently-viewed and theme persistence.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.

Business decisions owned here:
  - Storage keys and their JSON value shapes.
  - Documented defaults (empty watchlist, empty history, dark theme) used
    whenever a stored value is missing or malformed. Corrupt advisory state
    is logged and ignored, never raised.

The IKeyValueStore adapter is injected; reads and writes are plain
read-modify-write with no locking, so concurrent writers race and the last
one wins.
"""

import json
import logging
from typing import Optional

from src.domain.entities.stock_record import Theme
from src.domain.ports.key_value_store_port import IKeyValueStore
from src.domain.structures.recency_tracker import DEFAULT_CAPACITY, RecencyTracker

logger = logging.getLogger(__name__)

WATCHLIST_KEY = "stock_watchlist"
RECENTLY_VIEWED_KEY = "stock_recently_viewed"
THEME_KEY = "stock_theme"

DEFAULT_THEME = Theme.DARK


class PreferencesService:
    def __init__(self, store: IKeyValueStore, recent_capacity: int = DEFAULT_CAPACITY) -> None:
        self._store = store
        self._recent_capacity = recent_capacity

    # ------------------------------------------------------------------
    # Watchlist
    # ------------------------------------------------------------------

    def get_watchlist(self) -> list[str]:
        return self._read_symbols(WATCHLIST_KEY)

    def is_in_watchlist(self, symbol: str) -> bool:
        return symbol in self.get_watchlist()

    def add_to_watchlist(self, symbol: str) -> bool:
        """Append *symbol* unless already present. Returns True if it was added."""
        watchlist = self.get_watchlist()
        if symbol in watchlist:
            return False
        watchlist.append(symbol)
        self._write_symbols(WATCHLIST_KEY, watchlist)
        return True

    def remove_from_watchlist(self, symbol: str) -> bool:
        """Drop *symbol* from the watchlist. Returns True if it was present."""
        watchlist = self.get_watchlist()
        filtered = [s for s in watchlist if s != symbol]
        self._write_symbols(WATCHLIST_KEY, filtered)
        return len(filtered) != len(watchlist)

    def toggle_watchlist(self, symbol: str) -> bool:
        """Flip membership of *symbol*. Returns the new membership state."""
        if self.is_in_watchlist(symbol):
            self.remove_from_watchlist(symbol)
            return False
        self.add_to_watchlist(symbol)
        return True

    # ------------------------------------------------------------------
    # Recently viewed
    # ------------------------------------------------------------------

    def get_recently_viewed(self) -> list[str]:
        """Visited symbols, most recent first."""
        return self._load_tracker().all()

    def add_to_recently_viewed(self, symbol: str) -> None:
        tracker = self._load_tracker()
        tracker.record_visit(symbol)
        # Persisted oldest-first, most recent last.
        self._write_symbols(RECENTLY_VIEWED_KEY, tracker.stored())

    def clear_recently_viewed(self) -> None:
        self._write_symbols(RECENTLY_VIEWED_KEY, [])

    # ------------------------------------------------------------------
    # Theme
    # ------------------------------------------------------------------

    def get_theme(self) -> Theme:
        stored = self._store.read(THEME_KEY)
        if stored is None:
            return DEFAULT_THEME
        try:
            return Theme(stored)
        except ValueError:
            logger.warning("Ignoring unknown theme %r; using %s", stored, DEFAULT_THEME.value)
            return DEFAULT_THEME

    def set_theme(self, theme: Theme) -> None:
        self._store.write(THEME_KEY, Theme(theme).value)

    def toggle_theme(self) -> Theme:
        new_theme = Theme.LIGHT if self.get_theme() is Theme.DARK else Theme.DARK
        self.set_theme(new_theme)
        return new_theme

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _load_tracker(self) -> RecencyTracker:
        return RecencyTracker.from_stored(
            self._read_symbols(RECENTLY_VIEWED_KEY), capacity=self._recent_capacity
        )

    def _read_symbols(self, key: str) -> list[str]:
        raw: Optional[str] = self._store.read(key)
        if raw is None:
            return []
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored value for %r is not valid JSON; using an empty list", key)
            return []
        if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
            logger.warning("Stored value for %r is not a list of symbols; using an empty list", key)
            return []
        return value

    def _write_symbols(self, key: str, symbols: list[str]) -> None:
        self._store.write(key, json.dumps(symbols))
