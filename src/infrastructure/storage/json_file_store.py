"""
Infrastructure adapter: single JSON state file → IKeyValueStore.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.

The file holds one JSON object mapping keys to string values. A missing file
reads as empty. A corrupt file (bad JSON or bad UTF-8) is logged and also reads
as empty; the next write replaces it. Each write re-reads the file and rewrites
it whole, so two processes sharing a file race and the last writer wins.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from src.domain.ports.key_value_store_port import IKeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(IKeyValueStore):
    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        state = self._load()
        state[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(state, indent=2, sort_keys=True), encoding="utf-8")

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Could not read state file %s (%s); starting empty", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("State file %s does not hold a JSON object; starting empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}
