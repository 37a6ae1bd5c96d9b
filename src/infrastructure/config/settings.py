"""
Runtime configuration read from the environment (and a local .env file).
See docs/CleanArchitecture.md — Phase 5 for the architectural rationale.

An empty STOCKWATCH_STATE_PATH keeps preferences in memory for the lifetime
of the process instead of writing a state file.
"""

import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    state_path: Optional[str]
    rotation_seconds: float
    top_picks_size: int
    recent_capacity: int
    log_level: str


def _get_env_number(name: str, default: str, cast):
    raw = os.getenv(name, default).strip()
    try:
        value = cast(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise RuntimeError(f"{name} must be a positive finite number, got {raw!r}")
    return value


def load_settings() -> Settings:
    load_dotenv()

    return Settings(
        state_path=os.getenv("STOCKWATCH_STATE_PATH", "state.json").strip() or None,
        rotation_seconds=_get_env_number("STOCKWATCH_ROTATION_SECONDS", "5", float),
        top_picks_size=_get_env_number("STOCKWATCH_TOP_PICKS_SIZE", "5", int),
        recent_capacity=_get_env_number("STOCKWATCH_RECENT_CAPACITY", "5", int),
        log_level=os.getenv("STOCKWATCH_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
