"""Environment-driven settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_ITEMS = 500


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    optimal_time_limit: Optional[float] = None
    max_items: int = DEFAULT_MAX_ITEMS


def _float_or_none(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def get_settings() -> Settings:
    """Read settings from the environment. .env never overrides variables already set."""
    load_dotenv()
    return Settings(
        log_level=os.getenv("SUITCASE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        optimal_time_limit=_float_or_none("SUITCASE_OPTIMAL_TIME_LIMIT"),
        max_items=_int("SUITCASE_MAX_ITEMS", DEFAULT_MAX_ITEMS),
    )
