"""Shared settings loaded from environment variables."""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_LOG_LEVEL = "INFO"


@lru_cache(maxsize=None)
def get_gazetteer_path() -> Path | None:
    """Return the JSON gazetteer that replaces the built-in tables, if any."""

    value = os.getenv("KYGEO_GAZETTEER_PATH", "").strip()
    return Path(value) if value else None


@lru_cache(maxsize=None)
def get_log_level() -> str:
    """Return the default log level used by the command-line interface."""

    return os.getenv("KYGEO_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "get_gazetteer_path",
    "get_log_level",
]
