"""Environment-first settings for the CLI and helpers.

Every setting has a sane default so the library works with no environment.
"""

from __future__ import annotations

import logging
import os

from .board import Mark


def log_level() -> int:
    """Level from TTT_ENGINE_LOG_LEVEL (e.g. DEBUG, WARNING); INFO when unset or unknown."""
    name = os.getenv("TTT_ENGINE_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def engine_seat() -> Mark:
    """Side the engine plays by default. The human opens unless TTT_ENGINE_SEAT=X."""
    raw = os.getenv("TTT_ENGINE_SEAT", "O").strip().upper()
    if raw not in ("X", "O"):
        raise ValueError(f"TTT_ENGINE_SEAT must be X or O, got {raw!r}")
    return Mark(raw)


def default_seed() -> int | None:
    raw = os.getenv("TTT_ENGINE_SEED")
    if raw is None or not raw.strip():
        return None
    return int(raw)
