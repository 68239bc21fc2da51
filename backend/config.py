"""
Runtime settings for the snake engine.

Values come from the environment (a local .env file is loaded first).
Board size is fixed and intentionally not configurable here.
"""

import os

from dotenv import load_dotenv

from domain.constants import TICK_PERIOD_MS as DEFAULT_TICK_PERIOD_MS

load_dotenv()


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


TICK_PERIOD_MS = _int_from_env("SNAKE_TICK_PERIOD_MS", DEFAULT_TICK_PERIOD_MS)
LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()
