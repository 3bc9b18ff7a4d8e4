"""Application settings and environment variables."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


class Settings:

    def __init__(self) -> None:
        self.DATA_DIR: Path = Path(os.getenv("INVLEDGER_DATA_DIR", "data"))
        self.LOW_STOCK_THRESHOLD: int = _int_env("INVLEDGER_LOW_STOCK_THRESHOLD", 10, minimum=0)
        self.ADJUST_MAX_RETRIES: int = _int_env("INVLEDGER_ADJUST_MAX_RETRIES", 5, minimum=1)

        # Logging settings
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Settings for this process, read from the environment on first use.

    Raises ValueError when a variable is malformed.
    """
    return Settings()
