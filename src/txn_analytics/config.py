"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads environment variables (including a check that `LOG_LEVEL` names a real
logging level).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        transactions_file: JSON file the CLI loads when `--file` is omitted.
        log_path: File to append logs to, or None for stdout only.
        log_level: Numeric logging level.
    """
    transactions_file: Path
    log_path: Path | None
    log_level: int



def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `LOG_LEVEL` is not a known logging level name.
    """
    transactions_file = Path(os.getenv("TRANSACTIONS_FILE", "data/transactions.json"))
    raw_log_path = os.getenv("LOG_PATH", "logs/queries.log").strip()
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise RuntimeError(
            f"LOG_LEVEL={level_name!r} is not a valid logging level "
            "(example: 'INFO' or 'DEBUG')."
        )

    return Settings(
        transactions_file=transactions_file,
        log_path=Path(raw_log_path) if raw_log_path else None,
        log_level=level,
    )
