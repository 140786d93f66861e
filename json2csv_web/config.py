"""
json2csv_web/config.py
======================

Settings helper.

Lookup order
------------
1. Environment variables (including those loaded from a project-root
   `.env` file; the real environment always wins).
2. Optional default passed to get_setting().
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

_env = PROJECT_ROOT / ".env"
if _env.exists():
    load_dotenv(_env, override=False)

DEFAULT_EXAMPLE_PATH = PROJECT_ROOT / "data" / "exemplo.json"
DEFAULT_PORT = 8080


def get_setting(name: str, *, default: str | None = None) -> str:
    """
    Fetch a configuration value.

    Raises
    ------
    RuntimeError
        If the setting is not found and no default is provided.
    """
    if val := os.getenv(name):
        return val

    if default is not None:
        return default

    raise RuntimeError(f"Missing required setting: {name}")


def example_path() -> Path:
    return Path(get_setting("JSON2CSV_EXAMPLE_PATH", default=str(DEFAULT_EXAMPLE_PATH)))


def server_host() -> str:
    return get_setting("JSON2CSV_HOST", default="0.0.0.0")


def server_port() -> int:
    raw = get_setting("JSON2CSV_PORT", default=str(DEFAULT_PORT))
    try:
        return int(raw)
    except ValueError:
        logger.warning("JSON2CSV_PORT '%s' is not a valid integer. Using %d.", raw, DEFAULT_PORT)
        return DEFAULT_PORT


def log_level() -> str:
    return get_setting("JSON2CSV_LOG_LEVEL", default="INFO").upper()
