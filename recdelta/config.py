"""
config.py
=========

Runtime settings.  Defaults live in the configuration block below; any of
them can be overridden through environment variables or a ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# ----- Configuration -----
DEFAULT_MODEL = "gpt-4o"
DEFAULT_CUSTOMER_CSV = os.path.join("data", "Customer_List_with_YTD_Purchases.csv")
DEFAULT_WORD_LIMIT = 80
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str]
    model: str = DEFAULT_MODEL
    customer_csv: str = DEFAULT_CUSTOMER_CSV
    word_limit: int = DEFAULT_WORD_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(use_dotenv: bool = True) -> Settings:
    """Reads settings from the environment (and ``.env`` when present)."""
    if use_dotenv:
        load_dotenv(override=True)
    raw_limit = os.getenv("RECDELTA_WORD_LIMIT", str(DEFAULT_WORD_LIMIT))
    try:
        word_limit = int(raw_limit)
    except ValueError as e:
        raise ValueError(f"RECDELTA_WORD_LIMIT must be an integer, got {raw_limit!r}") from e
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        model=os.getenv("RECDELTA_MODEL", DEFAULT_MODEL),
        customer_csv=os.getenv("RECDELTA_CUSTOMER_CSV", DEFAULT_CUSTOMER_CSV),
        word_limit=word_limit,
        log_level=os.getenv("RECDELTA_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL, force: bool = False) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
