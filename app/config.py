"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the data paths for the JSON store,
LLM settings and the fan-out limit used by topic statistics.
Also hosts the environment validator run before AI suggestion requests.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from app.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _csv(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Config:
    # Base
    DIARY_ENV = os.getenv("DIARY_ENV", "dev")
    DATA_DIR = os.getenv("DIARY_DATA_DIR", os.path.abspath(os.path.join(os.getcwd(), "data")))

    # Subdirs
    DB_DIR = os.path.join(DATA_DIR, "db")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Gemini chat model via langchain-google-genai
    LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
    DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

    # Upper bound on concurrent per-topic entry fetches in /api/topics/stats
    STATS_MAX_WORKERS = int(os.getenv("STATS_MAX_WORKERS", "8"))

    # Variables that must be set before the suggestion engine is used
    REQUIRED_ENV_VARS = _csv(os.getenv("REQUIRED_ENV_VARS", "GOOGLE_API_KEY"))


def validate_environment(required: Optional[Iterable[str]] = None) -> None:
    """Raise ConfigurationError if any required environment variable is unset."""
    names = list(Config.REQUIRED_ENV_VARS if required is None else required)
    missing = [name for name in names if not os.getenv(name)]
    if missing:
        logger.warning("Missing required environment variables: %s", missing)
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")
