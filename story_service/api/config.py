"""API configuration constants.

Single source of truth for settings used across the API layer. Values come
from the environment, with a `.env` file loaded first when one is found.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database
DATABASE_URL = os.getenv("DATABASE_URL", "postgresql+asyncpg://localhost:5432/demo")

# Server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = _env_flag("LOG_JSON", True)

# Stories keep the creation time in updatedAt unless this is switched on
STORY_TOUCH_UPDATED_AT = _env_flag("STORY_TOUCH_UPDATED_AT", False)


@dataclass(frozen=True)
class Settings:
    """Snapshot of the settings the application factory needs."""

    database_url: str
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_json: bool = True
    touch_updated_at: bool = False

    @property
    def log_level_number(self) -> int:
        level = getattr(logging, self.log_level, None)
        return level if isinstance(level, int) else logging.INFO


def load_settings() -> Settings:
    """Build settings from the module-level configuration."""
    return Settings(
        database_url=DATABASE_URL,
        host=API_HOST,
        port=API_PORT,
        log_level=LOG_LEVEL,
        log_json=LOG_JSON,
        touch_updated_at=STORY_TOUCH_UPDATED_AT,
    )
