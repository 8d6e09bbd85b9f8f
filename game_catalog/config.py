"""Environment-driven settings for the Game Catalog API."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def _split_origins(value: str) -> list[str]:
    origins = [item.strip() for item in value.split(",")]
    return [origin for origin in origins if origin] or ["*"]


class Settings(BaseModel):
    """Runtime options read from the process environment (and .env)."""

    model_config = ConfigDict(frozen=True)

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    seed_catalog: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        log_level = os.getenv("GAME_CATALOG_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning("Unknown log level '%s'; falling back to INFO.", log_level)
            log_level = "INFO"
        return cls(
            cors_origins=_split_origins(os.getenv("GAME_CATALOG_CORS_ORIGINS", "*")),
            log_level=log_level,
            seed_catalog=os.getenv("GAME_CATALOG_SEED", "true").strip().lower()
            in TRUTHY,
        )
