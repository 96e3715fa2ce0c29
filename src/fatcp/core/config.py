# src/fatcp/core/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    App settings (12-factor). Override via env vars, e.g.
      FATCP_VERBOSE=1  FATCP_DIR_MODE=493
    """

    # Logging
    VERBOSE: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Copy
    DIR_MODE: int = Field(default=0o777, ge=0, le=0o7777)
    CHUNK_SIZE: int = Field(default=1024 * 1024, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="FATCP_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    FastAPI-friendly cached getter. Use Depends(get_settings) where needed.
    """
    return Settings()
