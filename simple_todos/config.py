"""Application settings, read from ``SIMPLE_TODOS_*`` environment variables."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_KEY = "simple-todos-v1"


class Settings(BaseSettings):
    """Settings for the todo app."""

    model_config = SettingsConfigDict(env_prefix="SIMPLE_TODOS_")

    data_dir: Path = Field(
        default=Path.home() / ".simple-todos",
        description="Directory holding the storage slot files",
    )
    storage_key: str = Field(default=STORAGE_KEY, description="Key of the persistence slot")
    log_level: str = Field(default="INFO", description="Root log level")
    allowed_origins: list[str] = Field(default=["http://localhost:3000"])


@lru_cache
def get_settings() -> Settings:
    """Return the process settings, loaded once."""
    return Settings()


def configure_logging(level: str) -> None:
    """Install a basic handler for the package loggers."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
