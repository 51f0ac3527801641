"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Every setting has a default, the server starts with no environment at all
    - Command-line flags (main.py) override host and port after settings load

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - ALBUMS_ env prefix: settings names are generic (host, port)
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="ALBUMS_", case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)

    # Catalog
    seed_demo_albums: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
