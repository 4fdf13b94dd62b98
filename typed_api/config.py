"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the server starts with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults reproduce the fixed deployment: port 3333, any CORS origin, docs at /docs
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from typed_api import __version__


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API metadata (documentation)
    app_name: str = "Typed API"
    app_description: str = "API documentation for the Typed API"
    app_version: str = __version__
    docs_url: str = "/docs"

    # Server
    host: str = "0.0.0.0"
    port: int = 3333

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
