from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    # In production: you typically inject real env vars instead.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - USER_API_HOST (optional, interface to bind)
    # - USER_API_PORT (optional, defaults to 8000)
    # - LOG_LEVEL (optional)
    host: str = Field(default="0.0.0.0", validation_alias="USER_API_HOST")
    port: int = Field(default=8000, ge=1, le=65535, validation_alias="USER_API_PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). FastAPI
    dependencies and tests can override/monkeypatch this function.
    """
    return Settings()
