"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseModel):
    """HTTP API configuration."""

    title: str = "Board API"
    version: str = "0.1.0"

    # Browser origins allowed to call the API (UI automation runners, dev servers)
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]


class SeedSettings(BaseModel):
    """Demo data configuration."""

    # When True the store starts (and resets) with the demo users, posts and comments
    # When False it starts empty
    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, e.g.:

        ENVIRONMENT=development
        HOST=0.0.0.0
        PORT=8000
        SEED__ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows SEED__ENABLED syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    api: APISettings = APISettings()
    seed: SeedSettings = SeedSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
