"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThreadSettings(BaseModel):
    """Comment thread configuration."""

    # Minted ids: roots are "<root_prefix><n>", replies "<parent><sep><n>"
    root_prefix: str = "c"
    id_separator: str = "-"

    max_body_length: int = Field(default=10000, ge=1)

    # Presentation-only nesting cap, None renders every level
    render_max_depth: int | None = Field(default=None, ge=0)

    # Used when the session provider does not supply a display name
    default_author_label: str = "You"


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

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        THREAD__MAX_BODY_LENGTH=2000
        THREAD__RENDER_MAX_DEPTH=6
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows THREAD__ROOT_PREFIX syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    thread: ThreadSettings = ThreadSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
