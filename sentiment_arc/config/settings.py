"""Application settings using Pydantic Settings for environment-based configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the sentiment-arc application.

    All settings can be overridden via environment variables.
    Engine tuning (windows, weights, markers) lives in the lexicon's
    ``config`` section, not here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False

    # Lexicon (None = bundled French lexicon)
    lexicon_path: Path | None = Field(
        default=None,
        description="Path to a lexicon JSON document overriding the bundled one",
    )

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3000, ge=1, le=65535)
    api_keys: str = Field(
        default="",
        description="Comma-separated API keys (empty = no authentication)",
    )
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated allowed CORS origins",
    )
    max_text_length: int = Field(
        default=20_000,
        ge=1,
        description="Maximum characters accepted per analysis request",
    )

    # Observability
    metrics_enabled: bool = False
    metrics_port: int = 8000

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def auth_enabled(self) -> bool:
        """Check if at least one API key is configured."""
        return any(k.strip() for k in self.api_keys.split(","))


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    Clear cache with get_settings.cache_clear() if needed.
    """
    return Settings()
