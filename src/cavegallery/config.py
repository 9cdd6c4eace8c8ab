"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import LogLevel


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service configuration
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: LogLevel = "INFO"

    # Storage configuration
    paintings_dir: Path = Path("./paintings")
    image_url_prefix: str = "/paintings"
    default_artist: str = "Anonymous Cave Dweller"
    max_image_bytes: int = 10 * 1024 * 1024

    # Gallery page served at /gallery
    gallery_page: Path = Path("./gallery.html")

    # CORS settings - stored as comma-separated string for env var compatibility
    cors_origins_str: str = Field(
        default="*",
        validation_alias="CORS_ALLOWED_ORIGINS",
    )

    @property
    def cors_allowed_origins(self) -> list[str]:
        """CORS allowed origins as a list."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
