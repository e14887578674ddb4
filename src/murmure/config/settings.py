"""Pydantic Settings for Murmure webhook configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with support for env vars and .env files."""

    model_config = SettingsConfigDict(
        env_prefix="MURMURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    debug: bool = Field(default=False, alias="DEBUG_MODE")

    # Where settings.json and webhook_history.json are stored
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "murmure")

    # Webhook delivery
    webhook_timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")
    history_max_entries: int = Field(default=100, ge=1)

    @property
    def settings_path(self) -> Path:
        """Return the path to the key/value settings file."""
        return self.config_dir / "settings.json"

    @property
    def history_path(self) -> Path:
        """Return the path to the webhook history file."""
        return self.config_dir / "webhook_history.json"


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
