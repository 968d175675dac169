"""
Configuration module using pydantic-settings.

All configuration loaded from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Load from .env file or environment variables.
    """

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Normalization
    case_sensitive: bool = False

    # Term expansion hooks (accepted, not applied)
    use_stemming: bool = False
    use_synonyms: bool = False

    # Search settings
    suggestion_limit: int = Field(10, ge=0)
    recency_days: int = Field(7, ge=0)  # Window for the recency bonus

    # Performance
    search_workers: int = Field(2, ge=1)  # Background search threads

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
