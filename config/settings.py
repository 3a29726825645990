from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Branding
    app_title: str = "Küchenheld"
    app_tagline: str = "Dein kulinarischer Begleiter"

    # Logging
    log_level: str = "INFO"

    # Session defaults
    seed_demo_data: bool = True  # Pre-fill pantry, catalog and folders
    default_cooking_time: int = 30  # Minutes, for new recipes

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
