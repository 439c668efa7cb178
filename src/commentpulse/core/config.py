"""Configuration management for CommentPulse."""

from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import FetchConstants, ThemeConstants


class Settings(BaseSettings):
    """Application settings."""

    # Server
    host: str = Field("0.0.0.0", description="Interface the API server binds to")
    port: int = Field(8080, description="Port the API server listens on")

    # YouTube Data API
    youtube_api_key: str = Field("", description="YouTube Data API v3 key")

    # Google Cloud Natural Language credentials (first one set wins)
    google_cloud_natural_language_key_json: str = Field(
        "", description="Inline service account JSON for the Natural Language API"
    )
    google_application_credentials: str = Field(
        "", description="Path to a service account JSON file"
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Fetch settings
    page_size: int = Field(FetchConstants.PAGE_SIZE, description="Comments requested per page")
    max_comments: int = Field(FetchConstants.MAX_COMMENTS, description="Stop paging once this many comments are fetched")
    page_delay: float = Field(FetchConstants.PAGE_DELAY, description="Seconds to wait between page requests")

    # Analysis settings
    analysis_workers: int = Field(16, description="Concurrent Natural Language API calls")
    salience_threshold: float = Field(ThemeConstants.SALIENCE_THRESHOLD, description="Minimum entity salience for a theme")
    min_theme_occurrences: int = Field(ThemeConstants.MIN_OCCURRENCES, description="Minimum mentions for a theme")
    max_themes: int = Field(ThemeConstants.MAX_THEMES, description="Number of themes returned")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings


# Global settings instance
settings = Settings()
