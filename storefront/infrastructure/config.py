"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Catalog
    catalog_size: int = 1000
    catalog_seed: int | None = None
    description_repeat: int = 20
    tag_count: int = 15
    review_count: int = 20
    related_count: int = 50

    # Queries
    default_page_size: int = 50
    recommendation_count: int = 10
    collation_locale: str | None = None

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
