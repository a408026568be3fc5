"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream listing site
    listing_base_url: str = "https://www.cinetecanacional.net/sedes"

    # Scraping settings
    scrape_timeout: int = 30
    failure_backoff_seconds: float = 0.5  # pause after a venue fails
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    accept_language: str = "es-MX,es;q=0.9,en;q=0.8"

    # Upcoming showtimes
    local_timezone: str = "America/Mexico_City"
    upcoming_window_minutes: int = 60

    # API settings
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


# Global settings instance
settings = Settings()
