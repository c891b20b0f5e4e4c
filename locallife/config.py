"""
LocalLife Configuration

Loads settings from environment variables with sensible defaults.
"""

import logging
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database (read-only source of day records)
    database_url: str = Field(
        default="sqlite:///./locallife.db",
        alias="DATABASE_URL"
    )

    # Analysis
    analysis_max_workers: int = Field(default=2, ge=1, alias="ANALYSIS_MAX_WORKERS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def configure_logging(level: str = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


# Global settings instance
settings = Settings()
