import logging
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Cache configuration"""

    # Cache Settings
    default_capacity: int = 128

    # Logging Settings
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="RECENCY_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("default_capacity")
    @classmethod
    def _capacity_must_be_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"default_capacity must be >= 1, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for applications embedding the cache."""
    logging.basicConfig(
        level=level or settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


settings = Settings()
