"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Oracle and global renewal policy
    ORACLE_PRINCIPAL: str = "oracle"
    DEFAULT_THRESHOLD: int = 90
    DEFAULT_PERIOD: int = 12
    GRACE_PERIOD: int = 30
    MAX_EVALUATIONS: int = 500

    # Fallback values for leases without stored rules
    FALLBACK_DURATION_EXTENSION: int = 12
    FALLBACK_MIN_PAYMENTS: int = 6

    # Host clock
    INITIAL_BLOCK_HEIGHT: int = 0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


# Global settings instance
settings = Settings()
