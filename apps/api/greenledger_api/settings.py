"""Application settings and configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    environment: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Storage
    data_dir: Path = Path("./data")

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("./logs")
    log_to_file: bool = True

    # Reporting
    default_framework: str = "GRI"
    default_period: str = "2024"
    recent_activity_limit: int = 5

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
