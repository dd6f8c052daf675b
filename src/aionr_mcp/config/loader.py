"""Configuration loading from environment variables and .env files."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend AION-R API
    aion_r_api_url: str = "http://localhost:8001"
    aion_r_api_key: str = ""

    # Timeouts and retries for backend calls
    aion_r_api_timeout: float = 60.0
    aion_r_api_retry_attempts: int = 3
    aion_r_api_retry_backoff: float = 1.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Server info
    server_name: str = "aionr2"
    server_version: str = "0.1.0"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def auth_enabled(self) -> bool:
        """Check if a bearer token is sent to the backend."""
        return bool(self.aion_r_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
