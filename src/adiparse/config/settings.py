"""
Application settings using Pydantic.

Provides environment-based configuration loading with ADIPARSE_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Qoboto identity-data API
    api_base_url: str = "https://localhost:7033"
    api_provider: str = "Qoboto"

    # Accumulate network used in partner URLs (mainnet, kermit, fozzie, ...)
    network_name: str = "mainnet"

    # Response cache
    cache_ttl_seconds: float = 300.0
    cache_max_entries: int = 1024

    # HTTP client settings (None disables the request timeout)
    http_timeout: float | None = None

    # Debug / development
    debug: bool = False
    development_mode: bool = False
    mock_latency_seconds: float = 0.2

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "ADIPARSE_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
