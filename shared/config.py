"""
Shared configuration management for the Actions Gateway.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_KEY = "your-secret-key-123"
DEFAULT_TRANSLATION_CACHE_TTL = 3600


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="ACTIONS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env: str = "local"
    log_level: str = "info"


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str = "actions"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias=AliasChoices("ACTIONS_PORT", "PORT", "port"))

    # Security
    api_key: str = DEFAULT_API_KEY

    # Caching
    translation_cache_ttl: int = DEFAULT_TRANSLATION_CACHE_TTL

    # Upstream APIs
    upstream_timeout: Optional[float] = None
    chuck_norris_url: str = "https://api.chucknorris.io"
    dad_joke_url: str = "https://icanhazdadjoke.com"
    lingva_url: str = "https://lingva.ml"
    mymemory_url: str = "https://api.mymemory.translated.net"


def get_config(**overrides) -> ServiceConfig:
    """Get configuration for the service, applying explicit overrides."""
    return ServiceConfig(**overrides)
