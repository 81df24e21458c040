"""
Shared configuration management for the Geocoder Cache Layer.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_REDIS_PORT = 6379
DEFAULT_REDIS_URL = "redis://localhost:6379/0"
NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="GEOCACHE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env: str = "local"
    log_level: str = "info"

    # Cache store. LOCAL/REDIS_URL are the names the deployment already uses.
    local: bool = Field(default=False, validation_alias=AliasChoices("GEOCACHE_LOCAL", "LOCAL"))
    redis_url: str = Field(
        default="",
        validation_alias=AliasChoices("GEOCACHE_REDIS_URL", "REDIS_URL"),
    )
    cache_ttl_seconds: int = Field(default=15, gt=0)

    # Upstream geocoder
    upstream_base_url: str = NOMINATIM_SEARCH_URL
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)
    upstream_user_agent: str = "geocoder-cache/1.0"

    # Failure policy
    fail_on_cache_read_error: bool = True
    fail_on_cache_write_error: bool = True

    # Observability
    enable_tracing: bool = False
    otel_exporter: str = "http://localhost:4318/v1/traces"
    enable_console_tracing: bool = False

    def cache_connection_url(self) -> str:
        """Resolve the Redis connection URL.

        In local mode ``redis_url`` holds a bare host name and the default
        port and database are implied; otherwise it is a full URL.
        Unset in either mode means the default local server.
        """
        if self.local:
            host = self.redis_url or "localhost"
            return f"redis://{host}:{DEFAULT_REDIS_PORT}/0"
        return self.redis_url or DEFAULT_REDIS_URL


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str = "geocoder"
    port: int = Field(default=8080, validation_alias=AliasChoices("GEOCACHE_PORT", "PORT"))
    host: str = "0.0.0.0"


def get_config(service_name: str, env_file: Optional[str] = ".env") -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, _env_file=env_file)
