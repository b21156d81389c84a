# ============================================================================
# CLAUDE CONTEXT - GEOSERVER CLIENT CONFIGURATION
# ============================================================================
# STATUS: Optional Configuration - only used by GeoServerRestClient.from_settings
# PURPOSE: Environment-based connection settings for the GeoServer REST client
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: GeoServerSettings, get_geoserver_settings
# DEPENDENCIES: pydantic-settings, pydantic
# SOURCE: Environment variables, optional .env file
# PATTERNS: Singleton pattern for config
# ============================================================================

"""
GeoServer Client Configuration

The client constructor never reads the environment. This module exists for
applications that prefer to configure the connection through environment
variables:

Environment Variables:
    Required:
    - GEOSERVER_URL: REST endpoint (e.g. http://localhost:8080/geoserver/rest/)
    - GEOSERVER_USER: Admin user name
    - GEOSERVER_PASSWORD: Admin password

    Optional:
    - GEOSERVER_TIMEOUT: Request timeout in seconds (default: no timeout)
    - GEOSERVER_VERIFY_SSL: Verify TLS certificates (default: true)

Usage:
    from geoserver_rest import GeoServerRestClient

    client = GeoServerRestClient.from_settings()
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CONFIG, "GeoServerSettings")


class GeoServerSettings(BaseSettings):
    """
    GeoServer connection settings loaded from environment variables.

    Attributes:
        url: GeoServer REST API endpoint
        user: GeoServer user name
        password: GeoServer password
        timeout: Request timeout in seconds, None for no timeout
        verify_ssl: Verify TLS certificates
    """

    model_config = SettingsConfigDict(
        env_prefix="GEOSERVER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(..., description="GeoServer REST endpoint")
    user: str = Field(..., description="GeoServer user name")
    password: str = Field(..., description="GeoServer password")
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (None disables timeouts)"
    )
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("GEOSERVER_URL must start with http:// or https://")
        return v


@lru_cache(maxsize=1)
def get_geoserver_settings() -> GeoServerSettings:
    """
    Get singleton GeoServer settings instance.

    Raises:
        ValidationError: If required environment variables are missing
    """
    settings = GeoServerSettings()
    logger.info(f"Loaded GeoServer settings for {settings.url}")
    return settings
