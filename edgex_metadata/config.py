"""Configuration settings for edgex_metadata.

Uses pydantic-settings for config parsing from environment variables
and defaults. Configuration precedence: CLI flags > env vars > defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgex_metadata.types import ServiceEndpoint, ServiceEndpoints


class Settings(BaseSettings):
    """Application settings.

    Settings are loaded from environment variables with the EDGEX_MD_ prefix.
    CLI flags can override these at runtime.
    """

    model_config = SettingsConfigDict(
        env_prefix="EDGEX_MD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # core-metadata service
    metadata_host: str = Field(
        default="localhost",
        min_length=1,
        description="Host name of the core-metadata service",
    )
    metadata_port: int = Field(
        default=48081,
        ge=1,
        le=65535,
        description="Port of the core-metadata service",
    )

    # Paths
    profiles_dir: Path | None = Field(
        default=None,
        description="Directory of device profile files to upload",
    )

    # Operational
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Timeouts (in seconds)
    request_timeout: float = Field(
        default=30.0,
        ge=1,
        description="Timeout for requests to core-metadata",
    )

    def endpoints(self) -> ServiceEndpoints:
        """Build the service endpoint descriptor from these settings."""
        return ServiceEndpoints(
            metadata=ServiceEndpoint(host=self.metadata_host, port=self.metadata_port)
        )


def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()


def print_settings_json(settings: Settings | None = None) -> str:
    """Render effective settings as JSON.

    Args:
        settings: Optional settings instance; uses default if not provided.

    Returns:
        JSON string of effective settings.
    """
    if settings is None:
        settings = get_settings()
    return settings.model_dump_json(indent=2)


__all__ = ["Settings", "get_settings", "print_settings_json"]
