"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    app_version: str = Field(default="1.0.0", description="Reported to remote services")

    # === Travel time ===
    average_flat_speed_kph: float = Field(
        default=4.0,
        gt=0,
        description="Default flat-ground speed for Scarf's Equivalence"
    )

    # === Elevation: local raster tiles ===
    elevation_dataset_dir: Optional[str] = Field(
        default=None,
        description="Directory of GeoTIFF elevation tiles (selects the raster strategy)"
    )
    elevation_tile_cache_ms: Optional[int] = Field(
        default=0,
        description="Close tiles idle for at least this many milliseconds (0 disables)"
    )

    # === Elevation: remote provider ===
    elevation_provider_protocol: str = Field(default="https")
    elevation_provider_host: Optional[str] = Field(
        default=None,
        description="Elevation service host (selects the remote strategy)"
    )
    elevation_provider_port: Optional[int] = Field(default=None)
    elevation_provider_path: str = Field(default="/api/v1/lookup")
    elevation_provider_method: str = Field(default="POST")
    elevation_provider_user_agent_info: str = Field(default="")
    elevation_provider_referer_info: str = Field(default="")
    elevation_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for a single elevation service request"
    )

    @field_validator('elevation_provider_protocol')
    @classmethod
    def strip_protocol_colon(cls, v: str) -> str:
        """Accept node-style 'http:' as well as 'http'."""
        return v.rstrip(':').lower()

    @field_validator('elevation_provider_method')
    @classmethod
    def upper_method(cls, v: str) -> str:
        return v.upper()

    @property
    def elevation_provider_url(self) -> Optional[str]:
        """Full URL of the remote elevation service, if one is configured."""
        if not self.elevation_provider_host:
            return None
        netloc = self.elevation_provider_host
        if self.elevation_provider_port:
            netloc = f"{netloc}:{self.elevation_provider_port}"
        path = self.elevation_provider_path
        if not path.startswith('/'):
            path = '/' + path
        return f"{self.elevation_provider_protocol}://{netloc}{path}"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
