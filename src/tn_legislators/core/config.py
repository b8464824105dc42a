"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocoding: general
    geocoder_provider: str = Field(
        default="census",
        description="Geocoder backend used for address lookups (census, nominatim, opencage, demo)",
    )
    relay_prefix: str = Field(
        default="",
        description="Optional relay URL prefix; the fully-encoded target URL is appended to it",
    )

    @field_validator("geocoder_provider")
    @classmethod
    def validate_geocoder_provider(cls, v: str) -> str:
        from tn_legislators.lib.geocoder import get_available_providers

        name = v.strip().lower()
        available = get_available_providers()
        if name not in available:
            msg = f"Unknown geocoder provider {v!r}; expected one of {available}"
            raise ValueError(msg)
        return name

    # Geocoding: Census Bureau
    geocoder_census_timeout: float = Field(
        default=30.0,
        description="Census geocoder request timeout in seconds",
        gt=0,
    )
    census_benchmark: str = Field(
        default="Public_AR_Current",
        description="Census benchmark name for geocoding and geography lookups",
    )
    census_vintage: str = Field(
        default="Current_Current",
        description="Census vintage name for geography lookups",
    )

    # Geocoding: Nominatim (OpenStreetMap)
    geocoder_nominatim_email: str = Field(
        default="",
        description="Email for Nominatim usage policy compliance",
    )
    geocoder_nominatim_timeout: float = Field(
        default=10.0,
        description="Nominatim request timeout in seconds",
        gt=0,
    )

    # Geocoding: OpenCage
    geocoder_opencage_api_key: str | None = Field(
        default=None,
        description="OpenCage geocoding API key",
    )
    geocoder_opencage_timeout: float = Field(
        default=10.0,
        description="OpenCage request timeout in seconds",
        gt=0,
    )

    # District lookup
    district_timeout: float = Field(
        default=30.0,
        description="Census geographies request timeout in seconds",
        gt=0,
    )

    # Legislator directory
    directory_senate_url: str = Field(
        default="https://wapp.capitol.tn.gov/apps/LegislatorInfo/directory.aspx?chamber=S",
        description="Senate directory page URL",
    )
    directory_house_url: str = Field(
        default="https://wapp.capitol.tn.gov/apps/LegislatorInfo/directory.aspx?chamber=H",
        description="House directory page URL",
    )
    directory_image_base_url: str = Field(
        default="https://wapp.capitol.tn.gov",
        description="Base URL joined to relative legislator image paths",
    )
    directory_timeout: float = Field(
        default=30.0,
        description="Directory page request timeout in seconds",
        gt=0,
    )

    @field_validator("directory_senate_url", "directory_house_url", "directory_image_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "directory URLs must use http or https"
            raise ValueError(msg)
        return v

    # Demo
    demo_mode: bool = Field(
        default=False,
        description="Demo mode: keep results without districts and pick placeholder legislators when unmatched",
    )

    # QR contact card
    qr_endpoint: str = Field(
        default="https://api.qrserver.com/v1/create-qr-code/",
        description="External QR image rendering endpoint",
    )
    qr_size: int = Field(
        default=200,
        description="QR image edge length in pixels",
        gt=0,
        le=1000,
    )
    qr_margin: int = Field(
        default=10,
        description="QR image margin in pixels",
        ge=0,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit console logs as one JSON object per line",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
