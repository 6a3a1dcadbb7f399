"""12-factor configuration adapter using environment variables and an optional .env file."""

from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")

    # HERE API configuration
    here_api_key: str = Field(default="", description="API key sent with every HERE request")
    here_lang: str = Field(default="it", description="Language of HERE responses")
    here_autosuggest_url: str = Field(
        default="https://autosuggest.search.hereapi.com/v1/autosuggest",
        description="HERE autosuggest endpoint",
    )
    here_transit_url: str = Field(
        default="https://transit.router.hereapi.com/v8/routes",
        description="HERE public transit routing endpoint",
    )

    # ViaggiaTreno configuration
    viaggiatreno_base_url: str = Field(
        default="http://www.viaggiatreno.it/infomobilita/resteasy/viaggiatreno",
        description="Base URL of the Trenitalia real-time endpoints",
    )
    carrier_agency_name: str = Field(
        default="TRENITALIA",
        description="Agency name of the transit sections to enrich with live delays",
    )
    carrier_timezone: str = Field(
        default="Europe/Rome",
        description="Timezone used to render dates for the carrier (IANA timezone name)",
    )
    carrier_min_delay_seconds: float = Field(
        default=0.0,
        description="Minimum delay between two requests to the carrier, in seconds",
    )

    # Upstream behaviour
    upstream_timeout_seconds: float = Field(
        default=10.0, description="Timeout for each upstream HTTP request in seconds"
    )
    enrich_legs_concurrently: bool = Field(
        default=True,
        description="Look up the delays of all legs of an itinerary concurrently",
    )

    # Web configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Origins allowed to call the API from a browser"
    )

    @field_validator("carrier_timezone")
    @classmethod
    def validate_carrier_timezone(cls, v: str) -> str:
        """Validate the carrier timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"carrier_timezone must be an IANA timezone name, got {v!r}") from e
        return v

    @field_validator("upstream_timeout_seconds")
    @classmethod
    def validate_upstream_timeout(cls, v: float) -> float:
        """Validate the upstream timeout is positive."""
        if v <= 0:
            raise ValueError("upstream_timeout_seconds must be positive")
        return v

    def here_params(self) -> dict[str, Any]:
        """Query parameters attached to every HERE request."""
        return {"lang": self.here_lang, "apikey": self.here_api_key}
