"""Configuration management for the smart-routing engine."""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


DEFAULT_LANGUAGE = "en"
DEFAULT_GEO_COUNTRY_HEADERS = ("x-vercel-ip-country", "cf-ipcountry")
DEFAULT_GEO_REGION_HEADER = "x-vercel-ip-country-region"
DEFAULT_GEO_CITY_HEADER = "x-vercel-ip-city"

LOGGABLE_FIELDS = (
    "host",
    "port",
    "default_language",
    "geo_country_headers",
    "weighted_suppresses_plain",
    "log_level",
)

class RoutingConfig(BaseSettings):
    """Engine and preview-service configuration."""

    # Server settings (preview API)
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9300,
        description="Port to listen on"
    )

    # Context building
    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Language used when the request has no Accept-Language header"
    )

    geo_country_headers: List[str] = Field(
        default=list(DEFAULT_GEO_COUNTRY_HEADERS),
        description="Headers carrying the visitor country, checked in order"
    )

    geo_region_header: str = Field(
        default=DEFAULT_GEO_REGION_HEADER,
        description="Header carrying the visitor region"
    )

    geo_city_header: str = Field(
        default=DEFAULT_GEO_CITY_HEADER,
        description="Header carrying the visitor city (percent-encoded)"
    )

    # Evaluation
    weighted_suppresses_plain: bool = Field(
        default=True,
        description="When a tier has matching weighted rules, ignore its plain matches "
                    "even if the weighted draw selects nothing"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def log_summary(self) -> dict:
        """Settings that are safe to write to the startup log.

        Fields must be listed in ``LOGGABLE_FIELDS`` to appear, so new
        settings stay out of the logs until they are added there.
        """
        return self.model_dump(include=set(LOGGABLE_FIELDS))


def load_config() -> RoutingConfig:
    """Load configuration from environment."""
    return RoutingConfig()
