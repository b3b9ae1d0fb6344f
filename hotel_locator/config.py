"""Centralized configuration using Pydantic Settings.

Single source of truth for provider settings, resolution tuning and
logging. Every value can be overridden via environment variables:
- HL_GEO_PROVIDER=pickpoint
- HL_GEO_API_KEY=pk.xxxxx
- HL_GEO_USER_AGENT="MyHotelApp/2.0 (ops@example.com)"
- HL_RESOLVE_SEARCH_LIMIT=10
- HL_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeocodingConfig(BaseSettings):
    """Geocoding provider configuration.

    Environment variables prefixed with HL_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="HL_GEO_")

    provider: Literal["nominatim", "pickpoint"] = "nominatim"
    user_agent: str = "HotelItineraryApp/1.0 (hotel management system)"
    api_key: Optional[str] = None
    domain: Optional[str] = None
    scheme: Literal["https", "http"] = "https"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    language: Optional[str] = None


class ResolutionConfig(BaseSettings):
    """Query ladder and selection tuning.

    Environment variables prefixed with HL_RESOLVE_.
    """

    model_config = SettingsConfigDict(env_prefix="HL_RESOLVE_")

    default_country: str = "Italy"
    country_code: str = "it"
    country_names: tuple[str, ...] = ("italy", "italia")
    search_limit: int = Field(default=10, ge=1, le=50)
    fallback_limit: int = Field(default=5, ge=1, le=50)
    keywords_path: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent
        / "data"
        / "city_keywords.csv"
    )


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with HL_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="HL_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.geocoding.user_agent)
        print(config.resolution.search_limit)

    Environment variables prefixed with HL_.
    """

    model_config = SettingsConfigDict(env_prefix="HL_")

    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
