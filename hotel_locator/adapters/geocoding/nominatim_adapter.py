"""Nominatim geocoder adapter.

Wraps geopy's Nominatim (or the Nominatim-compatible PickPoint) client:
- Configuration injection, validated when the adapter is built
- Rate limiting without retries (the query ladder is the only repetition)
- geopy exceptions translated into GeocodingError
- Raw JSON payloads parsed into RawCandidate at this boundary
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Mapping, Optional

from geopy.exc import (
    GeocoderQuotaExceeded,
    GeocoderServiceError,
    GeocoderTimedOut,
    GeocoderUnavailable,
    GeopyError,
)
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim, PickPoint

from ...config import GeocodingConfig, get_config
from ...domain.errors import ConfigurationError, GeocodingError
from ...domain.models import Coordinates, PlaceKind, RawCandidate


def _as_str_mapping(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    return {str(k): str(v) for k, v in value.items() if v is not None}


def _parse_coordinates(lat: str, lon: str) -> Optional[Coordinates]:
    if not lat or not lon:
        return None
    try:
        return Coordinates(latitude=float(lat), longitude=float(lon))
    except ValueError:
        return None


def parse_candidate(raw: Mapping[str, Any]) -> RawCandidate:
    """Turn one provider JSON object into a RawCandidate.

    Provider type strings are mapped onto PlaceKind here so that
    selection never compares against provider vocabulary.
    """
    extra_tags = _as_str_mapping(raw.get("extratags"))
    lat = str(raw.get("lat") or "").strip()
    lon = str(raw.get("lon") or "").strip()
    coordinates = _parse_coordinates(lat, lon)
    if coordinates is None:
        # Never hand out half a coordinate pair
        lat, lon = "", ""

    return RawCandidate(
        display_name=str(raw.get("display_name") or ""),
        kind=PlaceKind.parse(raw.get("type")),
        class_kind=PlaceKind.parse(raw.get("class") or raw.get("category")),
        tourism_kind=PlaceKind.parse(extra_tags.get("tourism")),
        address=_as_str_mapping(raw.get("address")),
        coordinates=coordinates,
        lat=lat,
        lon=lon,
        extra_tags=extra_tags,
    )


@contextmanager
def _translate_errors(query: str, logger: logging.Logger) -> Iterator[None]:
    """Re-raise geopy failures as GeocodingError."""
    try:
        yield
    except GeopyError as e:
        status_code = getattr(e.__cause__, "status_code", None)
        if isinstance(e, GeocoderQuotaExceeded):
            message = "Geocoding quota exceeded"
        elif isinstance(e, (GeocoderTimedOut, GeocoderUnavailable)):
            message = "Geocoding provider unavailable"
        elif isinstance(e, GeocoderServiceError):
            message = "Geocoding provider error"
        else:
            message = "Geocoding request failed"

        logger.debug(
            message,
            extra={"query": query, "error": str(e), "status": status_code},
        )
        raise GeocodingError(
            message,
            query=query,
            is_rate_limited=isinstance(e, GeocoderQuotaExceeded),
            status_code=status_code,
            cause=e,
        ) from e


@dataclass
class NominatimGeocoderAdapter:
    """Geocoder backed by OpenStreetMap Nominatim or PickPoint.

    This adapter implements GeocoderPort. Every request carries the
    configured user agent; the public Nominatim endpoint blocks
    anonymous traffic.

    Attributes:
        config: Geocoding configuration
        geolocator: Optional pre-built geopy geocoder (tests inject mocks)
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    geolocator: Optional[Any] = field(default=None, repr=False)

    _search_fn: Callable[..., Any] = field(init=False, repr=False)
    _reverse_fn: Callable[..., Any] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._validate_config()

        if self.geolocator is None:
            self.geolocator = self._build_geolocator()

        self._search_fn = RateLimiter(
            self.geolocator.geocode,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=0,
            error_wait_seconds=self.config.rate_limit_delay,
            swallow_exceptions=False,
        )
        self._reverse_fn = RateLimiter(
            self.geolocator.reverse,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=0,
            error_wait_seconds=self.config.rate_limit_delay,
            swallow_exceptions=False,
        )

    def _validate_config(self) -> None:
        if not self.config.user_agent or not self.config.user_agent.strip():
            raise ConfigurationError(
                "A descriptive user agent is required by the geocoding provider",
                setting_name="HL_GEO_USER_AGENT",
                expected_type="non-empty string",
            )
        if self.config.provider == "pickpoint" and not self.config.api_key:
            raise ConfigurationError(
                "PickPoint requires an API key",
                setting_name="HL_GEO_API_KEY",
                expected_type="non-empty string",
            )

    def _build_geolocator(self) -> Any:
        self._logger.debug(
            "Initializing geocoder",
            extra={
                "provider": self.config.provider,
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )
        options: dict[str, Any] = {
            "user_agent": self.config.user_agent,
            "timeout": self.config.timeout_seconds,
            "scheme": self.config.scheme,
        }
        if self.config.domain:
            options["domain"] = self.config.domain

        if self.config.provider == "pickpoint":
            return PickPoint(api_key=self.config.api_key, **options)
        return Nominatim(**options)

    @property
    def _language(self) -> Any:
        return self.config.language or False

    def search(
        self, query: str, limit: int, *, extra_tags: bool = True
    ) -> List[RawCandidate]:
        """Free-text search returning up to ``limit`` candidates.

        Args:
            query: Free-text query.
            limit: Maximum number of results.
            extra_tags: Whether to request phone/website/tourism tags.

        Returns:
            Candidates in provider order, empty if nothing matched.

        Raises:
            GeocodingError: If the provider cannot be reached or fails.
        """
        if not query or not query.strip():
            return []

        with _translate_errors(query, self._logger):
            locations = self._search_fn(
                query,
                exactly_one=False,
                limit=limit,
                addressdetails=True,
                extratags=extra_tags,
                language=self._language,
            )

        if not locations:
            self._logger.debug("Search returned no result", extra={"query": query})
            return []

        return [parse_candidate(location.raw) for location in locations]

    def reverse(self, coordinates: Coordinates) -> Optional[RawCandidate]:
        """Reverse geocode coordinates to an address.

        Raises:
            GeocodingError: If the provider cannot be reached or fails.
        """
        query = f"{coordinates.latitude},{coordinates.longitude}"
        with _translate_errors(query, self._logger):
            location = self._reverse_fn(
                (coordinates.latitude, coordinates.longitude),
                exactly_one=True,
                addressdetails=True,
                language=self._language,
            )

        if location is None:
            return None
        return parse_candidate(location.raw)
