"""Typed domain errors for the hotel locator.

Provider failures are raised as typed errors by the adapters and
collapsed to "nothing found" by the resolution services, so a geocoding
outage never blocks hotel registration.

All errors inherit from HotelLocatorError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class HotelLocatorError(Exception):
    """Base error for the hotel locator domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GeocodingError(HotelLocatorError):
    """A single provider request failed.

    Covers transport failures, non-success responses and unparseable
    payloads. Caught at the attempt level by the search services.

    Attributes:
        query: The free-text query (or "lat,lon" for reverse lookups)
        is_rate_limited: Whether the provider refused for quota reasons
        status_code: HTTP status reported by the provider, when known
    """

    query: str = ""
    is_rate_limited: bool = False
    status_code: Optional[int] = None


@dataclass
class ConfigurationError(HotelLocatorError):
    """Invalid or missing configuration.

    Raised when a component is constructed, never on first use.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class KeywordTableError(HotelLocatorError):
    """The city keyword table could not be loaded.

    Attributes:
        file_path: Path to the keyword file
    """

    file_path: Optional[str] = None


@dataclass
class InvalidHotelNameError(HotelLocatorError):
    """The hotel name is empty or blank."""


@dataclass
class HotelNotFoundError(HotelLocatorError):
    """No geodata could be found for the hotel.

    Callers should ask the user to fill in the details manually.

    Attributes:
        hotel_name: The name that was looked up
    """

    hotel_name: str = ""


@dataclass
class ImplausibleLocationError(HotelLocatorError):
    """The resolved coordinates fall outside the target country.

    Attributes:
        latitude: Latitude string of the rejected result
        longitude: Longitude string of the rejected result
    """

    latitude: str = ""
    longitude: str = ""
