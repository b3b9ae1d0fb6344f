"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GeocodingError,
    HotelLocatorError,
    HotelNotFoundError,
    ImplausibleLocationError,
    InvalidHotelNameError,
    KeywordTableError,
)
from .models import (
    ITALY_BOUNDS,
    BoundingBox,
    Coordinates,
    LocationQuery,
    PartialLocation,
    PlaceKind,
    RawCandidate,
    ResolvedLocation,
)

__all__ = [
    # Models
    "BoundingBox",
    "Coordinates",
    "ITALY_BOUNDS",
    "LocationQuery",
    "PartialLocation",
    "PlaceKind",
    "RawCandidate",
    "ResolvedLocation",
    # Errors
    "HotelLocatorError",
    "GeocodingError",
    "ConfigurationError",
    "KeywordTableError",
    "InvalidHotelNameError",
    "HotelNotFoundError",
    "ImplausibleLocationError",
]
