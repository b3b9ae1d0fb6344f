"""Public entry points for hotel location resolution.

Thin functions over the default container, for callers such as the
hotel registration workflow that do not manage their own wiring.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .container import get_container
from .domain.models import PartialLocation, ResolvedLocation
from .services import HotelGeocodeService, LocationResolverService
from .validation import is_valid_italian_location

__all__ = ["resolve", "enrich", "locate_hotel", "is_valid_italian_location"]


def _resolver() -> LocationResolverService:
    return get_container().resolve(LocationResolverService)


def resolve(
    hotel_name: str, country: Optional[str] = None
) -> Optional[ResolvedLocation]:
    """Resolve a hotel name; None means "no geodata available".

    ``country`` defaults to the configured ``HL_RESOLVE_DEFAULT_COUNTRY``.
    """
    return _resolver().resolve(hotel_name, country)


def enrich(
    hotel_name: str,
    partial_data: Union[PartialLocation, Mapping[str, Any], None] = None,
) -> Optional[ResolvedLocation]:
    """Resolve with optional caller data, which wins over geocoded values."""
    return _resolver().enrich(hotel_name, partial_data)


def locate_hotel(
    name: str,
    city: Optional[str] = None,
    region: Optional[str] = None,
) -> ResolvedLocation:
    """Resolve a hotel for registration.

    Raises:
        InvalidHotelNameError: If the name is blank.
        HotelNotFoundError: If no geodata was found.
        ImplausibleLocationError: If the coordinates are outside Italy.
    """
    service: HotelGeocodeService = get_container().resolve(HotelGeocodeService)
    return service.locate(name, city=city, region=region)
