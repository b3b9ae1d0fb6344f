"""Registration gate around hotel enrichment.

Applies the checks the hotel registration workflow needs before it
stores geodata: a non-blank name, a result, and coordinates that lie
in Italy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import (
    HotelNotFoundError,
    ImplausibleLocationError,
    InvalidHotelNameError,
)
from ..domain.models import PartialLocation, ResolvedLocation
from ..validation import is_valid_italian_location
from .location_resolver import LocationResolverService


@dataclass
class HotelGeocodeService:
    """Locate a hotel for registration, raising typed errors on rejection.

    Attributes:
        resolver: The location resolver
    """

    resolver: LocationResolverService

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def locate(
        self,
        name: str,
        city: Optional[str] = None,
        region: Optional[str] = None,
    ) -> ResolvedLocation:
        """Resolve a hotel and check it is plausibly in Italy.

        Args:
            name: Hotel name as typed by the user.
            city: Optional city entered by the user.
            region: Optional region entered by the user.

        Returns:
            The resolved location.

        Raises:
            InvalidHotelNameError: If the name is blank.
            HotelNotFoundError: If no geodata was found.
            ImplausibleLocationError: If the coordinates are outside Italy.
        """
        if not name or not name.strip():
            raise InvalidHotelNameError("Hotel name is required")

        self._logger.info("Searching for hotel", extra={"hotel_name": name})
        location = self.resolver.enrich(name, PartialLocation(city=city, region=region))

        if location is None:
            raise HotelNotFoundError(
                "Hotel not found. Check the name and try again.",
                hotel_name=name,
            )

        if location.has_coordinates and not is_valid_italian_location(
            location.latitude, location.longitude
        ):
            raise ImplausibleLocationError(
                "The hotel must be located in Italy",
                latitude=location.latitude,
                longitude=location.longitude,
            )

        self._logger.info(
            "Found hotel",
            extra={
                "hotel_name": location.name,
                "city": location.city,
                "region": location.region,
            },
        )
        return location
