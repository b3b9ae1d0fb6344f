"""Locality-only fallback.

When no venue is found, look for a known city name inside the hotel
name and geocode just that city, taking the first result that has
coordinates. The record carries city, region and coordinates but no
street address.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import GeocodingError, KeywordTableError
from ..domain.models import ResolvedLocation
from ..ports.geocoding import GeocoderPort
from ..ports.keywords import CityKeywordPort
from .enrichment import locality_location


@dataclass
class CityFallback:
    """Resolve a hotel name to its city when the venue itself is unknown.

    Attributes:
        geocoder: Provider used for the city search
        keywords: Table of known city names
        limit: Maximum results requested for the city search
    """

    geocoder: GeocoderPort
    keywords: CityKeywordPort
    limit: int = 5

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def detect_city(self, name: str) -> Optional[str]:
        """Return the first table city contained in ``name``, ignoring case."""
        lowered = name.lower()
        try:
            cities = self.keywords.keywords()
        except KeywordTableError as e:
            self._logger.error(
                "City keyword table unavailable",
                extra={"error": str(e), "path": e.file_path},
            )
            return None

        for city in cities:
            if city.lower() in lowered:
                return city
        return None

    def resolve(self, name: str, country: str) -> Optional[ResolvedLocation]:
        city = self.detect_city(name)
        if city is None:
            self._logger.info("No known city in hotel name", extra={"hotel_name": name})
            return None

        self._logger.info("Detected city", extra={"hotel_name": name, "city": city})
        query = f"{city} {country}".strip()
        try:
            results = self.geocoder.search(query, self.limit, extra_tags=False)
        except GeocodingError as e:
            self._logger.warning(
                "City fallback search failed",
                extra={"query": query, "error": str(e)},
            )
            return None

        city_result = next((r for r in results if r.coordinates is not None), None)
        if city_result is None:
            self._logger.info("City fallback found nothing", extra={"query": query})
            return None

        self._logger.info(
            "Found city data",
            extra={"query": query, "display_name": city_result.display_name},
        )
        return locality_location(name, city, city_result)
