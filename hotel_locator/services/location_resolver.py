"""Hotel location resolver - Main orchestrator.

Turns a bare hotel name into a best-effort ResolvedLocation:
1. Query ladder with two-tier candidate selection
2. Reverse-geocoding backfill for a missing city or region
3. Locality-only fallback from a city keyword table

Resolution is best-effort: provider failures collapse to None and
never propagate, so a geocoding outage cannot block hotel registration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Union

from ..domain.errors import GeocodingError
from ..domain.models import (
    LocationQuery,
    PartialLocation,
    RawCandidate,
    ResolvedLocation,
)
from ..ports.geocoding import GeocoderPort
from .candidate_search import CandidateSearch
from .candidate_selection import CandidateSelector
from .city_fallback import CityFallback
from .enrichment import backfill, build_location, needs_backfill

PartialData = Union[PartialLocation, Mapping[str, Any], None]


@dataclass
class LocationResolverService:
    """Resolves hotel names into structured locations.

    Attributes:
        geocoder: Provider used for reverse lookups
        search: Query ladder runner
        selector: Two-tier candidate selection
        fallback: Locality-only fallback
        default_country: Country used when the caller gives none
    """

    geocoder: GeocoderPort
    search: CandidateSearch
    selector: CandidateSelector
    fallback: CityFallback
    default_country: str = "Italy"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(
        self, name: str, country: Optional[str] = None
    ) -> Optional[ResolvedLocation]:
        """Resolve a hotel name.

        Args:
            name: Hotel name as typed by the user.
            country: Country to search in (default: configured country).

        Returns:
            The resolved location, or None when no geodata was found.
        """
        query = self._query(name, country)
        if query is None:
            return None
        return self._resolve_query(query)

    def _query(self, name: str, country: Optional[str]) -> Optional[LocationQuery]:
        try:
            return LocationQuery(name=name, country=country or self.default_country)
        except ValueError:
            return None

    def _resolve_query(self, query: LocationQuery) -> Optional[ResolvedLocation]:
        self._logger.info(
            "Starting hotel resolution",
            extra={"hotel_name": query.name, "country": query.country},
        )
        try:
            return self._resolve(query)
        except Exception as e:
            self._logger.error(
                "Hotel resolution failed unexpectedly",
                extra={"hotel_name": query.name, "error": str(e)},
            )
            return None

    def _resolve(self, query: LocationQuery) -> Optional[ResolvedLocation]:
        hit = self.search.search_and_select(
            query.name, query.country, self.selector.select
        )
        if hit is None:
            self._logger.info(
                "Hotel not found, trying city fallback",
                extra={"hotel_name": query.name},
            )
            return self.fallback.resolve(query.name, query.country)

        _, candidate = hit
        location = build_location(query.name, candidate)
        if needs_backfill(location):
            location = self._backfill(location, candidate)
        return location

    def _backfill(
        self, location: ResolvedLocation, candidate: RawCandidate
    ) -> ResolvedLocation:
        # The selector only accepts candidates that carry coordinates
        coordinates = candidate.coordinates
        assert coordinates is not None

        try:
            reverse = self.geocoder.reverse(coordinates)
        except GeocodingError as e:
            self._logger.warning(
                "Reverse geocoding failed",
                extra={"lat": candidate.lat, "lon": candidate.lon, "error": str(e)},
            )
            return location

        if reverse is None:
            return location
        return backfill(location, reverse)

    def enrich(
        self, name: str, partial: PartialData = None
    ) -> Optional[ResolvedLocation]:
        """Resolve with caller hints, letting caller data win.

        Tries the bare name first, then the name narrowed by the city hint,
        then by the region hint. Every non-blank field of ``partial``
        overrides the geocoded value.

        Args:
            name: Hotel name as typed by the user.
            partial: Caller-supplied data (PartialLocation or mapping).

        Returns:
            The merged location, or None when no geodata was found.
        """
        query = self._query(name, None)
        if query is None:
            return None

        try:
            if partial is None:
                partial = PartialLocation()
            elif not isinstance(partial, PartialLocation):
                partial = PartialLocation.from_mapping(partial)

            result = self._resolve_query(query)
            for hint in (partial.city_hint, partial.region_hint):
                if result is not None:
                    break
                if hint:
                    self._logger.info(
                        "Retrying with hint",
                        extra={"hotel_name": query.name, "hint": hint},
                    )
                    result = self._resolve_query(query.with_hint(hint))
                    if result is not None:
                        result = replace(result, name=query.name)

            if result is None:
                return None
            return result.merged_with(partial)
        except Exception as e:
            self._logger.error(
                "Hotel data enrichment failed",
                extra={"hotel_name": name, "error": str(e)},
            )
            return None
