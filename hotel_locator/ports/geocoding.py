"""Geocoding port - Abstraction over the free-text geocoding provider.

This protocol defines the contract for geocoding services, allowing
different implementations (Nominatim, LocationIQ, test fakes) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Coordinates, RawCandidate


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/nominatim_adapter.py

    Implementations raise GeocodingError for transport, status and
    parse failures; an empty result is not an error.
    """

    def search(
        self, query: str, limit: int, *, extra_tags: bool = True
    ) -> Sequence[RawCandidate]:
        """Free-text search.

        Args:
            query: Free-text query (e.g., "Villa Toscana hotel Italy").
            limit: Maximum number of results to request.
            extra_tags: Whether to request extra tags (phone, website...).

        Returns:
            Candidates in provider order, possibly empty.

        Raises:
            GeocodingError: If the request fails.
        """
        ...

    def reverse(self, coordinates: Coordinates) -> Optional[RawCandidate]:
        """Coordinate-to-address lookup.

        Args:
            coordinates: GPS coordinates to look up.

        Returns:
            The address at the coordinates, or None if the provider has none.

        Raises:
            GeocodingError: If the request fails.
        """
        ...
