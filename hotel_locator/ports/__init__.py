"""Ports layer - Protocols the services depend on.

Available ports:
- GeocoderPort: free-text search and reverse geocoding
- CityKeywordPort: city names for the locality-only fallback
"""

from .geocoding import GeocoderPort
from .keywords import CityKeywordPort

__all__ = ["GeocoderPort", "CityKeywordPort"]
