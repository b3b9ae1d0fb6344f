"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- NominatimGeocoderAdapter: OpenStreetMap Nominatim / PickPoint geocoding
"""

from .nominatim_adapter import NominatimGeocoderAdapter, parse_candidate

__all__ = ["NominatimGeocoderAdapter", "parse_candidate"]
