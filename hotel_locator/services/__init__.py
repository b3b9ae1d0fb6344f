"""Services layer - Application orchestration.

Available services:
- LocationResolverService: query ladder, backfill and city fallback
- HotelGeocodeService: registration gate around enrichment
- CandidateSearch, CandidateSelector, CityFallback: resolution steps
"""

from .candidate_search import CandidateSearch, build_query_ladder
from .candidate_selection import CandidateSelector, is_hospitality
from .city_fallback import CityFallback
from .hotel_geocode import HotelGeocodeService
from .location_resolver import LocationResolverService

__all__ = [
    "CandidateSearch",
    "CandidateSelector",
    "CityFallback",
    "HotelGeocodeService",
    "LocationResolverService",
    "build_query_ladder",
    "is_hospitality",
]
