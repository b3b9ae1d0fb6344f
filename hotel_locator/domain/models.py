"""Immutable domain models for the hotel locator.

All models are frozen dataclasses with slots. They carry no
provider-specific vocabulary: the adapters translate raw payloads into
these types at the parse boundary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum, auto
from typing import Any, Mapping, Optional


class PlaceKind(Enum):
    """Closed vocabulary for the provider's place type strings.

    Only the distinctions that candidate selection cares about are kept;
    every other provider type collapses to OTHER.
    """

    HOTEL = auto()
    RESORT = auto()
    OTHER = auto()

    @classmethod
    def parse(cls, value: Optional[str]) -> PlaceKind:
        """Map a provider string (``"hotel"``, ``"Resort"``...) to a kind."""
        if not value:
            return cls.OTHER
        normalized = str(value).strip().lower()
        if normalized == "hotel":
            return cls.HOTEL
        if normalized == "resort":
            return cls.RESORT
        return cls.OTHER

    @property
    def is_hospitality(self) -> bool:
        return self in (PlaceKind.HOTEL, PlaceKind.RESORT)


@dataclass(frozen=True, slots=True)
class Coordinates:
    """GPS coordinates of a place."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Latitude/longitude rectangle, bounds inclusive."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, latitude: float, longitude: float) -> bool:
        # NaN compares false against everything, so unparseable input is rejected
        return (
            self.min_lat <= latitude <= self.max_lat
            and self.min_lon <= longitude <= self.max_lon
        )


ITALY_BOUNDS = BoundingBox(min_lat=35.5, max_lat=47.1, min_lon=6.6, max_lon=18.8)


@dataclass(frozen=True, slots=True)
class LocationQuery:
    """What the user typed, plus the country to search in.

    Attributes:
        name: Hotel name or free text, never blank
        country: Country name appended to the search queries
    """

    name: str
    country: str = "Italy"

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Location query name must not be empty")

    def with_hint(self, hint: str) -> LocationQuery:
        """Return a query narrowed by a city or region hint."""
        return LocationQuery(name=f"{self.name} {hint}", country=self.country)


@dataclass(frozen=True, slots=True)
class RawCandidate:
    """One result returned by the provider for a single query.

    Attributes:
        display_name: Full provider label ("Hotel X, Via Roma, Firenze, ...")
        kind: Parsed provider ``type``
        class_kind: Parsed provider ``class``
        tourism_kind: Parsed ``tourism`` extra tag
        address: Address components keyed by provider field name
        coordinates: Parsed coordinates, None when absent or invalid
        lat: Latitude exactly as the provider sent it
        lon: Longitude exactly as the provider sent it
        extra_tags: Provider extra tags (phone, website...)
    """

    display_name: str
    kind: PlaceKind = PlaceKind.OTHER
    class_kind: PlaceKind = PlaceKind.OTHER
    tourism_kind: PlaceKind = PlaceKind.OTHER
    address: Mapping[str, str] = field(default_factory=dict)
    coordinates: Optional[Coordinates] = None
    lat: str = ""
    lon: str = ""
    extra_tags: Mapping[str, str] = field(default_factory=dict)

    @property
    def country_code(self) -> str:
        return self.address.get("country_code", "").lower()

    def first_address(self, *keys: str) -> str:
        """Return the first non-empty address component among ``keys``."""
        for key in keys:
            value = self.address.get(key)
            if value:
                return value
        return ""

    def first_tag(self, *keys: str) -> str:
        """Return the first non-empty extra tag among ``keys``."""
        for key in keys:
            value = self.extra_tags.get(key)
            if value:
                return value
        return ""


_PAYLOAD_KEYS = {"postal_code": "postalCode"}


@dataclass(frozen=True, slots=True)
class ResolvedLocation:
    """Structured location record produced by resolution.

    String fields are never None; unknown values are empty strings.
    Latitude and longitude are either both empty or both parseable
    as floats.
    """

    name: str = ""
    address: str = ""
    city: str = ""
    region: str = ""
    postal_code: str = ""
    latitude: str = ""
    longitude: str = ""
    phone: str = ""
    website: str = ""

    @property
    def has_coordinates(self) -> bool:
        return bool(self.latitude) and bool(self.longitude)

    @property
    def is_locality_only(self) -> bool:
        """True for city-level fallback results that lack street detail."""
        return not self.address and not self.postal_code

    def merged_with(self, overrides: PartialLocation) -> ResolvedLocation:
        """Return a copy where every non-blank override replaces our value."""
        changes = overrides.provided()
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def to_payload(self) -> dict[str, str]:
        """Serialize with the camelCase keys used by the registration API."""
        return {_PAYLOAD_KEYS.get(k, k): v for k, v in asdict(self).items()}


@dataclass(frozen=True, slots=True)
class PartialLocation:
    """Caller-supplied location data, every field optional.

    Used both as retry hints (city, region) and as overrides that win
    over geocoded values.
    """

    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PartialLocation:
        """Build from a dict, accepting snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)}
        aliases = {v: k for k, v in _PAYLOAD_KEYS.items()}
        values: dict[str, Optional[str]] = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name in known and value is not None:
                values[name] = str(value)
        return cls(**values)

    def provided(self) -> dict[str, str]:
        """Fields carrying a non-blank value."""
        result: dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and value.strip():
                result[f.name] = value
        return result

    @property
    def city_hint(self) -> str:
        return (self.city or "").strip()

    @property
    def region_hint(self) -> str:
        return (self.region or "").strip()
