"""Building ResolvedLocation records from provider candidates."""

from __future__ import annotations

from dataclasses import replace

from ..domain.models import RawCandidate, ResolvedLocation

CITY_KEYS = ("city", "town", "village", "municipality")
REGION_KEYS = ("state", "region", "province")
STREET_KEYS = ("road", "street")


def _street_address(candidate: RawCandidate) -> str:
    parts = [
        candidate.address.get("house_number", ""),
        candidate.first_address(*STREET_KEYS),
    ]
    street = " ".join(part for part in parts if part)
    if street:
        return street

    segments = candidate.display_name.split(",")
    if len(segments) > 1:
        return segments[1].strip()
    return ""


def build_location(name: str, candidate: RawCandidate) -> ResolvedLocation:
    """Build the record for an accepted candidate.

    ``name`` is what the user typed; the provider's display name never
    replaces it.
    """
    return ResolvedLocation(
        name=name,
        address=_street_address(candidate),
        city=candidate.first_address(*CITY_KEYS),
        region=candidate.first_address(*REGION_KEYS),
        postal_code=candidate.address.get("postcode", ""),
        latitude=candidate.lat,
        longitude=candidate.lon,
        phone=candidate.first_tag("phone", "contact:phone"),
        website=candidate.first_tag("website", "contact:website"),
    )


def needs_backfill(location: ResolvedLocation) -> bool:
    return not location.city or not location.region


def backfill(location: ResolvedLocation, reverse: RawCandidate) -> ResolvedLocation:
    """Fill empty city, region and postal code from a reverse lookup.

    Populated fields are left untouched.
    """
    return replace(
        location,
        city=location.city or reverse.first_address(*CITY_KEYS),
        region=location.region or reverse.first_address(*REGION_KEYS),
        postal_code=location.postal_code or reverse.address.get("postcode", ""),
    )


def locality_location(
    name: str, city: str, candidate: RawCandidate
) -> ResolvedLocation:
    """Locality-only record for the city fallback.

    Street address and postal code stay empty: the user has to supply them.
    """
    return ResolvedLocation(
        name=name,
        city=city,
        region=candidate.first_address(*REGION_KEYS),
        latitude=candidate.lat,
        longitude=candidate.lon,
    )
