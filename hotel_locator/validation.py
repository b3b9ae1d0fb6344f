"""Geographic plausibility checks for resolved coordinates."""

from __future__ import annotations

import math

from .domain.models import ITALY_BOUNDS, BoundingBox


def parse_coordinate(value: object) -> float:
    """Parse a coordinate string; anything unparseable becomes NaN."""
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return math.nan


def is_within(bounds: BoundingBox, latitude: str, longitude: str) -> bool:
    return bounds.contains(parse_coordinate(latitude), parse_coordinate(longitude))


def is_valid_italian_location(latitude: str, longitude: str) -> bool:
    """True iff the coordinates fall inside Italy's bounding box.

    Non-numeric input parses to NaN and is rejected.
    """
    return is_within(ITALY_BOUNDS, latitude, longitude)
