import math

import pytest

from hotel_locator.domain.models import BoundingBox
from hotel_locator.validation import is_valid_italian_location, is_within, parse_coordinate


@pytest.mark.parametrize(
    "lat, lon, expected",
    [
        ("47.1", "18.8", True),
        ("35.5", "6.6", True),
        ("43.77", "11.25", True),
        ("47.2", "18.8", False),
        ("35.4", "10", False),
        ("45", "6.5", False),
        ("45", "18.9", False),
        ("abc", "10", False),
        ("45", "", False),
        ("", "", False),
        ("nan", "nan", False),
    ],
)
def test_is_valid_italian_location(lat, lon, expected):
    assert is_valid_italian_location(lat, lon) is expected


def test_parse_coordinate():
    assert parse_coordinate(" 43.5 ") == 43.5
    assert math.isnan(parse_coordinate("abc"))
    assert math.isnan(parse_coordinate(None))


def test_is_within_custom_bounds():
    box = BoundingBox(min_lat=0, max_lat=1, min_lon=0, max_lon=1)
    assert is_within(box, "0.5", "0.5")
    assert not is_within(box, "1.5", "0.5")
