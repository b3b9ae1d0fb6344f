"""Shared fixtures: an in-memory geocoder and candidate builders."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

import pytest

from hotel_locator.adapters.geocoding import parse_candidate
from hotel_locator.config import reset_config
from hotel_locator.container import reset_container
from hotel_locator.domain.models import Coordinates, RawCandidate

Response = Union[Sequence[RawCandidate], Exception]


class FakeGeocoder:
    """GeocoderPort double that records every call.

    ``responses`` maps a query string to the candidates to return, or to
    an exception to raise. Unknown queries return no results.
    """

    def __init__(
        self,
        responses: Optional[Dict[str, Response]] = None,
        reverse_result: Union[RawCandidate, Exception, None] = None,
    ) -> None:
        self.responses = dict(responses or {})
        self.reverse_result = reverse_result
        self.search_calls: List[str] = []
        self.search_limits: List[int] = []
        self.reverse_calls: List[Coordinates] = []

    def search(
        self, query: str, limit: int, *, extra_tags: bool = True
    ) -> List[RawCandidate]:
        self.search_calls.append(query)
        self.search_limits.append(limit)
        response = self.responses.get(query, [])
        if isinstance(response, Exception):
            raise response
        return list(response)

    def reverse(self, coordinates: Coordinates) -> Optional[RawCandidate]:
        self.reverse_calls.append(coordinates)
        if isinstance(self.reverse_result, Exception):
            raise self.reverse_result
        return self.reverse_result


class StaticKeywords:
    def __init__(self, cities: Sequence[str]) -> None:
        self.cities = tuple(cities)

    def keywords(self) -> Sequence[str]:
        return self.cities


def raw_result(
    display_name: str,
    *,
    type: str = "yes",
    cls: str = "building",
    lat: str = "43.77",
    lon: str = "11.25",
    address: Optional[Dict[str, str]] = None,
    extratags: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """A Nominatim ``format=json`` result object."""
    return {
        "place_id": 1234,
        "display_name": display_name,
        "type": type,
        "class": cls,
        "lat": lat,
        "lon": lon,
        "address": address or {},
        "extratags": extratags,
    }


@pytest.fixture
def make_candidate():
    def _make(display_name: str, **kwargs: Any) -> RawCandidate:
        return parse_candidate(raw_result(display_name, **kwargs))

    return _make


@pytest.fixture
def fake_geocoder_cls():
    return FakeGeocoder


@pytest.fixture
def static_keywords():
    return StaticKeywords(["Roma", "Firenze", "Reggio Emilia", "Assisi"])


@pytest.fixture
def make_raw():
    return raw_result


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Never let a developer's HL_* environment leak into tests."""
    for var in ("HL_GEO_PROVIDER", "HL_GEO_API_KEY", "HL_GEO_USER_AGENT"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
