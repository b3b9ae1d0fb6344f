"""Tests for the query ladder."""

from hotel_locator.domain.errors import GeocodingError
from hotel_locator.services.candidate_search import CandidateSearch, build_query_ladder
from hotel_locator.services.candidate_selection import CandidateSelector


def test_query_ladder_order():
    assert build_query_ladder("Villa Toscana", "Italy") == (
        "Villa Toscana hotel Italy",
        "Villa Toscana Italy",
        "hotel Villa Toscana Italy",
        "Villa Toscana",
    )


def test_query_ladder_strips_whitespace():
    ladder = build_query_ladder("  Hotel Roma  ", " Italy ")
    assert ladder[0] == "Hotel Roma hotel Italy"
    assert ladder[-1] == "Hotel Roma"


def test_search_stops_at_first_non_empty_query(fake_geocoder_cls, make_candidate):
    found = [make_candidate("Somewhere, Italia")]
    geocoder = fake_geocoder_cls({"Albergo Sole Italy": found})

    result = CandidateSearch(geocoder).search("Albergo Sole", "Italy")

    assert result == found
    assert geocoder.search_calls == ["Albergo Sole hotel Italy", "Albergo Sole Italy"]


def test_search_does_not_merge_results(fake_geocoder_cls, make_candidate):
    first = [make_candidate("A, Italia")]
    later = [make_candidate("B, Italia")]
    geocoder = fake_geocoder_cls(
        {"Sole hotel Italy": first, "Sole Italy": later}
    )

    assert CandidateSearch(geocoder).search("Sole", "Italy") == first


def test_search_returns_empty_after_four_failed_queries(fake_geocoder_cls):
    geocoder = fake_geocoder_cls()

    assert CandidateSearch(geocoder).search("Nowhere", "Italy") == []
    assert len(geocoder.search_calls) == 4


def test_search_requests_configured_limit(fake_geocoder_cls):
    geocoder = fake_geocoder_cls()
    CandidateSearch(geocoder, limit=10).search("Nowhere", "Italy")
    assert geocoder.search_limits == [10, 10, 10, 10]


def test_transport_failure_advances_ladder(fake_geocoder_cls, make_candidate):
    found = [make_candidate("Hotel Sole, Roma, Italia")]
    geocoder = fake_geocoder_cls(
        {
            "Sole hotel Italy": GeocodingError("Geocoding provider unavailable"),
            "Sole Italy": GeocodingError("Geocoding quota exceeded", is_rate_limited=True),
            "hotel Sole Italy": found,
        }
    )

    assert CandidateSearch(geocoder).search("Sole", "Italy") == found
    assert len(geocoder.search_calls) == 3


def test_attempt_swallows_geocoding_error(fake_geocoder_cls):
    geocoder = fake_geocoder_cls({"boom": GeocodingError("bad json")})
    assert CandidateSearch(geocoder).attempt("boom") == []


def test_search_and_select_short_circuits(fake_geocoder_cls, make_candidate):
    hotel = make_candidate("Hotel Bellavista, Firenze, Italia", type="hotel", cls="tourism")
    geocoder = fake_geocoder_cls({"Bellavista hotel Italy": [hotel]})

    hit = CandidateSearch(geocoder).search_and_select(
        "Bellavista", "Italy", CandidateSelector().select
    )

    assert hit == ("Bellavista hotel Italy", hotel)
    assert geocoder.search_calls == ["Bellavista hotel Italy"]


def test_rejected_result_set_moves_to_next_query(fake_geocoder_cls, make_candidate):
    foreign = make_candidate("Bellavista, Nice, France", address={"country_code": "fr"})
    local = make_candidate("Bellavista, Lucca, Toscana", address={"country_code": "it"})
    geocoder = fake_geocoder_cls(
        {"Bellavista hotel Italy": [foreign], "Bellavista Italy": [local]}
    )

    hit = CandidateSearch(geocoder).search_and_select(
        "Bellavista", "Italy", CandidateSelector().select
    )

    assert hit == ("Bellavista Italy", local)
    assert len(geocoder.search_calls) == 2


def test_search_and_select_none_when_ladder_exhausted(fake_geocoder_cls, make_candidate):
    foreign = make_candidate("Bellavista, Nice, France", address={"country_code": "fr"})
    geocoder = fake_geocoder_cls({q: [foreign] for q in build_query_ladder("Bellavista", "Italy")})

    hit = CandidateSearch(geocoder).search_and_select(
        "Bellavista", "Italy", CandidateSelector().select
    )

    assert hit is None
    assert len(geocoder.search_calls) == 4
