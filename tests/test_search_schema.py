"""Tests for search request normalization and the held state model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.search.normalize import normalize_code
from src.search.schema import AirportCode, SearchRequest, SearchState, SeatingClass


def _request(**overrides: object) -> SearchRequest:
    fields: dict[str, object] = {
        "departure_date": "10/03/2027",
        "return_date": "17/03/2027",
        "emergency_row_seating": False,
        "departure_airport_code": "pvg",
        "destination_airport_code": "mel",
        "seating_class": "economy",
        "adult_count": 1,
        "child_count": 0,
        "infant_count": 0,
    }
    fields.update(overrides)
    return SearchRequest(**fields)


def test_normalize_code() -> None:
    assert normalize_code("  PVG ") == "pvg"
    assert normalize_code(" Premium Economy ") == "premium economy"
    assert normalize_code("premium  economy") == "premium  economy"
    assert normalize_code(None) == ""


def test_request_treats_none_strings_as_empty() -> None:
    request = _request(departure_date=None, seating_class=None, departure_airport_code=None)
    assert request.departure_date == ""
    assert request.seating_class == ""
    assert request.departure_airport_code == ""


def test_request_trims_and_lowercases_codes() -> None:
    request = _request(
        departure_date=" 10/03/2027 ",
        departure_airport_code=" SYD",
        destination_airport_code="Lax ",
        seating_class=" Business ",
    )
    assert request.departure_date == "10/03/2027"
    assert request.departure_airport_code == "syd"
    assert request.destination_airport_code == "lax"
    assert request.seating_class == "business"


def test_request_forbids_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        _request(currency="AUD")


def test_state_is_immutable() -> None:
    state = SearchState(
        departure_date="10/03/2027",
        return_date="17/03/2027",
        emergency_row_seating=False,
        departure_airport_code=AirportCode.pvg,
        destination_airport_code=AirportCode.mel,
        seating_class=SeatingClass.economy,
        adult_count=1,
        child_count=0,
        infant_count=0,
    )
    with pytest.raises(ValidationError):
        state.adult_count = 2  # type: ignore[misc]


def test_enum_values_match_wire_vocabulary() -> None:
    assert SeatingClass.premium_economy == "premium economy"
    assert AirportCode.delhi == "del"
    assert {code.value for code in AirportCode} == {"syd", "mel", "lax", "cdg", "del", "pvg", "doh"}
