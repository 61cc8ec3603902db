"""Search request/state schema (Pydantic models).

`SearchRequest` is the raw, per-call input after trimming. `SearchState` is the normalized snapshot
of an accepted request and is the only shape the validator ever holds.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.search.normalize import normalize_code


class SeatingClass(StrEnum):
    """Supported seating classes."""

    economy = "economy"
    premium_economy = "premium economy"
    business = "business"
    first = "first"


class AirportCode(StrEnum):
    """Airports a search may depart from or arrive at."""

    syd = "syd"
    mel = "mel"
    lax = "lax"
    cdg = "cdg"
    delhi = "del"
    pvg = "pvg"
    doh = "doh"


MAX_PASSENGERS = 9
MAX_CHILDREN_PER_ADULT = 2
MAX_INFANTS_PER_ADULT = 1


class SearchRequest(BaseModel):
    """Raw search input as supplied by a caller.

    Missing strings are accepted as empty strings; whitespace is trimmed and codes are lower-cased,
    but nothing here checks membership or dates. That is the job of the rules.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    departure_date: str
    return_date: str
    emergency_row_seating: bool = False
    departure_airport_code: str
    destination_airport_code: str
    seating_class: str
    adult_count: int = 0
    child_count: int = 0
    infant_count: int = 0

    @field_validator(
        "departure_date",
        "return_date",
        "departure_airport_code",
        "destination_airport_code",
        "seating_class",
        mode="before",
    )
    @classmethod
    def none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("departure_airport_code", "destination_airport_code", "seating_class")
    @classmethod
    def normalize_codes(cls, value: str) -> str:
        return normalize_code(value)


class SearchState(BaseModel):
    """The last accepted search, normalized.

    Dates are kept in canonical `dd/mm/yyyy` form. Instances are immutable, so replacing the held
    reference is the whole commit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    departure_date: str
    return_date: str
    emergency_row_seating: bool
    departure_airport_code: AirportCode
    destination_airport_code: AirportCode
    seating_class: SeatingClass
    adult_count: int = Field(ge=0, le=MAX_PASSENGERS)
    child_count: int = Field(ge=0, le=MAX_PASSENGERS)
    infant_count: int = Field(ge=0, le=MAX_PASSENGERS)
