"""Business rules for flight search requests.

Rules are evaluated in a fixed order and the first failing rule is reported. The order only decides
which rule is blamed; the accept/reject outcome does not depend on it.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from src.search.dates import InvalidDateError, format_dmy, parse_strict_dmy
from src.search.schema import (
    MAX_CHILDREN_PER_ADULT,
    MAX_INFANTS_PER_ADULT,
    MAX_PASSENGERS,
    AirportCode,
    SearchRequest,
    SearchState,
    SeatingClass,
)


class RuleId(StrEnum):
    """Identifiers of the search business rules."""

    C1 = "C1"
    C2 = "C2"
    C3 = "C3"
    C4 = "C4"
    C5 = "C5"
    C6 = "C6"
    C7 = "C7"
    C8 = "C8"
    C9 = "C9"
    C10 = "C10"
    C11 = "C11"


RULE_DESCRIPTIONS: dict[RuleId, str] = {
    RuleId.C1: "total passengers must be between 1 and 9",
    RuleId.C2: "children cannot sit in emergency rows or first class",
    RuleId.C3: "infants cannot sit in emergency rows or business class",
    RuleId.C4: "each adult may accompany at most two children",
    RuleId.C5: "each adult may accompany at most one infant",
    RuleId.C6: "departure date cannot be in the past",
    RuleId.C7: "dates must be real calendar dates in dd/mm/yyyy form",
    RuleId.C8: "return date cannot be before departure date",
    RuleId.C9: "unknown seating class",
    RuleId.C10: "emergency row seating is only available in economy",
    RuleId.C11: "airports must be known and different",
}


class RuleViolation(ValueError):
    """Raised when a request breaks one of the business rules."""

    def __init__(self, rule: RuleId) -> None:
        super().__init__(f"{rule}: {RULE_DESCRIPTIONS[rule]}")
        self.rule = rule


def describe_rule(rule: RuleId) -> str:
    """Human-readable description of a rule."""

    return RULE_DESCRIPTIONS[rule]


def passenger_total_ok(adults: int, children: int, infants: int) -> bool:
    if min(adults, children, infants) < 0:
        return False
    return 1 <= adults + children + infants <= MAX_PASSENGERS


def children_ratio_ok(adults: int, children: int) -> bool:
    if children <= 0:
        return True
    return adults >= 1 and children <= MAX_CHILDREN_PER_ADULT * adults


def infants_ratio_ok(adults: int, infants: int) -> bool:
    if infants <= 0:
        return True
    return adults >= 1 and infants <= MAX_INFANTS_PER_ADULT * adults


def _parse_seating_class(value: str) -> SeatingClass:
    try:
        return SeatingClass(value)
    except ValueError as exc:
        raise RuleViolation(RuleId.C9) from exc


def _parse_airports(departure: str, destination: str) -> tuple[AirportCode, AirportCode]:
    try:
        dep = AirportCode(departure)
        dest = AirportCode(destination)
    except ValueError as exc:
        raise RuleViolation(RuleId.C11) from exc
    if dep == dest:
        raise RuleViolation(RuleId.C11)
    return dep, dest


def _parse_dates(departure: str, return_: str) -> tuple[date, date]:
    try:
        return parse_strict_dmy(departure), parse_strict_dmy(return_)
    except InvalidDateError as exc:
        raise RuleViolation(RuleId.C7) from exc


def resolve_request(request: SearchRequest, *, today: date) -> SearchState:
    """Check every rule and build the normalized snapshot of an acceptable request.

    Raises:
        RuleViolation: On the first failing rule, checked in the order
            C9, C10, C11, C7, C6, C8, C1, C4, C5, C2, C3.
    """

    seating_class = _parse_seating_class(request.seating_class)
    emergency = request.emergency_row_seating

    if emergency and seating_class != SeatingClass.economy:
        raise RuleViolation(RuleId.C10)

    departure_airport, destination_airport = _parse_airports(
        request.departure_airport_code, request.destination_airport_code
    )

    departure, return_ = _parse_dates(request.departure_date, request.return_date)
    if departure < today:
        raise RuleViolation(RuleId.C6)
    if return_ < departure:
        raise RuleViolation(RuleId.C8)

    adults, children, infants = request.adult_count, request.child_count, request.infant_count
    if not passenger_total_ok(adults, children, infants):
        raise RuleViolation(RuleId.C1)
    if not children_ratio_ok(adults, children):
        raise RuleViolation(RuleId.C4)
    if not infants_ratio_ok(adults, infants):
        raise RuleViolation(RuleId.C5)

    if children > 0 and (emergency or seating_class == SeatingClass.first):
        raise RuleViolation(RuleId.C2)
    if infants > 0 and (emergency or seating_class == SeatingClass.business):
        raise RuleViolation(RuleId.C3)

    return SearchState(
        departure_date=format_dmy(departure),
        return_date=format_dmy(return_),
        emergency_row_seating=emergency,
        departure_airport_code=departure_airport,
        destination_airport_code=destination_airport,
        seating_class=seating_class,
        adult_count=adults,
        child_count=children,
        infant_count=infants,
    )
