"""Search request validation and the held search state.

`evaluate_search` is the pure entry point: it returns either the accepted snapshot or the rule that
rejected the request. `RequestValidator` wraps it and keeps the last accepted snapshot.

`RequestValidator` is not synchronized. Use one instance per caller, or guard calls with a lock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.search.dates import Clock, local_today
from src.search.rules import RuleId, RuleViolation, describe_rule, resolve_request
from src.search.schema import AirportCode, SearchRequest, SearchState, SeatingClass


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one request: an accepted snapshot or the failing rule."""

    state: SearchState | None = None
    failed_rule: RuleId | None = None

    @property
    def accepted(self) -> bool:
        return self.state is not None

    @property
    def reason(self) -> str | None:
        if self.failed_rule is None:
            return None
        return describe_rule(self.failed_rule)


def evaluate_search(request: SearchRequest, *, today: date) -> ValidationResult:
    """Validate a request against every business rule.

    Never raises for invalid input; a rejection is reported through `failed_rule`.
    """

    try:
        state = resolve_request(request, today=today)
    except RuleViolation as exc:
        return ValidationResult(failed_rule=exc.rule)
    return ValidationResult(state=state)


class RequestValidator:
    """Validates search requests and holds the last accepted one."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or local_today
        self._state: SearchState | None = None
        self.last_result: ValidationResult | None = None

    def check(
            self,
            departure_date: str | None,
            return_date: str | None,
            emergency_row_seating: bool,
            departure_airport_code: str | None,
            destination_airport_code: str | None,
            seating_class: str | None,
            adult_count: int,
            child_count: int,
            infant_count: int,
    ) -> ValidationResult:
        """Validate a request and commit it on acceptance, returning the detailed outcome."""

        request = SearchRequest(
            departure_date=departure_date,
            return_date=return_date,
            emergency_row_seating=emergency_row_seating,
            departure_airport_code=departure_airport_code,
            destination_airport_code=destination_airport_code,
            seating_class=seating_class,
            adult_count=adult_count,
            child_count=child_count,
            infant_count=infant_count,
        )
        result = evaluate_search(request, today=self._clock())
        if result.state is not None:
            self._state = result.state
        self.last_result = result
        return result

    def validate(
            self,
            departure_date: str | None,
            return_date: str | None,
            emergency_row_seating: bool,
            departure_airport_code: str | None,
            destination_airport_code: str | None,
            seating_class: str | None,
            adult_count: int,
            child_count: int,
            infant_count: int,
    ) -> bool:
        """Validate a request; on success it becomes the held state.

        Returns:
            `True` if every rule passed, otherwise `False` (held state is left untouched).
        """

        return self.check(
            departure_date,
            return_date,
            emergency_row_seating,
            departure_airport_code,
            destination_airport_code,
            seating_class,
            adult_count,
            child_count,
            infant_count,
        ).accepted

    run_flight_search = validate

    @property
    def state(self) -> SearchState | None:
        return self._state

    @property
    def departure_date(self) -> str | None:
        return self._state.departure_date if self._state else None

    @property
    def return_date(self) -> str | None:
        return self._state.return_date if self._state else None

    @property
    def departure_airport_code(self) -> AirportCode | None:
        return self._state.departure_airport_code if self._state else None

    @property
    def destination_airport_code(self) -> AirportCode | None:
        return self._state.destination_airport_code if self._state else None

    @property
    def emergency_row_seating(self) -> bool | None:
        return self._state.emergency_row_seating if self._state else None

    @property
    def seating_class(self) -> SeatingClass | None:
        return self._state.seating_class if self._state else None

    @property
    def adult_count(self) -> int | None:
        return self._state.adult_count if self._state else None

    @property
    def child_count(self) -> int | None:
        return self._state.child_count if self._state else None

    @property
    def infant_count(self) -> int | None:
        return self._state.infant_count if self._state else None
