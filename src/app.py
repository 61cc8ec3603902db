"""Application composition root.

This module wires configuration into a ready-to-use request validator.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings
from src.search.dates import today_in
from src.search.validator import RequestValidator


@dataclass(frozen=True)
class App:
    """Shared application dependencies for entrypoints."""

    settings: Settings
    validator: RequestValidator


def create_app(settings: Settings) -> App:
    """Create the application container.

    The validator's notion of "today" follows `settings.search_timezone`.
    """

    validator = RequestValidator(clock=today_in(settings.search_timezone))
    return App(settings=settings, validator=validator)
