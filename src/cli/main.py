"""Command-line entrypoint for validating a flight search."""

from __future__ import annotations

import logging

import typer

from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

app = typer.Typer(
    name="flight-search",
    help="Validate flight search requests against the booking rules",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"flight-search version {VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Validate flight search requests against the booking rules"""


@app.command()
def validate(
    departure_date: str = typer.Option(..., "--departure", help="Departure date, dd/mm/yyyy"),
    return_date: str = typer.Option(..., "--return", help="Return date, dd/mm/yyyy"),
    departure_airport_code: str = typer.Option(..., "--from", help="Departure airport code"),
    destination_airport_code: str = typer.Option(..., "--to", help="Destination airport code"),
    seating_class: str = typer.Option("economy", "--class", help="Seating class"),
    emergency_row_seating: bool = typer.Option(
        False, "--emergency-row/--no-emergency-row", help="Request emergency row seating"
    ),
    adult_count: int = typer.Option(1, "--adults", help="Number of adults"),
    child_count: int = typer.Option(0, "--children", help="Number of children"),
    infant_count: int = typer.Option(0, "--infants", help="Number of infants"),
    timezone: str | None = typer.Option(
        None, "--timezone", help="IANA timezone used to decide today's date"
    ),
) -> None:
    """Validate one search and print the accepted snapshot or the rejecting rule."""
    overrides = {"search_timezone": timezone} if timezone is not None else {}
    try:
        settings = load_settings(**overrides)
    except RuntimeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    configure_logging(settings.log_level)
    validator = create_app(settings).validator

    result = validator.check(
        departure_date,
        return_date,
        emergency_row_seating,
        departure_airport_code,
        destination_airport_code,
        seating_class,
        adult_count,
        child_count,
        infant_count,
    )

    if result.state is None:
        logger.info("rejected rule=%s", result.failed_rule)
        typer.echo(f"rejected {result.failed_rule}: {result.reason}")
        raise typer.Exit(code=1)

    logger.info(
        "accepted route=%s-%s class=%s",
        result.state.departure_airport_code,
        result.state.destination_airport_code,
        result.state.seating_class,
    )
    typer.echo("accepted")
    typer.echo(result.state.model_dump_json())


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
