"""CLI for weekdate.

Converts week numbers to dates and dates to week labels from the shell.
Vector arguments are comma-separated; NA marks a missing element.
"""

from datetime import date
from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from weekdate.core.logger import setup_logger
from weekdate.utils.calendar import end_of_week, start_of_week
from weekdate.weeks.convert import get_date
from weekdate.weeks.errors import WeekDateError
from weekdate.weeks.labels import date_to_week
from weekdate.weeks.week_start import get_week_start
from weekdate.weeks.weekdays import weekday_name

# Initialize Rich console for output
console = Console()

app = typer.Typer(
    name="weekdate",
    help="Convert between week numbers and calendar dates",
    add_completion=False,
)

MISSING_TOKENS = {"", "na", "nan", "none", "null"}


def _parse_vector(raw: str | None) -> list[str | None] | None:
    """Split a comma-separated CLI value, mapping NA tokens to None."""
    if raw is None:
        return None
    return [None if item.strip().lower() in MISSING_TOKENS else item.strip() for item in raw.split(",")]


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code=1) from error


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Convert between week numbers and calendar dates."""
    setup_logger(level="DEBUG" if debug else None)


@app.command("date")
def date_command(
    week: str = typer.Argument("1", help="Week number(s), e.g. 53 or 10,11,NA"),
    year: str | None = typer.Option(None, "--year", "-y", help="Year(s), defaults to the current year"),
    day: str = typer.Option("1", "--day", "-d", help="Day(s) within the week, 1 = the week start"),
    start: str | None = typer.Option(None, "--start", "-s", help="Week start name(s) or index(es)"),
) -> None:
    """Print the date of each week, one per line."""
    try:
        dates = get_date(
            week=_parse_vector(week),
            year=_parse_vector(year),
            day=_parse_vector(day),
            start=_parse_vector(start),
        )
    except WeekDateError as e:
        _fail(e)
    for value in dates:
        console.print(value.isoformat() if value else "NA")


@app.command("week")
def week_command(
    dates: list[str] = typer.Argument(..., help="ISO date(s), e.g. 2019-03-10"),
    week_start: str | None = typer.Option(None, "--week-start", "-w", help="Week start name or index"),
) -> None:
    """Print the week label of each date with the span of its week."""
    try:
        parsed = [date.fromisoformat(raw) for raw in dates]
    except ValueError as e:
        _fail(e)
    try:
        labels = date_to_week(parsed, week_start=week_start)
    except WeekDateError as e:
        _fail(e)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Date")
    table.add_column("Week")
    table.add_column("From")
    table.add_column("To")
    for value, label in zip(parsed, labels, strict=True):
        table.add_row(
            value.isoformat(),
            str(label),
            start_of_week(value, label.week_start).isoformat(),
            end_of_week(value, label.week_start).isoformat(),
        )
    console.print(table)
    logger.debug(f"Labelled {len(parsed)} date(s)")


@app.command("week-start")
def week_start_command() -> None:
    """Print the configured default week start."""
    week_start = get_week_start()
    console.print(f"{week_start} ({weekday_name(week_start)})")


if __name__ == "__main__":
    app()
