"""CLI helpers for period and date range resolution."""

from datetime import date

import click

from worklog.domain.entities import PeriodKind
from worklog.utils.date_parser import parse_date

PERIOD_FLAG_ERROR = (
    "Error: Only one period option (--daily, --weekly, --monthly) can be specified at a time."
)


def resolve_cli_period(
    ctx,
    *,
    period_flags: dict[str, bool],
    default: PeriodKind = PeriodKind.WEEKLY,
) -> PeriodKind:
    """Resolve the reporting period kind from mutually exclusive flags."""
    selected = [period for period, is_set in period_flags.items() if is_set]

    if len(selected) > 1:
        click.echo(PERIOD_FLAG_ERROR, err=True)
        ctx.exit(1)

    if not selected:
        return default
    return PeriodKind(selected[0])


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    today: date | None = None,
) -> tuple[date | None, date | None]:
    """Parse optional explicit start and end dates.

    Relative dates such as "today" resolve against `today` when given.
    """
    start = None
    end = None

    if start_date:
        try:
            start = parse_date(start_date, today=today)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date, today=today)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is not None and end is not None and start > end:
        click.echo("Error: --start-date must not be after --end-date.", err=True)
        ctx.exit(1)

    return start, end
