"""Add time entry command."""

from datetime import datetime

import click
from worklog.cli.category_resolution import resolve_category_or_exit
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.category import CategoryService
from worklog.domain.time_entry import TimeEntryService
from worklog.utils.date_parser import parse_date
from worklog.utils.duration_parser import format_duration_hms, parse_duration


@click.command("add")
@click.option("--category", required=True, help="Category name or ID")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Work date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--hours", type=int, default=0, help="Hours worked")
@click.option("--minutes", type=int, default=0, help="Minutes worked")
@click.option("--duration", help="Duration instead of --hours/--minutes (e.g. 1:30, 1h30m, 45m)")
@click.option("--memo", help="Memo")
@click.pass_context
def add_entry(
    ctx,
    category: str,
    date_str: str,
    hours: int,
    minutes: int,
    duration: str | None,
    memo: str | None,
):
    """Add a time entry manually.

    Manual entries are recorded as starting at 09:00 on the given date.

    Examples:
        worklog add --category Development --hours 2 --minutes 30
        worklog add --category 1 --date yesterday --duration 1:45 --memo "Code review"
    """
    db = ctx.obj["db"]
    tz = ctx.obj["tz"]
    entry_service = TimeEntryService(db)
    category_service = CategoryService(db)

    category_id = resolve_category_or_exit(ctx, category_service, category)

    try:
        entry_date = parse_date(date_str, today=datetime.now(tz).date())
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)

    seconds = 0
    if duration is not None:
        if hours or minutes:
            click.echo("Error: --duration cannot be combined with --hours or --minutes.", err=True)
            ctx.exit(1)
        try:
            total = parse_duration(duration)
        except ValueError as e:
            click.echo(f"Error: Invalid duration: {e}", err=True)
            ctx.exit(1)
        hours, remainder = divmod(total, 3600)
        minutes, seconds = divmod(remainder, 60)

    try:
        entry_id = entry_service.create_manual_entry(
            entry_date=entry_date,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            category_id=category_id,
            memo=memo,
            tz=tz,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    created = entry_service.get_entry(entry_id)
    click.echo(
        f"Created time entry {entry_id}: {format_duration_hms(created.duration)} "
        f"on {entry_date.isoformat()}"
    )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
