"""Time entry viewing and editing commands."""

from datetime import datetime, time

import click
from worklog.cli.category_resolution import resolve_category_or_exit
from worklog.cli.date_filters import resolve_cli_date_range
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.aggregation import END_OF_DAY, category_label, effective_timestamp
from worklog.domain.category import CategoryService
from worklog.domain.time_entry import TimeEntryService
from worklog.utils.date_parser import parse_datetime
from worklog.utils.duration_parser import format_duration_hms, parse_duration


@click.group()
def entry_group():
    """View, edit and delete time entries."""
    pass


@entry_group.command("list")
@click.option("--start-date", help="Only entries created on or after this date")
@click.option("--end-date", help="Only entries created on or before this date")
@click.option("--category", help="Category name or ID")
@click.option("--verbose", "-v", is_flag=True, help="Show start and creation timestamps")
@click.pass_context
def list_entries(ctx, start_date: str, end_date: str, category: str, verbose: bool):
    """List time entries, newest first."""
    db = ctx.obj["db"]
    tz = ctx.obj["tz"]
    service = TimeEntryService(db)
    category_service = CategoryService(db)

    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, today=datetime.now(tz).date()
    )
    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, category_service, category)

    entries = service.list_entries(
        created_from=datetime.combine(start, time.min, tzinfo=tz) if start else None,
        created_to=datetime.combine(end, END_OF_DAY, tzinfo=tz) if end else None,
        category_id=category_id,
    )

    if not entries:
        click.echo("No time entries found.")
        return

    names = category_service.category_names()
    click.echo(f"\nFound {len(entries)} time entr{'ies' if len(entries) != 1 else 'y'}:")
    click.echo("-" * 80)
    click.echo(f"{'ID':<6} {'Date':<17} {'Category':<20} {'Duration':>10}  Memo")
    click.echo("-" * 80)
    for item in entries:
        when = effective_timestamp(item, tz).strftime("%Y-%m-%d %H:%M")
        name = category_label(item.category_id, names)
        click.echo(
            f"{item.id:<6} {when:<17} {name[:20]:<20} "
            f"{format_duration_hms(item.duration):>10}  {item.memo or ''}"
        )
        if verbose:
            started = item.started_at.astimezone(tz).isoformat() if item.started_at else "-"
            click.echo(f"{'':<6} started: {started}  created: {item.created_at.astimezone(tz).isoformat()}")


@entry_group.command("edit")
@click.argument("entry_id", type=int)
@click.option("--duration", help="New duration (e.g. 1:30, 1h30m, 45m)")
@click.option("--category", help="New category name or ID")
@click.option("--uncategorize", is_flag=True, help="Remove the category")
@click.option("--memo", help="New memo")
@click.option("--clear-memo", is_flag=True, help="Remove the memo")
@click.option("--started-at", help="New start time (e.g. '2024-01-15 09:30')")
@click.pass_context
def edit_entry(
    ctx,
    entry_id: int,
    duration: str | None,
    category: str | None,
    uncategorize: bool,
    memo: str | None,
    clear_memo: bool,
    started_at: str | None,
):
    """Edit a time entry."""
    db = ctx.obj["db"]
    tz = ctx.obj["tz"]
    service = TimeEntryService(db)

    if category and uncategorize:
        click.echo("Error: --category cannot be combined with --uncategorize.", err=True)
        ctx.exit(1)
    if memo is not None and clear_memo:
        click.echo("Error: --memo cannot be combined with --clear-memo.", err=True)
        ctx.exit(1)

    seconds = None
    if duration is not None:
        try:
            seconds = parse_duration(duration)
        except ValueError as e:
            click.echo(f"Error: Invalid duration: {e}", err=True)
            ctx.exit(1)

    start = None
    if started_at is not None:
        try:
            start = parse_datetime(started_at, tz)
        except ValueError as e:
            click.echo(f"Error: Invalid start time: {e}", err=True)
            ctx.exit(1)

    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, CategoryService(db), category)

    try:
        service.update_entry(
            entry_id,
            duration=seconds,
            category_id=category_id,
            memo=memo,
            started_at=start,
            clear_category=uncategorize,
            clear_memo=clear_memo,
        )
        click.echo(f"Updated time entry {entry_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@entry_group.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: int, yes: bool):
    """Delete a time entry."""
    db = ctx.obj["db"]
    service = TimeEntryService(db)

    item = service.get_entry(entry_id)
    if item is None:
        click.echo(f"Error: Time entry {entry_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Are you sure you want to delete time entry {entry_id} ({format_duration_hms(item.duration)})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_entry(entry_id)
        click.echo(f"Deleted time entry {entry_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register time entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
