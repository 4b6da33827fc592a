"""Timer commands."""

from datetime import datetime

import click
from worklog.cli.category_resolution import resolve_category_or_exit
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.category import CategoryService
from worklog.domain.entities import TimerStatus
from worklog.domain.timer import TimerService, elapsed_seconds
from worklog.utils.duration_parser import format_duration_hms


def _now(ctx) -> datetime:
    return datetime.now(ctx.obj["tz"])


@click.group()
def timer_group():
    """Time work with a start/pause/resume timer."""
    pass


@timer_group.command("start")
@click.option("--category", required=True, help="Category name or ID")
@click.option("--memo", help="Memo for the entry")
@click.pass_context
def start_timer(ctx, category: str, memo: str | None):
    """Start the timer."""
    db = ctx.obj["db"]
    service = TimerService(db)
    category_id = resolve_category_or_exit(ctx, CategoryService(db), category)

    try:
        state = service.start(category_id, _now(ctx), memo=memo)
        click.echo(f"Timer started at {state.started_at.astimezone(ctx.obj['tz']).strftime('%H:%M:%S')}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@timer_group.command("pause")
@click.pass_context
def pause_timer(ctx):
    """Pause the running timer."""
    service = TimerService(ctx.obj["db"])
    try:
        state = service.pause(_now(ctx))
        click.echo(f"Timer paused at {format_duration_hms(state.accumulated_seconds)}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@timer_group.command("resume")
@click.pass_context
def resume_timer(ctx):
    """Resume a paused timer."""
    service = TimerService(ctx.obj["db"])
    try:
        state = service.resume(_now(ctx))
        click.echo(f"Timer resumed at {format_duration_hms(state.accumulated_seconds)}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@timer_group.command("status")
@click.pass_context
def timer_status(ctx):
    """Show the timer state and elapsed time."""
    db = ctx.obj["db"]
    state = TimerService(db).get_state()
    if state.status == TimerStatus.IDLE:
        click.echo("Timer is idle.")
        return

    category_obj = db.get_category(state.category_id) if state.category_id is not None else None
    click.echo(f"Timer is {state.status.value}: {format_duration_hms(elapsed_seconds(state, _now(ctx)))}")
    click.echo(f"  Category: {category_obj.name if category_obj else 'Uncategorized'}")
    if state.memo:
        click.echo(f"  Memo: {state.memo}")


@timer_group.command("save")
@click.option("--memo", help="Memo replacing the one given at start")
@click.pass_context
def save_timer(ctx, memo: str | None):
    """Stop the timer and save the elapsed time as an entry."""
    service = TimerService(ctx.obj["db"])
    try:
        entry_id = service.save(_now(ctx), memo=memo)
    except ValueError as e:
        handle_domain_error(ctx, e)

    saved = ctx.obj["db"].get_time_entry(entry_id)
    click.echo(f"Saved time entry {entry_id} ({format_duration_hms(saved.duration)})")


@timer_group.command("discard")
@click.pass_context
def discard_timer(ctx):
    """Stop the timer without saving."""
    TimerService(ctx.obj["db"]).discard()
    click.echo("Timer discarded.")


def register_commands(cli):
    """Register timer commands with main CLI."""
    cli.add_command(timer_group, name="timer")
