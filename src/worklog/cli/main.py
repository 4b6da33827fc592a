"""Main CLI entry point."""

import click
from worklog.database.factories import create_sqlite_database
from worklog.logging_config import DEFAULT_LEVEL, configure_logging
from worklog.utils.date_parser import resolve_timezone

# Import and register all commands at module level
from worklog.cli.commands import (
    add,
    category,
    entry,
    export,
    report,
    timer,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides WORKLOG_DB_PATH environment variable)",
    envvar="WORKLOG_DB_PATH",
)
@click.option(
    "--tz",
    "tz_name",
    help="Time zone for days and hours, e.g. 'Asia/Tokyo' (default: system zone)",
    envvar="WORKLOG_TZ",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LEVEL,
    show_default=True,
    help="Log verbosity",
    envvar="WORKLOG_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, tz_name: str | None, log_level: str):
    """Worklog - Work time tracking.

    Record work with a timer or by hand, sort it into categories, and review
    daily, weekly and monthly analytics.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    try:
        ctx.obj["tz"] = resolve_timezone(tz_name)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
category.register_commands(cli)
add.register_commands(cli)
entry.register_commands(cli)
timer.register_commands(cli)
report.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
