"""CSV export command."""

from datetime import datetime
from pathlib import Path

import click
from worklog.cli.category_resolution import resolve_category_or_exit
from worklog.cli.date_filters import resolve_cli_date_range
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.category import CategoryService
from worklog.domain.export import ExportService, default_export_filename


@click.command("export")
@click.option("--start-date", help="First creation date to include (YYYY-MM-DD or relative)")
@click.option("--end-date", help="Last creation date to include (YYYY-MM-DD or relative)")
@click.option("--category", help="Category name or ID")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, allow_dash=True),
    help="Output file (default: work_logs_<today>.csv; use '-' for stdout)",
)
@click.pass_context
def export_entries(ctx, start_date: str, end_date: str, category: str, output: str | None):
    """Export time entries to CSV.

    The file is UTF-8 with a byte-order mark so spreadsheet applications
    detect the encoding.
    """
    db = ctx.obj["db"]
    service = ExportService(db, tz=ctx.obj["tz"])

    today = datetime.now(ctx.obj["tz"]).date()
    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date, today=today)
    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, CategoryService(db), category)

    try:
        entries = service.list_export_entries(start_date=start, end_date=end, category_id=category_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    document = service.render_csv(entries)
    if output == "-":
        click.echo(document, nl=False)
        return

    path = Path(output or default_export_filename(today))
    path.write_text(document, encoding="utf-8", newline="")
    click.echo(f"Exported {len(entries)} time entr{'ies' if len(entries) != 1 else 'y'} to {path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_entries)
