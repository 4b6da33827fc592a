"""Analytics report commands."""

import json
from datetime import datetime

import click
from worklog.cli.date_filters import resolve_cli_period
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.analytics import AnalyticsService
from worklog.domain.entities import AggregateReport, ProductivityReport
from worklog.utils.duration_parser import format_duration_short

HEATMAP_SHADES = [".", "-", "+", "*", "#"]
WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def period_options(func):
    """Attach the shared period selection options to a command."""
    func = click.option("--offset", type=int, default=0, show_default=True, help="Number of periods back (0 = current)")(func)
    func = click.option("--monthly", is_flag=True, help="Calendar month")(func)
    func = click.option("--weekly", is_flag=True, help="Week starting Monday (default)")(func)
    func = click.option("--daily", is_flag=True, help="Single day")(func)
    return func


def _echo_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _period_title(report: AggregateReport | ProductivityReport) -> str:
    period = report.period
    first = period.start.date().isoformat()
    last = period.end.date().isoformat()
    span = first if first == last else f"{first} - {last}"
    return f"{period.kind.value.capitalize()} ({span})"


def _display_report(report: AggregateReport, summary_only: bool) -> None:
    click.echo(f"\nWork Summary: {_period_title(report)}")
    click.echo("-" * 80)
    change = f"{report.change_percent:+d}%"
    click.echo(f"{'Total':<50} {format_duration_short(report.total_duration):>20}")
    click.echo(f"{'Previous period':<50} {format_duration_short(report.previous_period_duration):>20}")
    click.echo(f"{'Change':<50} {change:>20}")
    click.echo(f"{'Average per day':<50} {format_duration_short(report.average_per_day):>20}")
    top = report.top_category.name if report.top_category else "-"
    click.echo(f"{'Top category':<50} {top:>20}")

    if summary_only:
        return

    click.echo("\nCategory Breakdown:")
    click.echo("-" * 80)
    if not report.category_breakdown:
        click.echo("No time entries in this period.")
    for item in report.category_breakdown:
        click.echo(
            f"    {item.category_name:<46} {format_duration_short(item.duration):>20} {item.percentage:>5}%"
        )

    click.echo("\nDaily:")
    click.echo("-" * 80)
    for point in report.daily_series:
        label = f"{point.date.isoformat()} {WEEKDAY_LABELS[point.date.weekday()]}"
        click.echo(f"    {label:<46} {format_duration_short(point.duration):>20}")


@click.command("report")
@period_options
@click.option("--summary", "summary_only", is_flag=True, help="Only show the headline numbers")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def report(ctx, daily: bool, weekly: bool, monthly: bool, offset: int, summary_only: bool, as_json: bool):
    """Show totals, category breakdown and daily series for a period."""
    kind = resolve_cli_period(ctx, period_flags={"daily": daily, "weekly": weekly, "monthly": monthly})
    service = AnalyticsService(ctx.obj["db"], tz=ctx.obj["tz"])
    now = datetime.now(ctx.obj["tz"])

    try:
        if summary_only and as_json:
            _echo_json(service.get_summary(kind, offset, now).to_dict())
            return
        result = service.get_report(kind, offset, now)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        _echo_json(result.to_dict())
    else:
        _display_report(result, summary_only)


@click.command("productivity")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def productivity(ctx, daily: bool, weekly: bool, monthly: bool, offset: int, as_json: bool):
    """Show session statistics and the busiest hours for a period."""
    kind = resolve_cli_period(ctx, period_flags={"daily": daily, "weekly": weekly, "monthly": monthly})
    service = AnalyticsService(ctx.obj["db"], tz=ctx.obj["tz"])

    try:
        result = service.get_productivity(kind, offset, datetime.now(ctx.obj["tz"]))
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        _echo_json(result.to_dict())
        return

    click.echo(f"\nProductivity: {_period_title(result)}")
    click.echo("-" * 80)
    click.echo(f"{'Sessions':<50} {result.total_sessions:>20}")
    click.echo(f"{'Average session':<50} {format_duration_short(result.average_session_duration):>20}")
    click.echo(f"{'Sessions per working day':<50} {result.average_sessions_per_day:>20}")
    click.echo(f"{'Longest session':<50} {format_duration_short(result.longest_session):>20}")
    peak = f"{result.peak_hour.hour:02d}:00" if result.peak_hour else "-"
    click.echo(f"{'Peak hour':<50} {peak:>20}")

    if result.peak_hour:
        click.echo("\nBy hour:")
        click.echo("-" * 80)
        for bucket in result.hourly_breakdown:
            if bucket.duration:
                click.echo(
                    f"    {bucket.hour:02d}:00{'':<41} {format_duration_short(bucket.duration):>20} "
                    f"({bucket.session_count})"
                )


@click.command("heatmap")
@click.option("--json", "as_json", is_flag=True, help="Print the heatmap as JSON")
@click.pass_context
def heatmap(ctx, as_json: bool):
    """Show activity over the last 28 days."""
    service = AnalyticsService(ctx.obj["db"], tz=ctx.obj["tz"])
    result = service.get_heatmap(datetime.now(ctx.obj["tz"]))

    if as_json:
        _echo_json(result.to_dict())
        return

    click.echo(f"\nActivity {result.start.date().isoformat()} - {result.end.date().isoformat()}")
    click.echo("-" * 40)
    for week_start in range(0, result.day_count, 7):
        week = result.days[week_start:week_start + 7]
        cells = " ".join(HEATMAP_SHADES[day.level] for day in week)
        click.echo(f"{week[0].date.isoformat()}  {cells}")
    click.echo(f"\nLess {' '.join(HEATMAP_SHADES)} More")


def register_commands(cli):
    """Register analytics commands with main CLI."""
    cli.add_command(report)
    cli.add_command(productivity)
    cli.add_command(heatmap)
