"""Tests for CLI period and date filter helpers."""

from datetime import date

import click
import pytest

from worklog.cli.date_filters import resolve_cli_date_range, resolve_cli_period
from worklog.domain.entities import PeriodKind


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_period_rejects_multiple(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_period(_ctx(), period_flags={"daily": True, "weekly": False, "monthly": True})

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "Only one period option" in err


def test_resolve_cli_period_defaults_to_weekly():
    kind = resolve_cli_period(_ctx(), period_flags={"daily": False, "weekly": False, "monthly": False})

    assert kind == PeriodKind.WEEKLY


def test_resolve_cli_period_selected():
    kind = resolve_cli_period(_ctx(), period_flags={"daily": False, "weekly": False, "monthly": True})

    assert kind == PeriodKind.MONTHLY


def test_resolve_cli_date_range_parses_dates():
    start, end = resolve_cli_date_range(_ctx(), start_date="2024-01-01", end_date="2024-01-31")

    assert start == date(2024, 1, 1)
    assert end == date(2024, 1, 31)


def test_resolve_cli_date_range_open_ended():
    assert resolve_cli_date_range(_ctx(), start_date=None, end_date=None) == (None, None)


def test_resolve_cli_date_range_invalid_start(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), start_date="garbage", end_date=None)

    assert excinfo.value.exit_code == 1
    assert "Invalid start date" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_inverted(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(_ctx(), start_date="2024-02-01", end_date="2024-01-01")

    assert "must not be after" in capsys.readouterr().err


def test_resolve_cli_date_range_relative_to_given_today():
    start, end = resolve_cli_date_range(
        _ctx(), start_date="yesterday", end_date="today", today=date(2024, 1, 17)
    )

    assert start == date(2024, 1, 16)
    assert end == date(2024, 1, 17)
