"""Integration tests for end-to-end workflows."""

import json
from datetime import datetime, UTC

from worklog.cli.main import cli


def _base(temp_db):
    return ["--db-path", temp_db.database_path, "--tz", "UTC"]


def test_full_workflow(cli_runner, temp_db):
    """Test complete workflow: category → add → list → report → export."""
    today = datetime.now(UTC).date().isoformat()

    # Step 1: Create categories
    for name in ["Development", "Meetings"]:
        result = cli_runner.invoke(cli, _base(temp_db) + ["category", "create", name])
        assert result.exit_code == 0

    # Step 2: Add entries for today
    result = cli_runner.invoke(
        cli,
        _base(temp_db)
        + ["add", "--category", "Development", "--date", today, "--hours", "1", "--minutes", "30"],
    )
    assert result.exit_code == 0
    assert f"Created time entry 1: 1:30:00 on {today}" in result.output

    result = cli_runner.invoke(
        cli,
        _base(temp_db)
        + ["add", "--category", "2", "--date", today, "--duration", "15m", "--memo", "Standup"],
    )
    assert result.exit_code == 0

    # Step 3: List entries
    result = cli_runner.invoke(cli, _base(temp_db) + ["entry", "list"])
    assert result.exit_code == 0
    assert "Found 2 time entries" in result.output
    assert "Standup" in result.output

    # Step 4: Daily report as JSON
    result = cli_runner.invoke(cli, _base(temp_db) + ["report", "--daily", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["total_duration"] == 6300
    assert data["top_category"] == {"name": "Development", "duration": 5400}
    assert [c["percentage"] for c in data["category_breakdown"]] == [86, 14]

    # Step 5: Text report
    result = cli_runner.invoke(cli, _base(temp_db) + ["report", "--daily"])
    assert result.exit_code == 0
    assert "Work Summary" in result.output
    assert "1h 45m" in result.output
    assert "Development" in result.output

    # Step 6: Export to stdout
    result = cli_runner.invoke(cli, _base(temp_db) + ["export", "-o", "-"])
    assert result.exit_code == 0
    assert "Standup" in result.output


def test_add_rejects_duration_with_hours(cli_runner, temp_db, sample_categories):
    """Test --duration cannot be mixed with --hours."""
    result = cli_runner.invoke(
        cli,
        _base(temp_db) + ["add", "--category", "Development", "--hours", "1", "--duration", "30m"],
    )

    assert result.exit_code == 1
    assert "cannot be combined" in result.output


def test_add_zero_duration(cli_runner, temp_db, sample_categories):
    """Test an empty duration is rejected."""
    result = cli_runner.invoke(cli, _base(temp_db) + ["add", "--category", "Development"])

    assert result.exit_code == 1
    assert "greater than zero" in result.output


def test_add_unknown_category(cli_runner, temp_db):
    """Test adding to a missing category."""
    result = cli_runner.invoke(
        cli, _base(temp_db) + ["add", "--category", "Nope", "--minutes", "10"]
    )

    assert result.exit_code == 1
    assert "Category 'Nope' not found" in result.output


def test_entry_edit_and_delete(cli_runner, temp_db, entry_service, sample_categories):
    """Test editing and deleting an entry."""
    entry_id = entry_service.create_entry(600, sample_categories["Development"], memo="draft")

    result = cli_runner.invoke(
        cli,
        _base(temp_db)
        + ["entry", "edit", str(entry_id), "--duration", "0:20", "--category", "Review", "--clear-memo"],
    )
    assert result.exit_code == 0
    assert f"Updated time entry {entry_id}" in result.output

    edited = entry_service.get_entry(entry_id)
    assert edited.duration == 1200
    assert edited.category_id == sample_categories["Review"]
    assert edited.memo is None

    result = cli_runner.invoke(cli, _base(temp_db) + ["entry", "delete", str(entry_id), "--yes"])
    assert result.exit_code == 0
    assert entry_service.get_entry(entry_id) is None


def test_entry_edit_missing(cli_runner, temp_db):
    """Test editing an entry that does not exist."""
    result = cli_runner.invoke(cli, _base(temp_db) + ["entry", "edit", "42", "--duration", "10m"])

    assert result.exit_code == 1
    assert "Time entry 42 not found" in result.output


def test_entry_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, _base(temp_db) + ["entry", "list"])

    assert result.exit_code == 0
    assert "No time entries found." in result.output


def test_report_empty(cli_runner, temp_db):
    """Test a report with no data."""
    result = cli_runner.invoke(cli, _base(temp_db) + ["report", "--weekly", "--offset", "2"])

    assert result.exit_code == 0
    assert "No time entries in this period." in result.output


def test_report_summary_json(cli_runner, temp_db):
    result = cli_runner.invoke(cli, _base(temp_db) + ["report", "--monthly", "--summary", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["period"]["type"] == "monthly"
    assert "daily_data" not in data


def test_report_rejects_multiple_periods(cli_runner, temp_db):
    result = cli_runner.invoke(cli, _base(temp_db) + ["report", "--daily", "--monthly"])

    assert result.exit_code == 1
    assert "Only one period option" in result.output


def test_report_rejects_negative_offset(cli_runner, temp_db):
    result = cli_runner.invoke(cli, _base(temp_db) + ["report", "--offset", "-1"])

    assert result.exit_code == 1
    assert "offset" in result.output


def test_productivity_and_heatmap(cli_runner, temp_db, entry_service):
    """Test the productivity and heatmap commands."""
    entry_service.create_entry(3600, None, started_at=datetime.now(UTC))

    result = cli_runner.invoke(cli, _base(temp_db) + ["productivity", "--daily", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["total_sessions"] == 1
    assert len(data["hourly_breakdown"]) == 24

    result = cli_runner.invoke(cli, _base(temp_db) + ["heatmap", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["period"]["days"] == 28
    assert data["data"][-1]["level"] == 4

    result = cli_runner.invoke(cli, _base(temp_db) + ["heatmap"])
    assert result.exit_code == 0
    assert "Less" in result.output


def test_unknown_timezone(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "--tz", "Mars/Olympus", "entry", "list"])

    assert result.exit_code == 1
    assert "Unknown time zone" in result.output
