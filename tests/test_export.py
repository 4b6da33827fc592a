"""Tests for CSV export."""

import csv
import io
from datetime import date, datetime, timedelta, UTC

import pytest
from worklog.cli.main import cli
from worklog.domain.errors import NotFoundError, ValidationError
from worklog.domain.export import BOM, CSV_HEADERS, ExportService, default_export_filename


@pytest.fixture
def export_service(temp_db, utc):
    """Create an ExportService formatting in UTC."""
    return ExportService(temp_db, tz=utc)


def _rows(document):
    assert document.startswith(BOM)
    return list(csv.reader(io.StringIO(document[len(BOM):])))


def test_default_filename():
    assert default_export_filename(date(2024, 1, 15)) == "work_logs_2024-01-15.csv"


def test_header_only_when_empty(export_service):
    document = export_service.export_csv()

    assert document == BOM + ",".join(CSV_HEADERS) + "\n"


def test_row_contents(export_service, entry_service, sample_categories):
    entry_service.create_entry(
        5400,
        sample_categories["Development"],
        memo="Sprint",
        started_at=datetime(2024, 1, 15, 9, 30, tzinfo=UTC),
    )

    rows = _rows(export_service.export_csv())

    assert rows[0] == CSV_HEADERS
    row = dict(zip(CSV_HEADERS, rows[1]))
    assert row["Category"] == "Development"
    assert row["Duration"] == "1:30:00"
    assert row["Duration (seconds)"] == "5400"
    assert row["Memo"] == "Sprint"
    assert row["Started At"] == "2024/01/15 09:30"
    assert row["Date"] == datetime.now(UTC).strftime("%Y/%m/%d")


def test_quotes_are_escaped(export_service, entry_service):
    entry_service.create_entry(60, None, memo='He said "hi", then left')

    document = export_service.export_csv()

    assert '"He said ""hi"", then left"' in document
    assert _rows(document)[1][4] == 'He said "hi", then left'


def test_multiline_memo(export_service, entry_service):
    entry_service.create_entry(60, None, memo="line one\nline two")

    rows = _rows(export_service.export_csv())

    assert len(rows) == 2
    assert rows[1][4] == "line one\nline two"
    assert rows[1][1] == "Uncategorized"


def test_missing_start_uses_creation_date(export_service, entry_service):
    entry_service.create_entry(60, None)

    row = _rows(export_service.export_csv())[1]

    assert row[5] == datetime.now(UTC).strftime("%Y/%m/%d")


def test_date_range_filters_on_creation(export_service, entry_service):
    entry_service.create_entry(60, None, started_at=datetime(2020, 1, 1, 9, 0, tzinfo=UTC))
    today = datetime.now(UTC).date()

    inside = export_service.list_export_entries(today - timedelta(days=1), today + timedelta(days=1))
    outside = export_service.list_export_entries(date(2020, 1, 1), date(2020, 1, 2))

    assert len(inside) == 1
    assert outside == []


def test_category_filter(export_service, entry_service, sample_categories):
    entry_service.create_entry(60, sample_categories["Development"])
    entry_service.create_entry(60, sample_categories["Review"])

    entries = export_service.list_export_entries(category_id=sample_categories["Review"])

    assert len(entries) == 1


def test_start_after_end(export_service):
    with pytest.raises(ValidationError):
        export_service.export_csv(date(2024, 2, 1), date(2024, 1, 1))


def test_unknown_category(export_service):
    with pytest.raises(NotFoundError):
        export_service.export_csv(category_id=123)


def test_export_cli_writes_file(cli_runner, temp_db, entry_service, sample_categories, tmp_path):
    """Test exporting to a file from the CLI."""
    entry_service.create_entry(1800, sample_categories["Review"], memo="PR, tests")
    output = tmp_path / "out.csv"

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "export", "--output", str(output)],
    )

    assert result.exit_code == 0
    assert "Exported 1 time entry" in result.output
    content = output.read_text(encoding="utf-8")
    assert content.startswith(BOM)
    assert '"PR, tests"' in content


def test_export_cli_stdout(cli_runner, temp_db, entry_service):
    """Test exporting to stdout."""
    entry_service.create_entry(60, None)

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "export", "-o", "-"])

    assert result.exit_code == 0
    assert "Duration (seconds)" in result.output


def test_export_cli_bad_range(cli_runner, temp_db):
    """Test an inverted date range is rejected."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "export",
            "--start-date",
            "2024-02-01",
            "--end-date",
            "2024-01-01",
        ],
    )

    assert result.exit_code == 1
    assert "must not be after" in result.output
