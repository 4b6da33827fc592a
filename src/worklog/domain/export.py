"""CSV export domain service."""

import csv
import io
from datetime import date, datetime, time, tzinfo
from typing import Optional

from dateutil.tz import tzlocal
from loguru import logger

from worklog.database.base import Database
from worklog.domain.aggregation import END_OF_DAY, category_label, to_local
from worklog.domain.category import CategoryService
from worklog.domain.entities import TimeEntry
from worklog.domain.errors import NotFoundError, ValidationError, category_not_found
from worklog.utils.duration_parser import format_duration_hms

# Spreadsheet applications need the BOM to detect UTF-8.
BOM = "\ufeff"

CSV_HEADERS = [
    "Date",
    "Category",
    "Duration",
    "Duration (seconds)",
    "Memo",
    "Started At",
    "Created At",
]

DATE_FORMAT = "%Y/%m/%d"
DATETIME_FORMAT = "%Y/%m/%d %H:%M"


def default_export_filename(today: date) -> str:
    """Return the default file name for an export made on ``today``."""
    return f"work_logs_{today.isoformat()}.csv"


class ExportService:
    """Service for exporting time entries as CSV."""

    def __init__(self, db: Database, tz: Optional[tzinfo] = None):
        """Initialize export service.

        Args:
            db: Database instance
            tz: Time zone used to format dates and interpret the date range
        """
        self.db = db
        self.tz = tz or tzlocal()
        self.categories = CategoryService(db)

    def _format_date(self, value: datetime) -> str:
        return to_local(value, self.tz).strftime(DATE_FORMAT)

    def _format_datetime(self, value: datetime) -> str:
        return to_local(value, self.tz).strftime(DATETIME_FORMAT)

    def build_row(self, entry: TimeEntry, category_names: dict[int, str]) -> list[str]:
        """Build the CSV cells for one entry."""
        if entry.started_at is not None:
            started = self._format_datetime(entry.started_at)
        else:
            started = self._format_date(entry.created_at)
        return [
            self._format_date(entry.created_at),
            category_label(entry.category_id, category_names),
            format_duration_hms(entry.duration),
            str(entry.duration),
            entry.memo or "",
            started,
            self._format_datetime(entry.created_at),
        ]

    def list_export_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> list[TimeEntry]:
        """Select entries created within the local date range, newest first.

        Raises:
            ValidationError: If the start date is after the end date
            NotFoundError: If the category doesn't exist
        """
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError(f"Start date {start_date} is after end date {end_date}")
        if category_id is not None and self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        created_from = None
        if start_date is not None:
            created_from = datetime.combine(start_date, time.min, tzinfo=self.tz)
        created_to = None
        if end_date is not None:
            created_to = datetime.combine(end_date, END_OF_DAY, tzinfo=self.tz)

        return self.db.list_time_entries(
            created_from=created_from,
            created_to=created_to,
            category_id=category_id,
        )

    def render_csv(self, entries: list[TimeEntry]) -> str:
        """Render entries as a BOM-prefixed CSV document.

        Fields containing a comma, quote or line break are quoted with embedded
        quotes doubled.
        """
        category_names = self.categories.category_names()

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
        writer.writerow(CSV_HEADERS)
        for entry in entries:
            writer.writerow(self.build_row(entry, category_names))
        return BOM + buffer.getvalue()

    def export_csv(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> str:
        """Select entries and render them as a CSV document."""
        entries = self.list_export_entries(start_date, end_date, category_id)
        logger.info("Exporting {} time entries", len(entries))
        return self.render_csv(entries)
