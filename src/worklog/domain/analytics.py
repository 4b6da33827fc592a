"""Analytics domain service."""

from datetime import datetime, tzinfo
from typing import Optional, Union

from dateutil.tz import tzlocal
from loguru import logger

from worklog.database.base import Database
from worklog.domain import aggregation
from worklog.domain.category import CategoryService
from worklog.domain.entities import (
    AggregateReport,
    HeatmapReport,
    PeriodKind,
    ProductivityReport,
    ReportSummary,
    ReportingPeriod,
    ResolvedPeriod,
)
from worklog.domain.errors import ValidationError, invalid_offset
from worklog.domain.time_entry import TimeEntryService


class AnalyticsService:
    """Service for building period analytics from stored time entries.

    Each call reads the full entry collection once and hands it to the pure
    aggregation functions.
    """

    def __init__(self, db: Database, tz: Optional[tzinfo] = None):
        """Initialize analytics service.

        Args:
            db: Database instance
            tz: Local time zone for bucketing (defaults to the machine's zone)
        """
        self.db = db
        self.tz = tz or tzlocal()
        self.entries = TimeEntryService(db)
        self.categories = CategoryService(db)

    def resolve_period(
        self, kind: Union[PeriodKind, str], offset: int, now: datetime
    ) -> ResolvedPeriod:
        """Resolve a reporting period relative to ``now``.

        Raises:
            ValidationError: If offset is negative or kind is unknown
        """
        if offset < 0:
            raise ValidationError(invalid_offset(offset))
        try:
            kind = PeriodKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown period type '{kind}'")
        return aggregation.resolve_reporting_period(ReportingPeriod(kind, offset), now, self.tz)

    def get_report(
        self, kind: Union[PeriodKind, str], offset: int, now: datetime
    ) -> AggregateReport:
        """Build the full analytics report for a period."""
        period = self.resolve_period(kind, offset, now)
        report = aggregation.build_report(
            self.entries.get_all_entries(),
            period,
            self.categories.category_names(),
            self.tz,
        )
        logger.debug(
            "Report {} offset {}: total={}s previous={}s",
            period.kind.value,
            offset,
            report.total_duration,
            report.previous_period_duration,
        )
        return report

    def get_summary(
        self, kind: Union[PeriodKind, str], offset: int, now: datetime
    ) -> ReportSummary:
        """Build the headline numbers for a period."""
        return aggregation.summarize(self.get_report(kind, offset, now))

    def get_productivity(
        self, kind: Union[PeriodKind, str], offset: int, now: datetime
    ) -> ProductivityReport:
        """Build session statistics for a period."""
        period = self.resolve_period(kind, offset, now)
        return aggregation.build_productivity_report(
            self.entries.get_all_entries(),
            period,
            self.categories.category_names(),
            self.tz,
        )

    def get_heatmap(self, now: datetime) -> HeatmapReport:
        """Build the trailing 28-day activity heatmap."""
        return aggregation.build_heatmap(self.entries.get_all_entries(), now, self.tz)
