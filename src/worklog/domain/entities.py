"""Domain model entities for worklog.

These are pure data classes representing business concepts, independent of
database schema. Derived report types carry a ``to_dict`` method producing a
JSON-compatible structure for the CLI and other consumers.
"""

from dataclasses import dataclass
from datetime import datetime, date
from enum import Enum
from typing import Any, Optional


UNCATEGORIZED_KEY = "uncategorized"
UNCATEGORIZED_LABEL = "Uncategorized"


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: int
    name: str
    sort_order: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TimeEntry:
    """One recorded span of work."""

    id: int
    duration: int
    category_id: Optional[int]
    memo: Optional[str]
    started_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime


class TimerStatus(str, Enum):
    """Timer lifecycle states."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class TimerState:
    """Persisted state of the single active timer."""

    status: TimerStatus = TimerStatus.IDLE
    category_id: Optional[int] = None
    memo: Optional[str] = None
    started_at: Optional[datetime] = None
    accumulated_seconds: int = 0
    resumed_at: Optional[datetime] = None


class PeriodKind(str, Enum):
    """Reporting period granularity."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class ReportingPeriod:
    """Requested period: ``offset`` periods back from the current one."""

    kind: PeriodKind
    offset: int = 0


@dataclass(frozen=True)
class ResolvedPeriod:
    """Concrete local-time window for a reporting period."""

    kind: PeriodKind
    offset: int
    start: datetime
    end: datetime
    day_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "offset": self.offset,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "days": self.day_count,
        }


@dataclass(frozen=True)
class CategoryTotal:
    """Category name with its summed duration."""

    name: str
    duration: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "duration": self.duration}


@dataclass(frozen=True)
class CategoryBreakdownItem:
    """Per-category total within a period."""

    category_id: str
    category_name: str
    duration: int
    percentage: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "category_name": self.category_name,
            "duration": self.duration,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class CategoryDuration:
    """Duration attributed to one category on one day."""

    category_id: str
    category_name: str
    duration: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "category_name": self.category_name,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class DailySeriesPoint:
    """One day of the daily series."""

    date: date
    duration: int
    categories: tuple[CategoryDuration, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "duration": self.duration,
            "categories": [c.to_dict() for c in self.categories],
        }


@dataclass(frozen=True)
class AggregateReport:
    """Period analytics report."""

    period: ResolvedPeriod
    total_duration: int
    previous_period_duration: int
    change_percent: int
    average_per_day: int
    top_category: Optional[CategoryTotal]
    category_breakdown: tuple[CategoryBreakdownItem, ...]
    daily_series: tuple[DailySeriesPoint, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period.to_dict(),
            "total_duration": self.total_duration,
            "previous_period_duration": self.previous_period_duration,
            "change_percent": self.change_percent,
            "average_per_day": self.average_per_day,
            "top_category": self.top_category.to_dict() if self.top_category else None,
            "category_breakdown": [c.to_dict() for c in self.category_breakdown],
            "daily_data": [d.to_dict() for d in self.daily_series],
        }


@dataclass(frozen=True)
class ReportSummary:
    """Summary-only projection of an aggregate report."""

    period: ResolvedPeriod
    total_duration: int
    previous_period_duration: int
    change_percent: int
    average_per_day: int
    top_category: Optional[CategoryTotal]

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period.to_dict(),
            "total_duration": self.total_duration,
            "previous_period_duration": self.previous_period_duration,
            "change_percent": self.change_percent,
            "average_per_day": self.average_per_day,
            "top_category": self.top_category.to_dict() if self.top_category else None,
        }


@dataclass(frozen=True)
class HourlyBucket:
    """Work summed for one hour of the day."""

    hour: int
    duration: int = 0
    session_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "hour": self.hour,
            "duration": self.duration,
            "session_count": self.session_count,
        }


@dataclass(frozen=True)
class DatePoint:
    """Duration on a single date."""

    date: date
    duration: int

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "duration": self.duration}


@dataclass(frozen=True)
class CategoryTrend:
    """Daily durations for one category across a period."""

    category_id: str
    category_name: str
    points: tuple[DatePoint, ...]

    @property
    def total_duration(self) -> int:
        return sum(p.duration for p in self.points)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "category_name": self.category_name,
            "data": [p.to_dict() for p in self.points],
        }


@dataclass(frozen=True)
class ProductivityReport:
    """Session statistics and time-of-day distribution for a period."""

    period: ResolvedPeriod
    total_sessions: int
    total_duration: int
    average_session_duration: int
    average_sessions_per_day: float
    longest_session: int
    hourly_breakdown: tuple[HourlyBucket, ...]
    peak_hour: Optional[HourlyBucket]
    category_trends: tuple[CategoryTrend, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period.to_dict(),
            "total_sessions": self.total_sessions,
            "total_duration": self.total_duration,
            "average_session_duration": self.average_session_duration,
            "average_sessions_per_day": self.average_sessions_per_day,
            "longest_session": self.longest_session,
            "hourly_breakdown": [h.to_dict() for h in self.hourly_breakdown],
            "peak_hour": (
                {"hour": self.peak_hour.hour, "duration": self.peak_hour.duration}
                if self.peak_hour
                else None
            ),
            "category_trends": [t.to_dict() for t in self.category_trends],
        }


@dataclass(frozen=True)
class HeatmapDay:
    """One cell of the activity heatmap."""

    date: date
    duration: int
    level: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "duration": self.duration,
            "level": self.level,
        }


@dataclass(frozen=True)
class HeatmapReport:
    """Trailing 28-day activity heatmap."""

    start: datetime
    end: datetime
    max_duration: int
    days: tuple[HeatmapDay, ...]

    @property
    def day_count(self) -> int:
        return len(self.days)

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": {
                "start": self.start.isoformat(),
                "end": self.end.isoformat(),
                "days": self.day_count,
            },
            "max_duration": self.max_duration,
            "data": [d.to_dict() for d in self.days],
        }
