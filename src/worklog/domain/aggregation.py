"""Period analytics over time entries.

Everything here is a pure function of its arguments. The current time and the
local time zone are always passed in, so results are deterministic for a given
input. Timestamps are compared as naive local wall-clock datetimes: aware
values are converted to the supplied zone, naive values are taken as already
local.
"""

import math
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta
from dateutil.tz import tzlocal

from worklog.domain.entities import (
    UNCATEGORIZED_KEY,
    UNCATEGORIZED_LABEL,
    AggregateReport,
    CategoryBreakdownItem,
    CategoryDuration,
    CategoryTotal,
    CategoryTrend,
    DailySeriesPoint,
    DatePoint,
    HeatmapDay,
    HeatmapReport,
    HourlyBucket,
    PeriodKind,
    ProductivityReport,
    ReportSummary,
    ReportingPeriod,
    ResolvedPeriod,
    TimeEntry,
)

END_OF_DAY = time(23, 59, 59, 999000)
HEATMAP_DAYS = 28

CategoryNames = Mapping[int, str]


def to_local(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Return ``value`` as a naive datetime in local wall-clock time."""
    if value.tzinfo is None:
        return value
    return value.astimezone(tz or tzlocal()).replace(tzinfo=None)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def coerce_duration(value: object) -> int:
    """Coerce a stored duration to whole seconds, treating junk as zero."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return int(number)


# Period resolution


def resolve_period(
    kind: Union[PeriodKind, str],
    offset: int,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> ResolvedPeriod:
    """Resolve a period ``offset`` steps back from the one containing ``now``.

    Weeks start on Monday. Months run from the first to the last calendar day.
    Both bounds are inclusive: ``start`` is local midnight and ``end`` is
    23:59:59.999 of the last day.
    """
    kind = PeriodKind(kind)
    today = to_local(now, tz).date()

    if kind == PeriodKind.DAILY:
        first_day = today - timedelta(days=offset)
        last_day = first_day
    elif kind == PeriodKind.WEEKLY:
        first_day = today - timedelta(days=today.weekday() + offset * 7)
        last_day = first_day + timedelta(days=6)
    else:
        first_day = today.replace(day=1) - relativedelta(months=offset)
        last_day = first_day + relativedelta(months=1) - timedelta(days=1)

    return ResolvedPeriod(
        kind=kind,
        offset=offset,
        start=datetime.combine(first_day, time.min),
        end=datetime.combine(last_day, END_OF_DAY),
        day_count=(last_day - first_day).days + 1,
    )


def resolve_reporting_period(
    request: ReportingPeriod, now: datetime, tz: Optional[tzinfo] = None
) -> ResolvedPeriod:
    """Resolve a requested period relative to ``now``."""
    return resolve_period(request.kind, request.offset, now, tz)


def previous_period(period: ResolvedPeriod) -> ResolvedPeriod:
    """Return the period of the same kind immediately before ``period``."""
    earlier = resolve_period(period.kind, 1, period.start)
    return ResolvedPeriod(
        kind=earlier.kind,
        offset=period.offset + 1,
        start=earlier.start,
        end=earlier.end,
        day_count=earlier.day_count,
    )


def iter_period_days(period: ResolvedPeriod) -> Iterator[date]:
    """Yield every calendar date from ``period.start`` to ``period.end``."""
    current = period.start.date()
    last = period.end.date()
    while current <= last:
        yield current
        current += timedelta(days=1)


def heatmap_window(now: datetime, tz: Optional[tzinfo] = None) -> tuple[datetime, datetime]:
    """Return the trailing 28-day window ending today."""
    today = to_local(now, tz).date()
    start = datetime.combine(today - timedelta(days=HEATMAP_DAYS - 1), time.min)
    return start, datetime.combine(today, END_OF_DAY)


# Filtering


def effective_timestamp(entry: TimeEntry, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Return the local time an entry counts toward.

    ``started_at`` wins; ``created_at`` is the fallback for entries saved
    without a start time.
    """
    value = entry.started_at or entry.created_at
    if value is None:
        return None
    return to_local(value, tz)


def filter_entries(
    entries: Iterable[TimeEntry],
    start: datetime,
    end: datetime,
    tz: Optional[tzinfo] = None,
) -> list[TimeEntry]:
    """Return entries whose effective timestamp lies in ``[start, end]``."""
    result = []
    for entry in entries:
        ts = effective_timestamp(entry, tz)
        if ts is not None and start <= ts <= end:
            result.append(entry)
    return result


def sum_durations(entries: Iterable[TimeEntry]) -> int:
    """Sum entry durations in seconds."""
    return sum(coerce_duration(entry.duration) for entry in entries)


# Category helpers


def category_key(category_id: Optional[int]) -> str:
    """Return the grouping key for a category ID."""
    if category_id is None:
        return UNCATEGORIZED_KEY
    return str(category_id)


def category_label(category_id: Optional[int], category_names: Optional[CategoryNames]) -> str:
    """Return the display name for a category ID."""
    if category_id is None or not category_names:
        return UNCATEGORIZED_LABEL
    return category_names.get(category_id) or UNCATEGORIZED_LABEL


def percentage_of(part: int, total: int) -> int:
    """Return ``part`` as a rounded percentage of ``total`` (0 when empty)."""
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)


def change_percent(total: int, previous: int) -> int:
    """Return the percent change from ``previous`` to ``total``.

    Going from nothing to something counts as +100%.
    """
    if previous > 0:
        return round_half_up((total - previous) / previous * 100)
    return 100 if total > 0 else 0


# Aggregation


def build_category_breakdown(
    entries: Iterable[TimeEntry],
    category_names: Optional[CategoryNames] = None,
    total: Optional[int] = None,
) -> tuple[CategoryBreakdownItem, ...]:
    """Group entries by category, ranked by duration (descending).

    Equal durations keep the order in which their category first appeared.
    """
    durations: dict[str, int] = {}
    labels: dict[str, str] = {}
    for entry in entries:
        key = category_key(entry.category_id)
        if key not in durations:
            durations[key] = 0
            labels[key] = category_label(entry.category_id, category_names)
        durations[key] += coerce_duration(entry.duration)

    if total is None:
        total = sum(durations.values())

    items = [
        CategoryBreakdownItem(
            category_id=key,
            category_name=labels[key],
            duration=duration,
            percentage=percentage_of(duration, total),
        )
        for key, duration in durations.items()
    ]
    return tuple(sorted(items, key=lambda item: -item.duration))


def build_daily_series(
    entries: Iterable[TimeEntry],
    period: ResolvedPeriod,
    category_names: Optional[CategoryNames] = None,
    tz: Optional[tzinfo] = None,
) -> tuple[DailySeriesPoint, ...]:
    """Build one point per day of ``period``, including empty days."""
    days: dict[date, dict[str, CategoryDuration]] = {
        day: {} for day in iter_period_days(period)
    }

    for entry in entries:
        ts = effective_timestamp(entry, tz)
        if ts is None or ts.date() not in days:
            continue
        bucket = days[ts.date()]
        key = category_key(entry.category_id)
        existing = bucket.get(key)
        duration = coerce_duration(entry.duration)
        if existing is None:
            bucket[key] = CategoryDuration(
                category_id=key,
                category_name=category_label(entry.category_id, category_names),
                duration=duration,
            )
        else:
            bucket[key] = CategoryDuration(
                category_id=key,
                category_name=existing.category_name,
                duration=existing.duration + duration,
            )

    return tuple(
        DailySeriesPoint(
            date=day,
            duration=sum(c.duration for c in categories.values()),
            categories=tuple(categories.values()),
        )
        for day, categories in days.items()
    )


def build_hourly_breakdown(
    entries: Iterable[TimeEntry], tz: Optional[tzinfo] = None
) -> tuple[HourlyBucket, ...]:
    """Sum durations and sessions per local hour of day (all 24 hours)."""
    durations = [0] * 24
    counts = [0] * 24
    for entry in entries:
        ts = effective_timestamp(entry, tz)
        if ts is None:
            continue
        durations[ts.hour] += coerce_duration(entry.duration)
        counts[ts.hour] += 1
    return tuple(
        HourlyBucket(hour=hour, duration=durations[hour], session_count=counts[hour])
        for hour in range(24)
    )


def find_peak_hour(buckets: Sequence[HourlyBucket]) -> Optional[HourlyBucket]:
    """Return the bucket with the greatest duration; the earliest hour wins ties."""
    peak = None
    for bucket in buckets:
        if bucket.duration > (peak.duration if peak else 0):
            peak = bucket
    return peak


def build_category_trends(
    entries: Iterable[TimeEntry],
    period: ResolvedPeriod,
    category_names: Optional[CategoryNames] = None,
    tz: Optional[tzinfo] = None,
) -> tuple[CategoryTrend, ...]:
    """Build a full-period daily series per category, largest total first."""
    all_days = list(iter_period_days(period))
    per_category: dict[str, dict[date, int]] = {}
    labels: dict[str, str] = {}

    for entry in entries:
        ts = effective_timestamp(entry, tz)
        if ts is None:
            continue
        key = category_key(entry.category_id)
        labels[key] = category_label(entry.category_id, category_names)
        daily = per_category.setdefault(key, {})
        daily[ts.date()] = daily.get(ts.date(), 0) + coerce_duration(entry.duration)

    trends = [
        CategoryTrend(
            category_id=key,
            category_name=labels[key],
            points=tuple(DatePoint(date=day, duration=daily.get(day, 0)) for day in all_days),
        )
        for key, daily in per_category.items()
    ]
    return tuple(sorted(trends, key=lambda trend: -trend.total_duration))


def build_report(
    entries: Sequence[TimeEntry],
    period: ResolvedPeriod,
    category_names: Optional[CategoryNames] = None,
    tz: Optional[tzinfo] = None,
) -> AggregateReport:
    """Build the full analytics report for ``period``.

    ``entries`` is the complete, unfiltered collection: the current and the
    previous period are each filtered from it independently.
    """
    current = filter_entries(entries, period.start, period.end, tz)
    prior = previous_period(period)
    previous = filter_entries(entries, prior.start, prior.end, tz)

    total = sum_durations(current)
    previous_total = sum_durations(previous)
    breakdown = build_category_breakdown(current, category_names, total)
    top = breakdown[0] if breakdown else None

    return AggregateReport(
        period=period,
        total_duration=total,
        previous_period_duration=previous_total,
        change_percent=change_percent(total, previous_total),
        average_per_day=round_half_up(total / period.day_count),
        top_category=CategoryTotal(top.category_name, top.duration) if top else None,
        category_breakdown=breakdown,
        daily_series=build_daily_series(current, period, category_names, tz),
    )


def summarize(report: AggregateReport) -> ReportSummary:
    """Project a report down to its headline numbers."""
    return ReportSummary(
        period=report.period,
        total_duration=report.total_duration,
        previous_period_duration=report.previous_period_duration,
        change_percent=report.change_percent,
        average_per_day=report.average_per_day,
        top_category=report.top_category,
    )


def build_productivity_report(
    entries: Sequence[TimeEntry],
    period: ResolvedPeriod,
    category_names: Optional[CategoryNames] = None,
    tz: Optional[tzinfo] = None,
) -> ProductivityReport:
    """Build session statistics for ``period`` from the full entry collection."""
    current = filter_entries(entries, period.start, period.end, tz)
    sessions = len(current)
    total = sum_durations(current)

    work_days = set()
    for entry in current:
        ts = effective_timestamp(entry, tz)
        if ts is not None:
            work_days.add(ts.date())

    if work_days:
        sessions_per_day = round_half_up(sessions / len(work_days) * 10) / 10
    else:
        sessions_per_day = 0.0

    hourly = build_hourly_breakdown(current, tz)
    return ProductivityReport(
        period=period,
        total_sessions=sessions,
        total_duration=total,
        average_session_duration=round_half_up(total / sessions) if sessions else 0,
        average_sessions_per_day=sessions_per_day,
        longest_session=max((coerce_duration(e.duration) for e in current), default=0),
        hourly_breakdown=hourly,
        peak_hour=find_peak_hour(hourly),
        category_trends=build_category_trends(current, period, category_names, tz),
    )


def intensity_level(duration: int, max_duration: int) -> int:
    """Map a day's duration to a 0-4 heatmap level relative to the busiest day."""
    if duration <= 0:
        return 0
    ratio = duration / max(max_duration, 1)
    if ratio >= 0.75:
        return 4
    if ratio >= 0.5:
        return 3
    if ratio >= 0.25:
        return 2
    return 1


def build_heatmap(
    entries: Iterable[TimeEntry],
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> HeatmapReport:
    """Build the trailing 28-day activity heatmap ending today."""
    start, end = heatmap_window(now, tz)
    totals: dict[date, int] = {}
    day = start.date()
    while day <= end.date():
        totals[day] = 0
        day += timedelta(days=1)

    for entry in filter_entries(entries, start, end, tz):
        ts = effective_timestamp(entry, tz)
        totals[ts.date()] += coerce_duration(entry.duration)

    max_duration = max(totals.values(), default=0)
    return HeatmapReport(
        start=start,
        end=end,
        max_duration=max_duration,
        days=tuple(
            HeatmapDay(date=day, duration=duration, level=intensity_level(duration, max_duration))
            for day, duration in totals.items()
        ),
    )
