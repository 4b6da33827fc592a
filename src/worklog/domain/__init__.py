"""Domain layer for worklog application."""

# Services are imported lazily: the database layer imports domain entities,
# and the services import the database layer.
_SERVICES = {
    "TimeEntryService": "worklog.domain.time_entry",
    "CategoryService": "worklog.domain.category",
    "TimerService": "worklog.domain.timer",
    "AnalyticsService": "worklog.domain.analytics",
    "ExportService": "worklog.domain.export",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
