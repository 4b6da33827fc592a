"""Worklog: work time tracking with timers, categories and period analytics."""

__version__ = "0.1.0"


# The CLI pulls in every command module, so it is only loaded on demand
def __getattr__(name):
    if name == "main":
        from worklog.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
