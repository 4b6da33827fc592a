"""CLI helpers for category resolution and error handling."""

from __future__ import annotations

import click
from worklog.domain.category import CategoryService
from worklog.utils.category_resolver import resolve_category


def resolve_category_or_exit(
    ctx: click.Context, category_service: CategoryService, category: str | int
) -> int:
    """Resolve category name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_category(category_service, category)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
