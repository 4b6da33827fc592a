"""Category management commands."""

import click
from worklog.cli.category_resolution import resolve_category_or_exit
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.category import CategoryService


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories in display order."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found. Use 'category create NAME' to add one.")
        return

    click.echo("\nCategories:")
    click.echo(f"{'ID':<6} {'Order':<6} Name")
    click.echo("-" * 40)
    for cat in categories:
        click.echo(f"{cat.id:<6} {cat.sort_order:<6} {cat.name}")


@category_group.command("create")
@click.argument("name")
@click.pass_context
def create_category(ctx, name: str):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(name=name)
        click.echo(f"Created category '{name.strip()}' (ID: {category_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@category_group.command("rename")
@click.argument("category", metavar="CATEGORY")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_category(ctx, category: str, new_name: str) -> None:
    """Rename a category.

    CATEGORY can be a category name or ID.

    Examples:
        worklog category rename "Dev" "Development"
        worklog category rename 1 "Meetings"
    """
    db = ctx.obj["db"]
    service = CategoryService(db)
    category_id = resolve_category_or_exit(ctx, service, category)

    try:
        service.rename_category(category_id, new_name)
        click.echo(f"Renamed category to '{new_name.strip()}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@category_group.command("move")
@click.argument("category", metavar="CATEGORY")
@click.argument("position", type=int)
@click.pass_context
def move_category(ctx, category: str, position: int) -> None:
    """Set the sort position of a category.

    CATEGORY can be a category name or ID.
    """
    db = ctx.obj["db"]
    service = CategoryService(db)
    category_id = resolve_category_or_exit(ctx, service, category)

    try:
        service.move_category(category_id, position)
        click.echo(f"Moved category {category_id} to position {position}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("category", metavar="CATEGORY")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_category(ctx, category: str, yes: bool) -> None:
    """Delete a category.

    CATEGORY can be a category name or ID. Time entries in the category are
    kept and become uncategorized.
    """
    db = ctx.obj["db"]
    service = CategoryService(db)
    category_id = resolve_category_or_exit(ctx, service, category)
    category_obj = service.get_category(category_id)

    entry_count = db.get_category_entry_count(category_id)
    prompt = f"Are you sure you want to delete category '{category_obj.name}' (ID: {category_id})?"
    if entry_count > 0:
        prompt += f" {entry_count} time entr{'ies' if entry_count != 1 else 'y'} will become uncategorized."

    if not yes and not click.confirm(prompt):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_category(category_id)
        click.echo(f"Deleted category '{category_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
