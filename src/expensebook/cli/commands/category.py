"""Category management commands."""

import click
from expensebook.cli.error_handling import handle_domain_error
from expensebook.cli.forms import build_entry_form
from expensebook.domain.errors import DomainError


def _confirm_unless(yes: bool):
    if yes:
        return None
    return lambda question: click.confirm(question, default=False)


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.argument("query", required=False, default="")
@click.pass_context
def list_categories(ctx, query: str):
    """List categories and their subcategories.

    QUERY filters category names, ignoring case.
    """
    form = build_entry_form(ctx)
    categories = form.category_suggestions(query)
    if not categories:
        click.echo(f"No categories match '{query}'.")
        return

    store = form.state.categories
    click.echo("\nCategories:")
    for cat in categories:
        marker = " (default)" if cat.is_default else ""
        click.echo(f"{cat.name}{marker}")
        for sub in cat.subcategories:
            lock = " *" if store.is_protected_subcategory(cat.name, sub) else ""
            click.echo(f"  {sub}{lock}")


@category_group.command("create")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def create_category(ctx, name: str, yes: bool):
    """Create a new category."""
    form = build_entry_form(ctx)
    try:
        created = form.create_category(0, name, confirm=_confirm_unless(yes))
    except DomainError as e:
        handle_domain_error(ctx, e)

    if created:
        click.echo(f"Created category '{name}'")
    elif form.row(0).category:
        click.echo(f"Category '{form.row(0).category}' already exists.")
    else:
        click.echo("Aborted.")


@category_group.command("remove")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def remove_category(ctx, name: str, yes: bool):
    """Remove a user-defined category.

    Every expense filed under the category is deleted with it.
    """
    form = build_entry_form(ctx)
    state = form.state
    if state.categories.get_category(name) is None:
        click.echo(f"Category '{name}' not found; nothing removed.")
        return

    affected = [exp for exp in state.expenses.list_expenses() if exp.category == name]
    if affected and not state.categories.get_category(name).is_default:
        click.echo(f"Warning: {len(affected)} expense(s) filed under '{name}' will be deleted too.")

    try:
        removed = form.remove_category(name, confirm=_confirm_unless(yes))
    except DomainError as e:
        handle_domain_error(ctx, e)

    if removed:
        click.echo(f"Category '{name}' removed successfully")
    else:
        click.echo("Aborted.")


@click.group()
def subcategory_group():
    """Manage subcategories."""
    pass


@subcategory_group.command("add")
@click.argument("category")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def add_subcategory(ctx, category: str, name: str, yes: bool):
    """Add a subcategory to CATEGORY."""
    form = build_entry_form(ctx)
    if form.state.categories.get_category(category) is None:
        click.echo(f"Error: Category '{category}' not found", err=True)
        ctx.exit(1)

    form.set_category(0, category)
    try:
        created = form.create_subcategory(0, name, confirm=_confirm_unless(yes))
    except DomainError as e:
        handle_domain_error(ctx, e)

    if created:
        click.echo(f"Subcategory '{name}' added to '{category}'")
    elif form.row(0).subcategory:
        click.echo(f"Subcategory '{form.row(0).subcategory}' already exists in '{category}'.")
    else:
        click.echo("Aborted.")


@subcategory_group.command("remove")
@click.argument("category")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def remove_subcategory(ctx, category: str, name: str, yes: bool):
    """Remove subcategory NAME from CATEGORY."""
    form = build_entry_form(ctx)
    cat = form.state.categories.get_category(category)
    if cat is None or name not in cat.subcategories:
        click.echo(f"Subcategory '{name}' not found in '{category}'; nothing removed.")
        return

    try:
        removed = form.remove_subcategory(category, name, confirm=_confirm_unless(yes))
    except DomainError as e:
        handle_domain_error(ctx, e)

    if removed:
        click.echo(f"Subcategory '{name}' removed successfully")
    else:
        click.echo("Aborted.")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
    cli.add_command(subcategory_group, name="subcategory")
