"""Expense entry commands."""

import asyncio
from typing import Optional

import click
from expensebook.cli.error_handling import handle_domain_error
from expensebook.cli.forms import build_entry_form, report_outcomes
from expensebook.domain.errors import DomainError, ValidationError
from expensebook.domain.workflow import Confirm, EntryForm
from expensebook.utils.currency import format_currency
from expensebook.utils.date_parser import parse_date


def _ask(question: str) -> bool:
    return click.confirm(question, default=False)


def select_category(form: EntryForm, index: int, name: str, confirm: Optional[Confirm]) -> bool:
    """Select an existing category or offer to create it. Returns True if selected."""
    if form.state.categories.get_category(name) is not None:
        form.set_category(index, name)
    else:
        form.create_category(index, name, confirm=confirm)
    return bool(form.row(index).category)


def select_subcategory(form: EntryForm, index: int, name: str, confirm: Optional[Confirm]) -> bool:
    """Select an existing subcategory of the row's category or offer to create it."""
    category = form.state.categories.get_category(form.row(index).category)
    if category is not None and name in category.subcategories:
        form.set_subcategory(index, name)
    else:
        form.create_subcategory(index, name, confirm=confirm)
    return bool(form.row(index).subcategory)


@click.command("add")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday', '3 days ago')",
)
@click.option("--category", required=True, help="Category name (e.g., 'Food')")
@click.option("--subcategory", default="", help="Subcategory name (e.g., 'Groceries')")
@click.option("--quantity", default="1", show_default=True, help="Quantity (whole number, at least 1)")
@click.option("--unit-price", required=True, help="Unit price in whole currency units (e.g., 1,500)")
@click.option("--recipient", default="", help="Who received the payment or consumed the item")
@click.option("--description", default="", help="Expense description")
@click.option("--yes", "-y", is_flag=True, help="Create a missing category or subcategory without asking")
@click.pass_context
def add_expense(
    ctx,
    date_str: str,
    category: str,
    subcategory: str,
    quantity: str,
    unit_price: str,
    recipient: str,
    description: str,
    yes: bool,
):
    """Save a single expense.

    Examples:
        expensebook add --category Food --subcategory Groceries --quantity 3 --unit-price 50
        expensebook add --date yesterday --category Utilities --unit-price 1,200 --recipient "City Water"
    """
    form = build_entry_form(ctx)
    confirm = None if yes else _ask

    try:
        form.set_date(0, parse_date(date_str))
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        if not select_category(form, 0, category, confirm):
            click.echo("Aborted: no category selected.", err=True)
            ctx.exit(1)
        if subcategory and not select_subcategory(form, 0, subcategory, confirm):
            click.echo("Aborted: no subcategory selected.", err=True)
            ctx.exit(1)
    except DomainError as e:
        handle_domain_error(ctx, e)

    form.set_quantity_text(0, quantity)
    form.set_unit_price_text(0, unit_price)
    form.set_recipient(0, recipient)
    form.set_description(0, description)

    outcomes = asyncio.run(form.submit())
    report_outcomes(ctx, outcomes)


def _prompt_date(form: EntryForm, index: int) -> None:
    while True:
        value = click.prompt("Date", default="today")
        try:
            form.set_date(index, parse_date(value))
            return
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)


def _prompt_category(form: EntryForm, index: int) -> None:
    while not form.row(index).category:
        query = click.prompt("Category")
        matches = form.category_suggestions(query)
        exact = [c for c in matches if c.name.lower() == query.lower()]
        if exact:
            form.set_category(index, exact[0].name)
        elif len(matches) == 1 and click.confirm(f'Use "{matches[0].name}"?', default=True):
            form.set_category(index, matches[0].name)
        else:
            if matches:
                click.echo("Matching categories: " + ", ".join(c.name for c in matches))
            try:
                form.create_category(index, query, confirm=_ask)
            except ValidationError as e:
                click.echo(f"Error: {e}", err=True)


def _prompt_subcategory(form: EntryForm, index: int) -> None:
    category = form.row(index).category
    while not form.row(index).subcategory:
        query = click.prompt("Subcategory (empty to skip)", default="", show_default=False)
        if not query:
            return
        matches = form.subcategory_suggestions(category, query)
        exact = [s for s in matches if s.lower() == query.lower()]
        if exact:
            form.set_subcategory(index, exact[0])
        elif len(matches) == 1 and click.confirm(f'Use "{matches[0]}"?', default=True):
            form.set_subcategory(index, matches[0])
        else:
            if matches:
                click.echo("Matching subcategories: " + ", ".join(matches))
            try:
                form.create_subcategory(index, query, confirm=_ask)
            except ValidationError as e:
                click.echo(f"Error: {e}", err=True)


@click.command("enter")
@click.pass_context
def enter_expenses(ctx):
    """Enter one or more expenses interactively and save them together."""
    form = build_entry_form(ctx)

    index = 0
    while True:
        click.echo(f"\nEntry {index + 1}")
        _prompt_date(form, index)
        _prompt_category(form, index)
        _prompt_subcategory(form, index)
        form.set_quantity_text(index, click.prompt("Quantity", default="1"))
        form.set_unit_price_text(index, click.prompt("Unit price", default="0"))
        form.set_recipient(index, click.prompt("Recipient", default="", show_default=False))
        form.set_description(index, click.prompt("Description", default="", show_default=False))
        click.echo(f"  Total: {form.row(index).formatted_total}")

        if not click.confirm("Add another entry?", default=False):
            break
        index = form.add_row()

    click.echo(f"\nSaving {len(form.rows)} entries (total {format_currency(form.total())})...")
    outcomes = asyncio.run(form.submit())
    report_outcomes(ctx, outcomes)


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(add_expense)
    cli.add_command(enter_expenses)
