"""Expense history commands."""

import click
from expensebook.domain.history import HistoryView
from expensebook.utils.currency import format_currency
from expensebook.utils.date_parser import format_display_date


@click.command("history")
@click.option("--all", "show_all", is_flag=True, help="Show every expense instead of the most recent five")
@click.pass_context
def show_history(ctx, show_all: bool):
    """Show saved expenses, newest first."""
    state = ctx.obj["state"]
    view = HistoryView(state.expenses, show_all=show_all)

    rows = view.rows()
    if not rows:
        click.echo("No expenses recorded yet.")
        return

    click.echo("-" * 140)
    click.echo(
        f"{'Date':<12} {'Category':<22} {'Subcategory':<20} {'Qty':>4} {'Unit Price':>12} "
        f"{'Total':>12}  {'Recipient':<18} {'Description':<20} {'ID':<32}"
    )
    click.echo("-" * 140)
    for exp in rows:
        click.echo(
            f"{format_display_date(exp.date):<12} {exp.category[:22]:<22} {exp.subcategory[:20]:<20} "
            f"{exp.quantity:>4} {format_currency(exp.unit_price):>12} {format_currency(exp.total_amount):>12}  "
            f"{exp.recipient[:18]:<18} {exp.description[:20]:<20} {exp.id:<32}"
        )

    if view.hidden_count:
        click.echo(f"\n{view.hidden_count} older expense(s) hidden. Use --all to see more.")


@click.command("remove")
@click.argument("expense_id")
@click.pass_context
def remove_expense(ctx, expense_id: str):
    """Remove a saved expense by ID."""
    state = ctx.obj["state"]
    if state.expenses.remove_expense(expense_id):
        click.echo(f"Removed expense {expense_id}")
    else:
        click.echo(f"No expense with ID '{expense_id}'; nothing removed.")


def register_commands(cli):
    """Register history commands with main CLI."""
    cli.add_command(show_history)
    cli.add_command(remove_expense)
