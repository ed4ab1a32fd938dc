"""Shared helpers for commands that work through the entry form."""

import click

from expensebook.domain.workflow import EntryForm, RowOutcome
from expensebook.sink import RemoteSink
from expensebook.utils.currency import format_currency


def build_entry_form(ctx: click.Context) -> EntryForm:
    """Create an entry form bound to the loaded state and configured sink."""
    state = ctx.obj["state"]
    sink = RemoteSink(state.script_url, transport=ctx.obj.get("sink_transport"))
    return EntryForm(state, sink)


def report_outcomes(ctx: click.Context, outcomes: list[RowOutcome]) -> None:
    """Print one line per saved row and exit with failure if any row failed."""
    failed = 0
    for outcome in outcomes:
        if outcome.committed:
            exp = outcome.expense
            click.echo(f"Expense saved successfully (ID: {exp.id})")
            click.echo(
                f"  {exp.date}  {exp.category} > {exp.subcategory}  "
                f"{exp.quantity} x {format_currency(exp.unit_price)} = {format_currency(exp.total_amount)}"
            )
        else:
            failed += 1
            draft = outcome.draft
            click.echo(f"Error: Row {outcome.index + 1} not saved: {outcome.error}", err=True)
            click.echo(
                f"  Discarded entry: {draft.date}  {draft.category} > {draft.subcategory}  "
                f"{draft.quantity} x {format_currency(draft.unit_price)}  {draft.description}",
                err=True,
            )

    if failed:
        click.echo(f"{failed} of {len(outcomes)} entries were not saved.", err=True)
        ctx.exit(1)
