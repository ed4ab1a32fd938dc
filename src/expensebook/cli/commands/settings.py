"""Settings commands."""

import click
from expensebook.cli.error_handling import handle_domain_error
from expensebook.domain.errors import DomainError
from expensebook.sink import validate_sink_url


@click.group()
def settings_group():
    """Show or change settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show the remote sink URL."""
    state = ctx.obj["state"]
    if state.script_url:
        click.echo(f"Remote sink URL: {state.script_url}")
    else:
        click.echo("Remote sink URL: (not configured)")


@settings_group.command("set-url")
@click.argument("url")
@click.pass_context
def set_url(ctx, url: str):
    """Set the spreadsheet web app URL that receives saved expenses."""
    state = ctx.obj["state"]
    try:
        url = validate_sink_url(url)
    except DomainError as e:
        handle_domain_error(ctx, e)

    state.set_script_url(url)
    click.echo(f"Remote sink URL set to {url}")


@settings_group.command("clear-url")
@click.pass_context
def clear_url(ctx):
    """Remove the remote sink URL."""
    ctx.obj["state"].set_script_url(None)
    click.echo("Remote sink URL cleared.")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
