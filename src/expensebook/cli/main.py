"""Main CLI entry point."""

import click
from expensebook.config import load_config
from expensebook.database.factories import create_sqlite_database
from expensebook.domain.persistence import PersistenceService
from expensebook.logger import setup_logging

# Import and register all commands at module level
from expensebook.cli.commands import add, history, category, settings


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides EXPENSEBOOK_DB_PATH environment variable)",
    envvar="EXPENSEBOOK_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """Expensebook - Personal expense entry and tracking.

    Record expense line items, keep them in a local database and mirror
    each saved entry to a spreadsheet endpoint.
    """
    ctx.ensure_object(dict)

    # Load state only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        config = load_config()
        setup_logging(config)

        db = create_sqlite_database(database_path=db_path, default_path=config.db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)

        persistence = PersistenceService(db)
        ctx.obj["db"] = db
        ctx.obj["persistence"] = persistence
        ctx.obj["state"] = persistence.load()


# Register all commands
add.register_commands(cli)
history.register_commands(cli)
category.register_commands(cli)
settings.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
