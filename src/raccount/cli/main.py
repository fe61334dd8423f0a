"""Main CLI entry point."""

import logging

import click

from raccount.cli.error_handling import fail
from raccount.database.factories import create_sqlite_session_factory
from raccount.database.session import session_scope
from raccount.log import setup_logging

# Import and register all commands at module level
from raccount.cli.commands import (
    account,
    concept,
    movement,
    expenses,
    populate,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides RACCOUNT_DB_PATH environment variable)",
    envvar="RACCOUNT_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log repository activity at DEBUG level")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Raccount - Personal finance tracker.

    Record movements against accounts and concepts, list the latest ones and
    total expenses over a date window.
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.getLogger("raccount").setLevel(logging.DEBUG)

    # Open the session only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        session_factory = create_sqlite_session_factory(database_path=db_path)
        ctx.obj["session"] = ctx.with_resource(session_scope(session_factory))


# Register all commands
account.register_commands(cli)
concept.register_commands(cli)
movement.register_commands(cli)
expenses.register_commands(cli)
populate.register_commands(cli)


def main():
    """Main entry point for CLI."""
    try:
        setup_logging()
    except ValueError as e:
        fail(None, str(e))
    cli()


if __name__ == "__main__":
    main()
