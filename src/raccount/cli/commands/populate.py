"""Populate the database with synthetic movements."""

import click

from raccount.cli.error_handling import handle_domain_error
from raccount.database.movement_dao import MovementDAO
from raccount.database.populators import MovementPopulator, seed_reference_data
from raccount.domain.errors import DomainError


@click.command("populate")
@click.argument("count", type=click.IntRange(min=1))
@click.pass_context
def populate(ctx, count: int):
    """Insert COUNT synthetic movements.

    Default accounts and concepts are created first when none exist.
    """
    session = ctx.obj["session"]
    dao = MovementDAO()

    try:
        created_accounts, created_concepts = seed_reference_data(session, dao.accounts, dao.concepts)
        if created_accounts or created_concepts:
            click.echo(f"Created {created_accounts} accounts and {created_concepts} concepts.")
        ids = MovementPopulator(dao).populate(session, count)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Successfully created {len(ids)} movements.")


def register_commands(cli):
    """Register populate command with main CLI."""
    cli.add_command(populate)
