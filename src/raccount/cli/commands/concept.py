"""Concept management commands."""

import click

from raccount.cli.error_handling import handle_domain_error
from raccount.database.concept_dao import ConceptDAO
from raccount.domain.errors import DomainError


@click.group("concept")
def concept_group():
    """Manage spending concepts."""
    pass


@concept_group.command("add")
@click.argument("name", metavar="CONCEPT_NAME")
@click.pass_context
def add_concept(ctx, name: str):
    """Create a new concept.

    Examples:
        raccount concept add "Groceries"
    """
    session = ctx.obj["session"]
    try:
        concept_id = ConceptDAO().insert(session, name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created concept '{name}' (ID: {concept_id})")


@concept_group.command("list")
@click.pass_context
def list_concepts(ctx):
    """List all concepts."""
    session = ctx.obj["session"]

    concepts = ConceptDAO().list_all(session)
    if not concepts:
        click.echo("No concepts found.")
        return

    click.echo("\nConcepts:")
    click.echo("-" * 40)
    for concept in concepts:
        click.echo(f"ID: {concept.id:3d} | {concept.name}")


def register_commands(cli):
    """Register concept commands with main CLI."""
    cli.add_command(concept_group)
