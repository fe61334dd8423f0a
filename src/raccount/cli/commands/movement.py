"""Movement management commands."""

from dataclasses import replace

import click

from raccount.cli.error_handling import fail, handle_domain_error
from raccount.database.movement_dao import MovementDAO
from raccount.domain.entities import Movement
from raccount.domain.errors import DomainError
from raccount.utils.amount_parser import parse_amount
from raccount.utils.date_utils import parse_date


def format_movement(movement: Movement) -> str:
    """Render a movement as one table line."""
    return (
        f"{movement.id:5d} | {movement.movement_date} | {movement.account.name:15s} | "
        f"{movement.concept.name:15s} | {movement.amount:>10} | {movement.final_balance:>10} | "
        f"{movement.description}"
    )


def echo_movements(movements: list[Movement]) -> None:
    if not movements:
        click.echo("No movements found.")
        return
    click.echo(f"{'ID':>5s} | {'Date':10s} | {'Account':15s} | {'Concept':15s} | "
               f"{'Amount':>10s} | {'Balance':>10s} | Description")
    click.echo("-" * 100)
    for movement in movements:
        click.echo(format_movement(movement))


@click.group("movement")
def movement_group():
    """Manage movements."""
    pass


@movement_group.command("add")
@click.option("--account", "account_id", type=int, required=True, help="Account ID")
@click.option("--concept", "concept_id", type=int, required=True, help="Concept ID")
@click.option("--amount", required=True, help="Movement amount (e.g., -3.40 or 250.00)")
@click.option("--final-balance", required=True, help="Account balance after this movement")
@click.option("--date", "date_str", default="today", help="Movement date (YYYY-MM-DD, 'today', 'yesterday')")
@click.option("--description", required=True, help="Movement description")
@click.pass_context
def add_movement(
    ctx,
    account_id: int,
    concept_id: int,
    amount: str,
    final_balance: str,
    date_str: str,
    description: str,
):
    """Record a movement.

    Examples:
        raccount movement add --account 1 --concept 2 --amount -3.40 --final-balance 55 --description "Coffee"
        raccount movement add --account 1 --concept 5 --amount 1200 --final-balance 1255 --date 2024-01-31 --description "Salary"
    """
    session = ctx.obj["session"]
    dao = MovementDAO()

    try:
        movement_date = parse_date(date_str)
    except ValueError as e:
        fail(ctx, f"Invalid date format: {e}")

    try:
        movement_amount = parse_amount(amount)
        balance = parse_amount(final_balance)
    except ValueError as e:
        fail(ctx, f"Invalid amount format: {e}")

    try:
        account = dao.accounts.find(session, account_id)
        concept = dao.concepts.find(session, concept_id)
        movement = Movement(
            description=description,
            amount=movement_amount,
            final_balance=balance,
            movement_date=movement_date,
            account=account,
            concept=concept,
        )
        movement_id = dao.insert(session, movement)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created movement {movement_id}")
    click.echo(f"  Account: {account.name}")
    click.echo(f"  Concept: {concept.name}")
    click.echo(f"  Date: {movement_date}")
    click.echo(f"  Amount: {movement_amount}")
    click.echo(f"  Description: {description}")


@movement_group.command("show")
@click.argument("movement_id", type=int)
@click.pass_context
def show_movement(ctx, movement_id: int):
    """Show one movement."""
    session = ctx.obj["session"]
    try:
        movement = MovementDAO().find(session, movement_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Movement {movement.id}")
    click.echo(f"  Account: {movement.account.name}")
    click.echo(f"  Concept: {movement.concept.name}")
    click.echo(f"  Date: {movement.movement_date}")
    click.echo(f"  Amount: {movement.amount}")
    click.echo(f"  Final balance: {movement.final_balance}")
    click.echo(f"  Description: {movement.description}")


@movement_group.command("list")
@click.pass_context
def list_movements(ctx):
    """List all movements."""
    session = ctx.obj["session"]
    echo_movements(MovementDAO().list_all(session))


@movement_group.command("last")
@click.argument("account_id", type=int)
@click.option("-n", "limit", type=click.IntRange(min=0), default=10, show_default=True,
              help="Number of movements to show")
@click.pass_context
def last_movements(ctx, account_id: int, limit: int):
    """List the latest movements of an account, newest first.

    Examples:
        raccount movement last 1
        raccount movement last 1 -n 50
    """
    session = ctx.obj["session"]
    dao = MovementDAO()
    try:
        account = dao.accounts.find(session, account_id)
        movements = dao.list_last_n(session, account, limit)
    except DomainError as e:
        handle_domain_error(ctx, e)
    echo_movements(movements)


@movement_group.command("describe")
@click.argument("movement_id", type=int)
@click.argument("description")
@click.pass_context
def describe_movement(ctx, movement_id: int, description: str):
    """Change the description of a movement."""
    session = ctx.obj["session"]
    dao = MovementDAO()
    try:
        movement = dao.find(session, movement_id)
        dao.update(session, replace(movement, description=description))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated movement {movement_id}")


@movement_group.command("delete")
@click.argument("movement_id", type=int)
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_movement(ctx, movement_id: int, force: bool):
    """Delete a movement."""
    session = ctx.obj["session"]
    dao = MovementDAO()
    try:
        movement = dao.find(session, movement_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not force:
        click.echo(format_movement(movement))
        if not click.confirm(f"Are you sure you want to delete movement {movement_id}?"):
            click.echo("Deletion cancelled.")
            return

    try:
        dao.delete(session, movement)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted movement {movement_id}")


def register_commands(cli):
    """Register movement commands with main CLI."""
    cli.add_command(movement_group)
