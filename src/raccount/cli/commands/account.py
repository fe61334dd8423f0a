"""Account management commands."""

import click

from raccount.cli.error_handling import fail, handle_domain_error
from raccount.database.account_dao import AccountDAO
from raccount.domain.errors import DomainError
from raccount.utils.amount_parser import parse_amount


@click.group("account")
def account_group():
    """Manage accounts."""
    pass


@account_group.command("add")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--balance", default="0", help="Opening balance (e.g., 1500.00)")
@click.pass_context
def add_account(ctx, name: str, balance: str):
    """Create a new account.

    Examples:
        raccount account add "Checking"
        raccount account add "Savings" --balance 8000
    """
    session = ctx.obj["session"]

    try:
        opening_balance = parse_amount(balance)
    except ValueError as e:
        fail(ctx, f"Invalid balance: {e}")

    try:
        account_id = AccountDAO().insert(session, name=name, balance=opening_balance)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account '{name}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    session = ctx.obj["session"]

    accounts = AccountDAO().list_all(session)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(f"ID: {acc.id:3d} | {acc.name:20s} | Balance: {acc.balance}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group)
