"""Expense report command."""

from datetime import date

import click

from raccount.cli.error_handling import fail, handle_domain_error
from raccount.database.movement_dao import MovementDAO
from raccount.domain.errors import DomainError
from raccount.utils.date_utils import month_range, parse_date


def resolve_expense_window(
    ctx: click.Context,
    *,
    month: int | None,
    year: int | None,
    start_date: str | None,
    end_date: str | None,
) -> tuple[date, date]:
    """Resolve the expense window from a month or from explicit dates.

    Defaults to the current month.
    """
    if (month is not None or year is not None) and (start_date or end_date):
        fail(ctx, "--month/--year cannot be combined with --start-date or --end-date.")

    if start_date or end_date:
        if not (start_date and end_date):
            fail(ctx, "--start-date and --end-date must be given together.")
        try:
            return parse_date(start_date), parse_date(end_date)
        except ValueError as e:
            fail(ctx, f"Invalid date: {e}")

    if month is None:
        month = date.today().month
    return month_range(month, year)


@click.command("expenses")
@click.argument("account_id", type=int)
@click.argument("concept_id", type=int)
@click.option("--month", type=click.IntRange(1, 12), help="Month number (defaults to current month)")
@click.option("--year", type=int, help="Year for --month (defaults to current year)")
@click.option("--start-date", help="Window start (YYYY-MM-DD), inclusive")
@click.option("--end-date", help="Window end (YYYY-MM-DD), inclusive")
@click.pass_context
def expenses(
    ctx,
    account_id: int,
    concept_id: int,
    month: int | None,
    year: int | None,
    start_date: str | None,
    end_date: str | None,
):
    """Total movement amounts of an account and concept over a date window.

    Examples:
        raccount expenses 1 2
        raccount expenses 1 2 --month 5 --year 1980
        raccount expenses 1 2 --start-date 2024-01-01 --end-date 2024-03-31
    """
    session = ctx.obj["session"]
    dao = MovementDAO()

    start, end = resolve_expense_window(
        ctx, month=month, year=year, start_date=start_date, end_date=end_date
    )

    try:
        account = dao.accounts.find(session, account_id)
        concept = dao.concepts.find(session, concept_id)
        total = dao.get_expenses(session, account, concept, start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Expenses for '{account.name}' / '{concept.name}' from {start} to {end}: {total}")


def register_commands(cli):
    """Register expenses command with main CLI."""
    cli.add_command(expenses)
