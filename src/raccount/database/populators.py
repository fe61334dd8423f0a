"""Synthetic data for tests and demos."""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from raccount.database.account_dao import AccountDAO
from raccount.database.concept_dao import ConceptDAO
from raccount.database.movement_dao import MovementDAO
from raccount.domain.entities import Movement
from raccount.domain.errors import ValidationError, invalid_limit

logger = logging.getLogger(__name__)

# Reference data created by seed_reference_data: (name, opening balance)
DEFAULT_ACCOUNTS = [
    ("Checking", Decimal("1500.00")),
    ("Savings", Decimal("8000.00")),
    ("Credit Card", Decimal("0.00")),
    ("Cash", Decimal("120.00")),
]

DEFAULT_CONCEPTS = [
    "Groceries",
    "Restaurants",
    "Transport",
    "Utilities",
    "Salary",
    "Leisure",
]

# Cycled over to vary generated amounts
SAMPLE_AMOUNTS = [
    Decimal("-12.50"),
    Decimal("-3.40"),
    Decimal("-45.99"),
    Decimal("250.00"),
    Decimal("-7.25"),
    Decimal("-89.10"),
]


def seed_reference_data(
    session: Session,
    accounts: Optional[AccountDAO] = None,
    concepts: Optional[ConceptDAO] = None,
) -> tuple[int, int]:
    """Create default accounts and concepts when their tables are empty.

    Returns:
        Tuple of (accounts created, concepts created)
    """
    accounts = accounts if accounts is not None else AccountDAO()
    concepts = concepts if concepts is not None else ConceptDAO()

    created_accounts = 0
    if accounts.count(session) == 0:
        for name, balance in DEFAULT_ACCOUNTS:
            accounts.insert(session, name=name, balance=balance)
            created_accounts += 1

    created_concepts = 0
    if concepts.count(session) == 0:
        for name in DEFAULT_CONCEPTS:
            concepts.insert(session, name=name)
            created_concepts += 1

    return created_accounts, created_concepts


class MovementPopulator:
    """Bulk-inserts synthetic movements over existing accounts and concepts."""

    def __init__(
        self,
        movements: Optional[MovementDAO] = None,
        accounts: Optional[AccountDAO] = None,
        concepts: Optional[ConceptDAO] = None,
    ):
        self.movements = movements if movements is not None else MovementDAO(accounts, concepts)
        self.accounts = accounts if accounts is not None else self.movements.accounts
        self.concepts = concepts if concepts is not None else self.movements.concepts

    def populate(self, session: Session, n: int, start: Optional[date] = None) -> list[int]:
        """Insert n movements and return their IDs.

        Movements are spread round-robin over every account and concept.
        Dates walk back one day per movement from start (default today), and
        each account keeps its own running final balance.

        Raises:
            ValidationError: If n is not a non-negative integer, or no
                account or no concept exists
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValidationError(invalid_limit(n))

        accounts = self.accounts.list_all(session)
        concepts = self.concepts.list_all(session)
        if not accounts or not concepts:
            raise ValidationError("Populating movements requires at least one account and one concept")

        if start is None:
            start = date.today()
        balances = {acc.id: acc.balance for acc in accounts}

        ids = []
        for i in range(n):
            account = accounts[i % len(accounts)]
            amount = SAMPLE_AMOUNTS[i % len(SAMPLE_AMOUNTS)]
            balances[account.id] += amount
            movement = Movement(
                description=f"Generated movement {i + 1}",
                amount=amount,
                final_balance=balances[account.id],
                movement_date=start - timedelta(days=i),
                account=account,
                concept=concepts[i % len(concepts)],
            )
            ids.append(self.movements.insert(session, movement))

        logger.info("Populated %d movements", len(ids))
        return ids
