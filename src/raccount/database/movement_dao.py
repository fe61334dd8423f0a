"""Movement repository: CRUD, last-N listing and expense aggregation."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from raccount.database.account_dao import AccountDAO
from raccount.database.base import BaseDAO, storage_guard
from raccount.database.concept_dao import ConceptDAO
from raccount.database.mappers import (
    apply_movement,
    movement_to_orm,
    movement_to_row,
    row_to_movement,
    to_decimal,
)
from raccount.database.models import Movement
from raccount.domain.entities import (
    Account as DomainAccount,
    Concept as DomainConcept,
    Movement as DomainMovement,
    MovementRow,
)
from raccount.domain.errors import (
    NotFoundError,
    PersistenceError,
    ValidationError,
    account_not_found,
    concept_not_found,
    incomplete_movement,
    invalid_limit,
    movement_already_persisted,
    movement_not_found,
)
from raccount.utils.date_utils import month_range

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class MovementDAO(BaseDAO):
    """Data access for movements.

    Every operation borrows the caller's session. Account and concept
    references are resolved through the lookup providers given at
    construction.
    """

    def __init__(self, accounts: Optional[AccountDAO] = None, concepts: Optional[ConceptDAO] = None):
        """Initialize movement DAO.

        Args:
            accounts: Account lookup provider used for hydration
            concepts: Concept lookup provider used for hydration
        """
        self.accounts = accounts if accounts is not None else AccountDAO()
        self.concepts = concepts if concepts is not None else ConceptDAO()

    # Repository operations
    def insert(self, session: Session, movement: DomainMovement) -> int:
        """Persist a new movement. Returns the assigned movement ID.

        Raises:
            ValidationError: If a required field is unset or the movement
                already has an identifier
            PersistenceError: If storage rejects the row (e.g. unknown
                account or concept)
        """
        self._require_complete(movement)
        if movement.is_persisted:
            raise ValidationError(movement_already_persisted(movement.id))

        orm_movement = movement_to_orm(movement)
        with storage_guard(session, "insert movement", commit=True):
            session.add(orm_movement)
            session.flush()
            movement_id = orm_movement.id
        logger.info("Inserted movement %s", movement_id)
        return movement_id

    def find(self, session: Session, movement_id: int) -> DomainMovement:
        """Get a hydrated movement by ID.

        Raises:
            NotFoundError: If no movement has this ID
        """
        with storage_guard(session, f"load movement {movement_id}"):
            orm_movement = session.query(Movement).filter(Movement.id == movement_id).first()
        if orm_movement is None:
            raise NotFoundError(movement_not_found(movement_id))
        return self._hydrate(session, movement_to_row(orm_movement))

    def update(self, session: Session, movement: DomainMovement) -> None:
        """Overwrite every mutable field of the stored movement.

        Raises:
            ValidationError: If a required field is unset
            PersistenceError: If the movement ID does not exist or the write fails
        """
        self._require_complete(movement)
        with storage_guard(session, f"update movement {movement.id}", commit=True):
            orm_movement = session.query(Movement).filter(Movement.id == movement.id).first()
            if orm_movement is None:
                raise PersistenceError(movement_not_found(movement.id))
            apply_movement(orm_movement, movement)
        logger.info("Updated movement %s", movement.id)

    def delete(self, session: Session, movement: DomainMovement) -> None:
        """Physically remove the stored movement.

        Raises:
            PersistenceError: If the movement ID does not exist or the delete fails
        """
        with storage_guard(session, f"delete movement {movement.id}", commit=True):
            deleted = (
                session.query(Movement)
                .filter(Movement.id == movement.id)
                .delete(synchronize_session=False)
            )
            if deleted == 0:
                raise PersistenceError(movement_not_found(movement.id))
        logger.info("Deleted movement %s", movement.id)

    def list_all(self, session: Session) -> list[DomainMovement]:
        """List every movement, hydrated, ordered by ID."""
        with storage_guard(session, "list movements"):
            orm_movements = session.query(Movement).order_by(Movement.id).all()
        return self._hydrate_all(session, [movement_to_row(m) for m in orm_movements])

    def count(self, session: Session) -> int:
        """Count persisted movements."""
        with storage_guard(session, "count movements"):
            return session.query(Movement).count()

    # Ordered retrieval
    def list_last_n(self, session: Session, account: DomainAccount, n: int) -> list[DomainMovement]:
        """List the n most recent movements of an account, newest first.

        Ties on movement date are broken by ID, highest first. Fewer than n
        movements returns all of them.

        Raises:
            ValidationError: If n is not a non-negative integer
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValidationError(invalid_limit(n))
        if n == 0:
            return []

        with storage_guard(session, f"list last {n} movements of account {account.id}"):
            orm_movements = (
                session.query(Movement)
                .filter(Movement.account_id == account.id)
                .order_by(Movement.movement_date.desc(), Movement.id.desc())
                .limit(n)
                .all()
            )
        logger.debug("Loaded %d of last %d movements for account %s", len(orm_movements), n, account.id)
        return self._hydrate_all(session, [movement_to_row(m) for m in orm_movements])

    # Expense aggregation
    def get_expenses(
        self,
        session: Session,
        account: DomainAccount,
        concept: DomainConcept,
        start: date,
        end: date,
    ) -> Decimal:
        """Sum movement amounts for an account and concept within [start, end].

        Returns zero when nothing matches, including when start > end.
        """
        if start > end:
            logger.debug("Empty expense window %s > %s", start, end)
            return ZERO

        with storage_guard(session, f"sum expenses of account {account.id} concept {concept.id}"):
            amounts = (
                session.query(Movement.amount)
                .filter(
                    Movement.account_id == account.id,
                    Movement.concept_id == concept.id,
                    Movement.movement_date >= start,
                    Movement.movement_date <= end,
                )
                .all()
            )
        # Amounts are stored as text, summed here to stay exact
        return sum((to_decimal(amount) for (amount,) in amounts), ZERO)

    def get_monthly_expenses(
        self,
        session: Session,
        account: DomainAccount,
        concept: DomainConcept,
        month: int,
        year: Optional[int] = None,
    ) -> Decimal:
        """Sum expenses over a calendar month (current year by default)."""
        start, end = month_range(month, year)
        return self.get_expenses(session, account, concept, start, end)

    # Hydration
    def _hydrate(self, session: Session, row: MovementRow) -> DomainMovement:
        account = self.accounts.find(session, row.account_id)
        concept = self.concepts.find(session, row.concept_id)
        return row_to_movement(row, account, concept)

    def _hydrate_all(self, session: Session, rows: list[MovementRow]) -> list[DomainMovement]:
        """Hydrate many rows with one lookup per provider."""
        if not rows:
            return []
        accounts = {acc.id: acc for acc in self.accounts.list_all(session)}
        concepts = {c.id: c for c in self.concepts.list_all(session)}

        movements = []
        for row in rows:
            if row.account_id not in accounts:
                raise NotFoundError(account_not_found(row.account_id))
            if row.concept_id not in concepts:
                raise NotFoundError(concept_not_found(row.concept_id))
            movements.append(row_to_movement(row, accounts[row.account_id], concepts[row.concept_id]))
        return movements

    @staticmethod
    def _require_complete(movement: DomainMovement) -> None:
        missing = movement.missing_fields()
        if missing:
            raise ValidationError(incomplete_movement(missing))
