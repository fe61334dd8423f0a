"""Mapper functions to convert between domain models and SQLAlchemy models.

Decoding stops at MovementRow: resolving account and concept ids into full
objects is the repository's hydration step.
"""

from decimal import Decimal

from raccount.domain import entities as domain
from raccount.database.models import (
    Account as ORMAccount,
    Concept as ORMConcept,
    Movement as ORMMovement,
)


def to_decimal(value) -> Decimal:
    """Coerce a numeric column value to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        balance=to_decimal(orm_account.balance),
    )


def concept_to_domain(orm_concept: ORMConcept) -> domain.Concept:
    """Convert SQLAlchemy Concept model to domain Concept entity."""
    return domain.Concept(id=orm_concept.id, name=orm_concept.name)


def movement_to_row(orm_movement: ORMMovement) -> domain.MovementRow:
    """Decode SQLAlchemy Movement model into a MovementRow."""
    return domain.MovementRow(
        id=orm_movement.id,
        description=orm_movement.description,
        amount=to_decimal(orm_movement.amount),
        final_balance=to_decimal(orm_movement.final_balance),
        movement_date=orm_movement.movement_date,
        account_id=orm_movement.account_id,
        concept_id=orm_movement.concept_id,
    )


def row_to_movement(
    row: domain.MovementRow, account: domain.Account, concept: domain.Concept
) -> domain.Movement:
    """Build a hydrated Movement from a row and its resolved references."""
    return domain.Movement(
        id=row.id,
        description=row.description,
        amount=row.amount,
        final_balance=row.final_balance,
        movement_date=row.movement_date,
        account=account,
        concept=concept,
    )


def movement_to_orm(movement: domain.Movement) -> ORMMovement:
    """Build a new SQLAlchemy Movement from a domain Movement (id left unset)."""
    orm_movement = ORMMovement()
    apply_movement(orm_movement, movement)
    return orm_movement


def apply_movement(orm_movement: ORMMovement, movement: domain.Movement) -> None:
    """Copy every mutable field of a domain Movement onto a SQLAlchemy Movement."""
    orm_movement.description = movement.description
    orm_movement.amount = to_decimal(movement.amount)
    orm_movement.final_balance = to_decimal(movement.final_balance)
    orm_movement.movement_date = movement.movement_date
    orm_movement.account_id = movement.account.id
    orm_movement.concept_id = movement.concept.id
