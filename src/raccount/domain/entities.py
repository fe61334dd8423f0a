"""Domain model entities for raccount.

These are pure data classes representing business concepts, independent of
database schema. Movements embed fully hydrated Account and Concept objects;
MovementRow is the undecorated storage shape carrying only foreign-key ids.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from raccount.domain.errors import ValidationError

# Identifier of a movement that has not been persisted yet
NO_ID = -1


@dataclass(frozen=True)
class Account:
    """Financial account domain entity."""

    id: int
    name: str
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class Concept:
    """Spending concept (classification label) domain entity."""

    id: int
    name: str


@dataclass(frozen=True)
class MovementRow:
    """Movement as decoded from storage, before account/concept hydration."""

    id: int
    description: str
    amount: Decimal
    final_balance: Decimal
    movement_date: date
    account_id: int
    concept_id: int


@dataclass(frozen=True)
class Movement:
    """Movement (financial transaction) domain entity.

    Equality covers the identifier, every attribute and the referenced
    account and concept.
    """

    description: Optional[str]
    amount: Optional[Decimal]
    final_balance: Optional[Decimal]
    movement_date: Optional[date]
    account: Optional[Account]
    concept: Optional[Concept]
    id: int = field(default=NO_ID)

    @property
    def is_persisted(self) -> bool:
        """True once storage has assigned an identifier."""
        return self.id != NO_ID

    def with_id(self, movement_id: int) -> "Movement":
        """Return a copy carrying the identifier assigned by storage.

        Raises:
            ValidationError: If this movement already has an identifier
        """
        if self.is_persisted:
            raise ValidationError(f"Movement identifier {self.id} cannot be reassigned")
        return replace(self, id=movement_id)

    def missing_fields(self) -> list[str]:
        """Names of required fields that are still unset."""
        required = {
            "description": self.description,
            "amount": self.amount,
            "final_balance": self.final_balance,
            "movement_date": self.movement_date,
            "account": self.account,
            "concept": self.concept,
        }
        return [name for name, value in required.items() if value is None]
