"""Domain layer for raccount application."""

from raccount.domain.entities import NO_ID, Account, Concept, Movement, MovementRow
from raccount.domain.errors import (
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

__all__ = [
    "NO_ID",
    "Account",
    "Concept",
    "Movement",
    "MovementRow",
    "DomainError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
]
