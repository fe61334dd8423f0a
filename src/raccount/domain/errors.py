"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Caller supplied incomplete or invalid input."""


class NotFoundError(DomainError):
    """Lookup by identifier matched no row."""


class PersistenceError(DomainError):
    """Storage rejected a read or write (constraint, I/O, missing row on write)."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def concept_not_found(concept_id: int) -> str:
    """Return message for missing concept."""
    return f"Concept {concept_id} not found"


def movement_not_found(movement_id: int) -> str:
    """Return message for missing movement."""
    return f"Movement {movement_id} not found"


def incomplete_movement(missing: list[str]) -> str:
    """Return message for a movement with unset fields."""
    return f"Movement is missing required fields: {', '.join(missing)}"


def movement_already_persisted(movement_id: int) -> str:
    """Return message when inserting a movement that already has an identifier."""
    return f"Movement already has identifier {movement_id}; use update instead"


def invalid_limit(n: object) -> str:
    """Return message for an invalid number of movements to list or generate."""
    return f"Number of movements must be a non-negative integer, got {n!r}"
