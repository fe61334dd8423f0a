"""Database layer for raccount application."""

from raccount.database.account_dao import AccountDAO
from raccount.database.concept_dao import ConceptDAO
from raccount.database.factories import create_sqlite_session_factory
from raccount.database.movement_dao import MovementDAO
from raccount.database.session import create_session_factory, session_scope

__all__ = [
    "AccountDAO",
    "ConceptDAO",
    "MovementDAO",
    "create_session_factory",
    "create_sqlite_session_factory",
    "session_scope",
]
