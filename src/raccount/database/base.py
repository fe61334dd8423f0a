"""Abstract data-access interface shared by all DAOs."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from raccount.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(session: Session, action: str, commit: bool = False) -> Iterator[None]:
    """Translate storage failures into PersistenceError.

    Args:
        session: Borrowed session the block operates on
        action: Short description used in log and error messages
        commit: If True, commit the session when the block completes

    Raises:
        PersistenceError: If SQLAlchemy raises inside the block or on commit.
            The session is rolled back first, so no partial write survives.
    """
    try:
        yield
        if commit:
            session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.warning("Rolled back %s: %s", action, e)
        raise PersistenceError(f"Could not {action}: {e}") from e


class BaseDAO(ABC):
    """Lookup contract every DAO fulfils.

    All operations borrow the caller's session; none of them close it.
    """

    @abstractmethod
    def find(self, session: Session, entity_id: int) -> Any:
        """Get entity by ID. Raises NotFoundError if missing."""
        pass

    @abstractmethod
    def list_all(self, session: Session) -> list[Any]:
        """List all entities."""
        pass

    @abstractmethod
    def count(self, session: Session) -> int:
        """Count persisted entities."""
        pass
