"""Engine and session lifecycle helpers.

Sessions are owned by the caller: open one with ``session_scope`` and pass it
to every DAO call. DAOs commit their own writes but never close the session.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from raccount.database.models import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine, enforcing foreign keys on SQLite connections."""
    engine = create_engine(database_url, echo=echo)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory, creating missing tables."""
    engine = create_db_engine(database_url)
    Base.metadata.create_all(engine)
    logger.debug("Schema ready on %s", engine.url.render_as_string(hide_password=True))
    return sessionmaker(bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Open a session and close it on every exit path.

    Pending work is rolled back if the block raises.
    """
    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
