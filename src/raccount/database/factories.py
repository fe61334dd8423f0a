"""Database factory functions for creating session factories."""

import os
from pathlib import Path
from typing import Optional

from sqlalchemy.orm import sessionmaker, Session

from raccount.database.session import create_session_factory


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Resolve the SQLite database file path.

    Args:
        database_path: Explicit path. If None, checks RACCOUNT_DB_PATH
            environment variable, then defaults to ~/.raccount/raccount.db

    Returns:
        Path to the SQLite database file
    """
    if database_path is None:
        database_path = os.environ.get("RACCOUNT_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".raccount"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "raccount.db")

    return database_path


def create_sqlite_session_factory(database_path: Optional[str] = None) -> sessionmaker[Session]:
    """Create a session factory backed by a SQLite file.

    Args:
        database_path: Path to SQLite database file, resolved with
            resolve_database_path when None

    Returns:
        sessionmaker bound to the SQLite engine, schema already created
    """
    return create_session_factory(f"sqlite:///{resolve_database_path(database_path)}")
