"""Shared pytest fixtures for raccount tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from raccount.database.account_dao import AccountDAO
from raccount.database.concept_dao import ConceptDAO
from raccount.database.factories import create_sqlite_session_factory
from raccount.database.movement_dao import MovementDAO
from raccount.database.session import session_scope
from raccount.domain.entities import Movement


@pytest.fixture
def db_path():
    """Create a temporary database file for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    yield path

    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def session_factory(db_path):
    """Create a session factory bound to the temporary database."""
    factory = create_sqlite_session_factory(database_path=db_path)
    yield factory
    factory.kw["bind"].dispose()


@pytest.fixture
def session(session_factory):
    """Open a session for the duration of a test."""
    with session_scope(session_factory) as session:
        yield session


@pytest.fixture
def account_dao():
    return AccountDAO()


@pytest.fixture
def concept_dao():
    return ConceptDAO()


@pytest.fixture
def movement_dao(account_dao, concept_dao):
    """Create a MovementDAO wired to the lookup DAOs."""
    return MovementDAO(accounts=account_dao, concepts=concept_dao)


@pytest.fixture
def sample_account(session, account_dao):
    """Create a sample account for testing."""
    account_id = account_dao.insert(session, name="Test Account", balance=Decimal("100.00"))
    return account_dao.find(session, account_id)


@pytest.fixture
def other_account(session, account_dao):
    """Create a second account for testing."""
    account_id = account_dao.insert(session, name="Other Account")
    return account_dao.find(session, account_id)


@pytest.fixture
def sample_concept(session, concept_dao):
    """Create a sample concept for testing."""
    concept_id = concept_dao.insert(session, name="Groceries")
    return concept_dao.find(session, concept_id)


@pytest.fixture
def other_concept(session, concept_dao):
    """Create a second concept for testing."""
    concept_id = concept_dao.insert(session, name="Leisure")
    return concept_dao.find(session, concept_id)


@pytest.fixture
def make_movement(sample_account, sample_concept):
    """Build unsaved movements; keyword arguments override the defaults."""

    def _make(**overrides) -> Movement:
        values = {
            "description": "TEST description",
            "amount": Decimal("3.4"),
            "final_balance": Decimal("55"),
            "movement_date": date(1980, 5, 15),
            "account": sample_account,
            "concept": sample_concept,
        }
        values.update(overrides)
        return Movement(**values)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
