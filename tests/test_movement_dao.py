"""Tests for the movement repository operations."""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from raccount.domain.entities import NO_ID, Account, Concept, Movement
from raccount.domain.errors import NotFoundError, PersistenceError, ValidationError


class TestInsertAndFind:
    """Tests for insert and find."""

    def test_insert_returns_valid_id(self, session, movement_dao, make_movement):
        """Test that insert assigns a real identifier and adds one row."""
        before = movement_dao.count(session)

        movement_id = movement_dao.insert(session, make_movement())

        assert movement_id != NO_ID
        assert movement_id > 0
        assert movement_dao.count(session) == before + 1

    def test_find_returns_equal_movement(self, session, movement_dao, make_movement):
        """Test that find(insert(m)) equals m with the assigned id."""
        movement = make_movement()
        movement_id = movement_dao.insert(session, movement)

        found = movement_dao.find(session, movement_id)

        assert found == movement.with_id(movement_id)

    def test_find_hydrates_account_and_concept(
        self, session, movement_dao, make_movement, sample_account, sample_concept
    ):
        """Test that find resolves references to full objects."""
        movement_id = movement_dao.insert(session, make_movement())

        found = movement_dao.find(session, movement_id)

        assert isinstance(found.account, Account)
        assert isinstance(found.concept, Concept)
        assert found.account == sample_account
        assert found.account.name == "Test Account"
        assert found.concept.name == "Groceries"

    def test_find_preserves_values(self, session, movement_dao, make_movement):
        """Test that stored attributes come back unchanged."""
        movement_id = movement_dao.insert(
            session,
            make_movement(amount=Decimal("-45.99"), final_balance=Decimal("1234.56")),
        )

        found = movement_dao.find(session, movement_id)

        assert found.description == "TEST description"
        assert found.amount == Decimal("-45.99")
        assert found.final_balance == Decimal("1234.56")
        assert found.movement_date == date(1980, 5, 15)
        assert isinstance(found.amount, Decimal)

    @pytest.mark.parametrize(
        "amount,final_balance",
        [
            (Decimal("1.005"), Decimal("0.125")),
            (Decimal("-0.3333"), Decimal("99.99999")),
            (Decimal("123456789012345.67"), Decimal("987654321098765.4321")),
            (Decimal("-45"), Decimal("-1200")),
            (Decimal("0"), Decimal("0.000")),
        ],
    )
    def test_find_returns_exact_amounts(
        self, session, movement_dao, make_movement, amount, final_balance
    ):
        """Test that amounts of any scale or magnitude come back unchanged."""
        movement = make_movement(amount=amount, final_balance=final_balance)

        movement_id = movement_dao.insert(session, movement)
        found = movement_dao.find(session, movement_id)

        assert found == movement.with_id(movement_id)
        assert str(found.amount) == str(amount)
        assert str(found.final_balance) == str(final_balance)

    def test_description_with_apostrophe(self, session, movement_dao, make_movement):
        """Test that quotes in the description round-trip."""
        movement = make_movement(description="Kiddy's class")

        movement_id = movement_dao.insert(session, movement)

        assert movement_id != NO_ID
        assert movement_dao.count(session) == 1
        assert movement_dao.find(session, movement_id).description == "Kiddy's class"

    def test_description_with_sql_like_text(self, session, movement_dao, make_movement):
        """Test that SQL fragments are stored verbatim."""
        text = "'; DROP TABLE movements; --"
        movement_id = movement_dao.insert(session, make_movement(description=text))

        assert movement_dao.find(session, movement_id).description == text
        assert movement_dao.count(session) == 1

    def test_ids_are_unique(self, session, movement_dao, make_movement):
        """Test that inserting the same movement twice gives two ids."""
        movement = make_movement()

        first = movement_dao.insert(session, movement)
        second = movement_dao.insert(session, movement)

        assert first != second

    def test_find_missing_raises_not_found(self, session, movement_dao):
        """Test that find on an unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Movement 999 not found"):
            movement_dao.find(session, 999)


class TestInsertValidation:
    """Tests for insert preconditions and storage failures."""

    @pytest.mark.parametrize(
        "field_name",
        ["description", "amount", "final_balance", "movement_date", "account", "concept"],
    )
    def test_missing_field_raises_validation_error(
        self, session, movement_dao, make_movement, field_name
    ):
        """Test that every required field is checked before insert."""
        movement = make_movement(**{field_name: None})

        with pytest.raises(ValidationError, match=field_name):
            movement_dao.insert(session, movement)
        assert movement_dao.count(session) == 0

    def test_insert_persisted_movement_rejected(self, session, movement_dao, make_movement):
        """Test that a movement that already carries an id cannot be inserted."""
        movement_id = movement_dao.insert(session, make_movement())
        stored = movement_dao.find(session, movement_id)

        with pytest.raises(ValidationError, match="already has identifier"):
            movement_dao.insert(session, stored)
        assert movement_dao.count(session) == 1

    def test_unknown_account_raises_persistence_error(
        self, session, movement_dao, make_movement
    ):
        """Test that a dangling account reference is rejected by storage."""
        ghost = Account(id=999, name="Ghost")

        with pytest.raises(PersistenceError):
            movement_dao.insert(session, make_movement(account=ghost))
        assert movement_dao.count(session) == 0

    def test_unknown_concept_raises_persistence_error(
        self, session, movement_dao, make_movement
    ):
        """Test that a dangling concept reference is rejected by storage."""
        ghost = Concept(id=999, name="Ghost")

        with pytest.raises(PersistenceError):
            movement_dao.insert(session, make_movement(concept=ghost))
        assert movement_dao.count(session) == 0

    def test_session_usable_after_failed_insert(self, session, movement_dao, make_movement):
        """Test that a rejected insert is rolled back and the session keeps working."""
        with pytest.raises(PersistenceError):
            movement_dao.insert(session, make_movement(account=Account(id=999, name="Ghost")))

        movement_id = movement_dao.insert(session, make_movement())

        assert movement_dao.find(session, movement_id).id == movement_id
        assert movement_dao.count(session) == 1

    def test_failed_insert_logs_rollback(self, session, movement_dao, make_movement, caplog):
        """Test that a rolled-back write is logged as a warning."""
        with caplog.at_level(logging.WARNING, logger="raccount"):
            with pytest.raises(PersistenceError):
                movement_dao.insert(session, make_movement(concept=Concept(id=999, name="Ghost")))

        assert "Rolled back insert movement" in caplog.text


class TestUpdate:
    """Tests for update."""

    def test_update_description(self, session, movement_dao, make_movement):
        """Test that an updated description is stored."""
        movement = make_movement()
        movement = movement.with_id(movement_dao.insert(session, movement))

        movement_dao.update(session, replace(movement, description="new desc"))

        assert movement_dao.find(session, movement.id).description == "new desc"

    def test_update_overwrites_all_fields(
        self, session, movement_dao, make_movement, other_account, other_concept
    ):
        """Test that update writes every mutable field."""
        movement = make_movement()
        movement = movement.with_id(movement_dao.insert(session, movement))
        changed = replace(
            movement,
            description="changed",
            amount=Decimal("-10.00"),
            final_balance=Decimal("45.00"),
            movement_date=date(2024, 2, 29),
            account=other_account,
            concept=other_concept,
        )

        movement_dao.update(session, changed)

        assert movement_dao.find(session, movement.id) == changed

    def test_update_missing_id_raises_persistence_error(
        self, session, movement_dao, make_movement
    ):
        """Test that updating an unknown id fails."""
        with pytest.raises(PersistenceError, match="Movement 999 not found"):
            movement_dao.update(session, make_movement().with_id(999))

    def test_update_unsaved_movement_raises_persistence_error(
        self, session, movement_dao, make_movement
    ):
        """Test that updating a movement without identifier fails."""
        with pytest.raises(PersistenceError):
            movement_dao.update(session, make_movement())

    def test_update_incomplete_raises_validation_error(
        self, session, movement_dao, make_movement
    ):
        """Test that update checks required fields."""
        movement = make_movement()
        movement = movement.with_id(movement_dao.insert(session, movement))

        with pytest.raises(ValidationError):
            movement_dao.update(session, replace(movement, concept=None))

    def test_failed_update_leaves_row_unchanged(self, session, movement_dao, make_movement):
        """Test that a rejected update is rolled back."""
        movement = make_movement()
        movement = movement.with_id(movement_dao.insert(session, movement))

        with pytest.raises(PersistenceError):
            movement_dao.update(
                session,
                replace(movement, description="lost", account=Account(id=999, name="Ghost")),
            )

        assert movement_dao.find(session, movement.id) == movement


class TestDelete:
    """Tests for delete."""

    def test_insert_then_delete_restores_count(self, session, movement_dao, make_movement):
        """Test that deleting an inserted movement restores the count."""
        before = movement_dao.count(session)
        movement = make_movement()
        movement = movement.with_id(movement_dao.insert(session, movement))

        movement_dao.delete(session, movement)

        assert movement_dao.count(session) == before

    def test_deleted_movement_not_found(self, session, movement_dao, make_movement):
        """Test that a deleted movement can no longer be found."""
        movement = make_movement()
        movement = movement.with_id(movement_dao.insert(session, movement))

        movement_dao.delete(session, movement)

        with pytest.raises(NotFoundError):
            movement_dao.find(session, movement.id)

    def test_delete_only_removes_target(self, session, movement_dao, make_movement):
        """Test that other rows survive a delete."""
        keep = make_movement(description="keep")
        keep = keep.with_id(movement_dao.insert(session, keep))
        drop = make_movement(description="drop")
        drop = drop.with_id(movement_dao.insert(session, drop))

        movement_dao.delete(session, drop)

        assert movement_dao.list_all(session) == [keep]

    def test_delete_missing_id_raises_persistence_error(
        self, session, movement_dao, make_movement
    ):
        """Test that deleting an unknown id fails like update does."""
        movement_dao.insert(session, make_movement())

        with pytest.raises(PersistenceError, match="Movement 999 not found"):
            movement_dao.delete(session, make_movement().with_id(999))
        assert movement_dao.count(session) == 1

    def test_delete_twice_raises(self, session, movement_dao, make_movement):
        """Test that a second delete of the same movement fails."""
        movement = make_movement()
        movement = movement.with_id(movement_dao.insert(session, movement))
        movement_dao.delete(session, movement)

        with pytest.raises(PersistenceError):
            movement_dao.delete(session, movement)


class TestListAllAndCount:
    """Tests for list_all and count."""

    def test_empty(self, session, movement_dao):
        """Test listing with no movements."""
        assert movement_dao.list_all(session) == []
        assert movement_dao.count(session) == 0

    def test_count_matches_list_all(self, session, movement_dao, make_movement):
        """Test that count always equals the length of list_all."""
        for i in range(7):
            movement_dao.insert(session, make_movement(description=f"m{i}"))

        assert movement_dao.count(session) == len(movement_dao.list_all(session)) == 7

    def test_list_all_returns_hydrated_movements(
        self, session, movement_dao, make_movement, other_account, other_concept
    ):
        """Test that list_all resolves references for every movement."""
        first = make_movement()
        first = first.with_id(movement_dao.insert(session, first))
        second = make_movement(account=other_account, concept=other_concept)
        second = second.with_id(movement_dao.insert(session, second))

        movements = movement_dao.list_all(session)

        assert movements == [first, second]
        assert all(isinstance(m, Movement) for m in movements)
        assert movements[1].account.name == "Other Account"
        assert movements[1].concept.name == "Leisure"
