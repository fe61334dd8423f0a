"""SQLAlchemy models for raccount database."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Numeric,
    Index,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class DecimalText(TypeDecorator):
    """Decimal stored as its exact string form.

    SQLite has no fixed-point type, so NUMERIC columns come back through
    float and get rescaled. Text keeps every digit and the sign.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class Account(Base):
    """Financial account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    balance = Column(Numeric(10, 2), default=0, nullable=False)


class Concept(Base):
    """Spending concept model."""

    __tablename__ = "concepts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)


class Movement(Base):
    """Movement model."""

    __tablename__ = "movements"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    amount = Column(DecimalText, nullable=False)
    final_balance = Column(DecimalText, nullable=False)
    movement_date = Column(Date, nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    concept_id = Column(Integer, ForeignKey("concepts.id"), nullable=False)

    # Serves both last-N listing and expense windows
    __table_args__ = (Index("ix_movements_account_date", "account_id", "movement_date"),)
