"""Account lookup provider."""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from raccount.database.base import BaseDAO, storage_guard
from raccount.database.mappers import account_to_domain
from raccount.database.models import Account
from raccount.domain.entities import Account as DomainAccount
from raccount.domain.errors import NotFoundError, account_not_found

logger = logging.getLogger(__name__)


class AccountDAO(BaseDAO):
    """Data access for accounts."""

    def insert(self, session: Session, name: str, balance: Decimal = Decimal("0")) -> int:
        """Create a new account. Returns account ID."""
        account = Account(name=name, balance=balance)
        with storage_guard(session, f"insert account '{name}'", commit=True):
            session.add(account)
            session.flush()
            account_id = account.id
        logger.info("Inserted account %s (%s)", account_id, name)
        return account_id

    def find(self, session: Session, account_id: int) -> DomainAccount:
        """Get account by ID."""
        with storage_guard(session, f"load account {account_id}"):
            account = session.query(Account).filter(Account.id == account_id).first()
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account_to_domain(account)

    def list_all(self, session: Session) -> list[DomainAccount]:
        """List all accounts ordered by ID."""
        with storage_guard(session, "list accounts"):
            accounts = session.query(Account).order_by(Account.id).all()
        return [account_to_domain(acc) for acc in accounts]

    def count(self, session: Session) -> int:
        with storage_guard(session, "count accounts"):
            return session.query(Account).count()
