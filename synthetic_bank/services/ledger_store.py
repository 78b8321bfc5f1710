"""
Ledger store: the single source of truth for accounts and
transactions.

Rules enforced here:
1. Every appended transaction gets the next value of a
   store-wide sequence. The sequence is the causal order.
2. A balance-affecting write reads the account balance,
   computes balance_after and writes the new balance as one
   critical section, guarded by a lock per account.
3. Accounts and transactions are never deleted. The only
   fields that change after creation are the account's
   balance, available_balance and last_updated.

No other service writes to the ledger directly.
"""

import itertools
import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal

from sqlalchemy import select, func, text
from sqlalchemy.orm import Session

from synthetic_bank.exceptions import NotFoundError
from synthetic_bank.models.account import Account
from synthetic_bank.models.base import (
    Base,
    build_engine,
    build_session_factory,
)
from synthetic_bank.models.transaction import Transaction

logger = logging.getLogger(__name__)


class LedgerStore:
    """
    Process-wide store of accounts and transactions.

    Objects returned by the store are detached from any session.
    They are snapshots: re-read an account to see a newer balance.
    """

    def __init__(self, database_url: str = "sqlite://"):
        self.engine = build_engine(database_url)
        Base.metadata.create_all(bind=self.engine)
        self._session_factory = build_session_factory(self.engine)

        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self._sequence_guard = threading.Lock()
        self._sequence = itertools.count(self._max_sequence() + 1)

    # --- Internals ---

    def _max_sequence(self) -> int:
        with self._session_factory() as db:
            return db.execute(
                select(func.coalesce(func.max(Transaction.sequence), 0))
            ).scalar()

    def _next_sequence(self) -> int:
        with self._sequence_guard:
            return next(self._sequence)

    def _assign_sequence(self, transactions: list[Transaction]) -> None:
        for transaction in transactions:
            transaction.sequence = self._next_sequence()

    @contextmanager
    def account_lock(self, account_id: str):
        """Critical section for balance-affecting writes to one account."""
        with self._locks_guard:
            lock = self._locks.setdefault(account_id, threading.Lock())
        with lock:
            yield

    @contextmanager
    def session(self):
        """Read-only session for queries over the ledger."""
        with self._session_factory() as db:
            yield db

    def _require_account(self, db: Session, account_id: str) -> Account:
        account = db.get(Account, account_id)
        if account is None:
            raise NotFoundError(f"Account {account_id} not found")
        return account

    # --- Writes ---

    def put_account(self, account: Account) -> Account:
        """Store a new account as it is."""
        with self._session_factory.begin() as db:
            db.add(account)
        return account

    def put_transactions(
        self, transactions: list[Transaction]
    ) -> list[Transaction]:
        """
        Append transactions in the order given.

        The caller must already have computed balance_after for
        each of them.
        """
        with self._session_factory.begin() as db:
            self._assign_sequence(transactions)
            db.add_all(transactions)
        return transactions

    def record_history(
        self, account: Account, transactions: list[Transaction]
    ) -> Account:
        """
        Store a freshly generated account together with its history.

        Both are written in one database transaction, so an
        account never becomes visible without the transactions
        that produced its balance.
        """
        with self.account_lock(account.id):
            with self._session_factory.begin() as db:
                db.add(account)
                db.flush()
                self._assign_sequence(transactions)
                db.add_all(transactions)
        logger.info(
            "Stored account %s with %d transactions",
            account.id, len(transactions),
        )
        return account

    def apply_transaction(
        self,
        account_id: str,
        transaction: Transaction,
        hold: Decimal = Decimal("0.00"),
    ) -> Transaction:
        """
        Apply one transaction to an account's current balance.

        Raises NotFoundError if the account does not exist. The
        new transaction is the latest in causal order and, being
        dated now, the newest in display order too.
        """
        with self.account_lock(account_id):
            with self._session_factory.begin() as db:
                account = self._require_account(db, account_id)

                balance_after = account.balance + transaction.signed_amount
                transaction.account_id = account.id
                transaction.balance_after = balance_after
                transaction.sequence = self._next_sequence()

                account.balance = balance_after
                account.available_balance = balance_after - hold
                account.last_updated = datetime.utcnow()

                db.add(transaction)
        logger.info(
            "Applied %s of %s to account %s, balance now %s",
            transaction.type.value, transaction.amount,
            account_id, transaction.balance_after,
        )
        return transaction

    # --- Reads ---

    def get_account(self, account_id: str) -> Account:
        with self._session_factory() as db:
            return self._require_account(db, account_id)

    def list_accounts(self) -> list[Account]:
        """All accounts, in the order they were created."""
        with self._session_factory() as db:
            accounts = db.execute(
                select(Account).order_by(Account.created_at, Account.id)
            ).scalars().all()
            return list(accounts)

    def get_transaction(self, transaction_id: str) -> Transaction:
        with self._session_factory() as db:
            transaction = db.get(Transaction, transaction_id)
            if transaction is None:
                raise NotFoundError(f"Transaction {transaction_id} not found")
            return transaction

    def list_transactions(self) -> list[Transaction]:
        """All transactions, newest date first."""
        with self._session_factory() as db:
            transactions = db.execute(
                select(Transaction).order_by(
                    Transaction.date.desc(), Transaction.sequence.desc()
                )
            ).scalars().all()
            return list(transactions)

    def history(self, account_id: str) -> list[Transaction]:
        """An account's transactions in causal order."""
        with self._session_factory() as db:
            self._require_account(db, account_id)
            transactions = db.execute(
                select(Transaction)
                .where(Transaction.account_id == account_id)
                .order_by(Transaction.sequence)
            ).scalars().all()
            return list(transactions)

    def count_accounts(self) -> int:
        with self._session_factory() as db:
            return db.execute(select(func.count(Account.id))).scalar()

    def count_transactions(self) -> int:
        with self._session_factory() as db:
            return db.execute(select(func.count(Transaction.id))).scalar()

    def ping(self) -> bool:
        """Check the backing database answers a trivial query."""
        try:
            with self._session_factory() as db:
                db.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Ledger store health check failed")
            return False
        return True
