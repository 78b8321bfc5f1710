"""
Query engine: read-only views over the ledger.

Listings are filtered and paginated in SQL and ordered by date,
newest first. That is a display order only: anything that
reasons about balances (summaries, replays) uses the causal
sequence instead.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import select, func

from synthetic_bank.exceptions import InvalidInputError
from synthetic_bank.models.account import Account
from synthetic_bank.models.enums import TransactionType, TransactionStatus
from synthetic_bank.models.transaction import Transaction
from synthetic_bank.services.ledger_store import LedgerStore
from synthetic_bank.services.randomness import to_money

DEFAULT_LIMIT = 50
SUMMARY_WINDOW_DAYS = 30


@dataclass(frozen=True)
class TransactionFilters:
    account_id: str | None = None
    type: TransactionType | None = None
    status: TransactionStatus | None = None
    # Case-insensitive substring of the category
    category: str | None = None
    # Inclusive bounds on the transaction date
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True)
class PageRequest:
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    def __post_init__(self):
        if self.limit < 0 or self.offset < 0:
            raise InvalidInputError("limit and offset must be non-negative")


@dataclass
class TransactionPage:
    items: list[Transaction]
    total: int
    limit: int
    offset: int

    @property
    def has_next(self) -> bool:
        return self.offset + self.limit < self.total


@dataclass
class AccountSummary:
    account: Account
    total_transactions: int
    total_debit: Decimal
    total_credit: Decimal
    net_amount: Decimal
    last_30_days_transactions: int
    avg_transaction_amount: Decimal | None

    @property
    def has_transactions(self) -> bool:
        return self.total_transactions > 0


@dataclass
class BalanceReplay:
    """Outcome of replaying an account's history from its opening balance."""
    account_id: str
    opening_balance: Decimal
    replayed_balance: Decimal
    account_balance: Decimal
    mismatched_sequences: list[int]

    @property
    def consistent(self) -> bool:
        return (
            not self.mismatched_sequences
            and self.replayed_balance == self.account_balance
        )


def to_naive_utc(value: datetime | None) -> datetime | None:
    """Stored dates are naive UTC; bring aware bounds to the same form."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def filter_conditions(filters: TransactionFilters) -> list:
    conditions = []
    if filters.account_id is not None:
        conditions.append(Transaction.account_id == filters.account_id)
    if filters.type is not None:
        conditions.append(Transaction.type == filters.type)
    if filters.status is not None:
        conditions.append(Transaction.status == filters.status)
    if filters.category:
        conditions.append(
            func.lower(Transaction.category).contains(
                filters.category.lower(), autoescape=True
            )
        )
    if filters.start_date is not None:
        conditions.append(Transaction.date >= to_naive_utc(filters.start_date))
    if filters.end_date is not None:
        conditions.append(Transaction.date <= to_naive_utc(filters.end_date))
    return conditions


def summarize_transactions(
    account: Account, transactions: list[Transaction], now: datetime
) -> AccountSummary:
    """
    Aggregate an account's transactions.

    Sums are exact Decimal sums rounded once at the end. The
    average covers every transaction regardless of type and is
    None for an account without transactions.
    """
    total_debit = sum(
        (t.amount for t in transactions if t.type == TransactionType.DEBIT),
        Decimal("0"),
    )
    total_credit = sum(
        (t.amount for t in transactions if t.type == TransactionType.CREDIT),
        Decimal("0"),
    )
    total_debit = to_money(total_debit)
    total_credit = to_money(total_credit)

    window_start = now - timedelta(days=SUMMARY_WINDOW_DAYS)
    recent = [t for t in transactions if window_start <= t.date <= now]

    avg_amount = None
    if transactions:
        avg_amount = to_money(
            sum((t.amount for t in transactions), Decimal("0"))
            / len(transactions)
        )

    return AccountSummary(
        account=account,
        total_transactions=len(transactions),
        total_debit=total_debit,
        total_credit=total_credit,
        net_amount=total_credit - total_debit,
        last_30_days_transactions=len(recent),
        avg_transaction_amount=avg_amount,
    )


class QueryEngine:
    """Filtering, pagination and aggregates. Never writes."""

    def __init__(self, store: LedgerStore):
        self.store = store

    def list_transactions(
        self,
        filters: TransactionFilters | None = None,
        page: PageRequest | None = None,
    ) -> TransactionPage:
        """
        Filter all transactions and return one page of them.

        total counts every match before pagination.
        """
        filters = filters or TransactionFilters()
        page = page or PageRequest()
        conditions = filter_conditions(filters)

        with self.store.session() as db:
            total = db.execute(
                select(func.count(Transaction.id)).where(*conditions)
            ).scalar()
            items = db.execute(
                select(Transaction)
                .where(*conditions)
                .order_by(Transaction.date.desc(), Transaction.sequence.desc())
                .offset(page.offset)
                .limit(page.limit)
            ).scalars().all()

        return TransactionPage(
            items=list(items),
            total=total,
            limit=page.limit,
            offset=page.offset,
        )

    def list_transactions_for(
        self,
        account_id: str,
        filters: TransactionFilters | None = None,
        page: PageRequest | None = None,
    ) -> TransactionPage:
        """Same as list_transactions, scoped to one existing account."""
        self.store.get_account(account_id)
        filters = replace(filters or TransactionFilters(), account_id=account_id)
        return self.list_transactions(filters, page)

    def summarize(
        self, account_id: str, now: datetime | None = None
    ) -> AccountSummary:
        account = self.store.get_account(account_id)
        transactions = self.store.history(account_id)
        return summarize_transactions(
            account, transactions, to_naive_utc(now) or datetime.utcnow()
        )

    def replay_balances(self, account_id: str) -> BalanceReplay:
        """
        Replay an account's history in causal order.

        Every balance_after must equal the running balance
        started from the opening balance, and the account's
        balance must equal the final running balance.
        """
        account = self.store.get_account(account_id)
        running_balance = account.opening_balance
        mismatched = []
        for transaction in self.store.history(account_id):
            running_balance += transaction.signed_amount
            if transaction.balance_after != running_balance:
                mismatched.append(transaction.sequence)

        return BalanceReplay(
            account_id=account.id,
            opening_balance=account.opening_balance,
            replayed_balance=running_balance,
            account_balance=account.balance,
            mismatched_sequences=mismatched,
        )
