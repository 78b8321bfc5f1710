"""
Tests for QueryEngine: filtering, pagination and summaries.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from synthetic_bank.exceptions import InvalidInputError, NotFoundError
from synthetic_bank.models.enums import TransactionStatus, TransactionType
from synthetic_bank.services.query_engine import (
    PageRequest,
    QueryEngine,
    TransactionFilters,
)


@pytest.fixture
def engine(store):
    return QueryEngine(store)


@pytest.fixture
def seeded_account(store, account, make_transaction):
    """
    Account with 5 debit "Food & Dining" and 3 credit
    "Salary Credit" transactions, applied through the store.
    """
    for amount in ("10.00", "20.00", "30.00", "40.00", "50.00"):
        store.apply_transaction(
            account.id,
            make_transaction(account.id, TransactionType.DEBIT, amount, "Food & Dining"),
        )
    for amount in ("100.00", "200.00", "300.00"):
        store.apply_transaction(
            account.id,
            make_transaction(account.id, TransactionType.CREDIT, amount, "Salary Credit"),
        )
    return account


class TestListTransactions:

    def test_type_and_category_filter_with_pagination(self, engine, seeded_account):
        page = engine.list_transactions_for(
            seeded_account.id,
            TransactionFilters(type=TransactionType.DEBIT, category="food"),
            PageRequest(limit=2, offset=0),
        )
        assert page.total == 5
        assert len(page.items) == 2
        assert page.has_next is True

    def test_last_page(self, engine, seeded_account):
        page = engine.list_transactions_for(
            seeded_account.id,
            TransactionFilters(type=TransactionType.DEBIT),
            PageRequest(limit=2, offset=4),
        )
        assert page.total == 5
        assert len(page.items) == 1
        assert page.has_next is False

    def test_offset_past_end(self, engine, seeded_account):
        page = engine.list_transactions_for(
            seeded_account.id, page=PageRequest(limit=10, offset=20)
        )
        assert page.total == 8
        assert page.items == []
        assert page.has_next is False

    @pytest.mark.parametrize("limit,offset", [(0, 0), (3, 0), (3, 3), (3, 6), (8, 0), (50, 7)])
    def test_page_length_and_has_next(self, engine, seeded_account, limit, offset):
        page = engine.list_transactions_for(
            seeded_account.id, page=PageRequest(limit=limit, offset=offset)
        )
        assert len(page.items) == min(limit, max(0, page.total - offset))
        assert page.has_next == (offset + limit < page.total)

    def test_category_is_case_insensitive_substring(self, engine, seeded_account):
        page = engine.list_transactions(TransactionFilters(category="SALARY"))
        assert page.total == 3

    def test_category_wildcards_are_literal(self, engine, seeded_account):
        page = engine.list_transactions(TransactionFilters(category="%"))
        assert page.total == 0

    def test_status_filter(self, engine, store, account, make_transaction):
        pending = make_transaction(account.id, status=TransactionStatus.PENDING)
        store.apply_transaction(account.id, pending)
        store.apply_transaction(account.id, make_transaction(account.id))
        page = engine.list_transactions(
            TransactionFilters(status=TransactionStatus.PENDING)
        )
        assert [t.id for t in page.items] == [pending.id]

    def test_date_range_is_inclusive(self, engine, store, account, make_transaction):
        day = datetime(2026, 1, 15, 12, 0, 0)
        transactions = [
            make_transaction(account.id, date=day - timedelta(days=1)),
            make_transaction(account.id, date=day),
            make_transaction(account.id, date=day + timedelta(days=1)),
            make_transaction(account.id, date=day + timedelta(days=2)),
        ]
        for txn in transactions:
            txn.balance_after = Decimal("0.00")
        store.put_transactions(transactions)

        page = engine.list_transactions(TransactionFilters(
            start_date=day, end_date=day + timedelta(days=1),
        ))
        assert page.total == 2

    def test_aware_date_bounds(self, engine, store, account, make_transaction):
        day = datetime(2026, 1, 15, 12, 0, 0)
        txn = make_transaction(account.id, date=day)
        txn.balance_after = Decimal("0.00")
        store.put_transactions([txn])

        page = engine.list_transactions(TransactionFilters(
            start_date=day.replace(tzinfo=timezone.utc),
            end_date=day.replace(tzinfo=timezone.utc),
        ))
        assert page.total == 1

    def test_account_filter(self, engine, store, seeded_account, make_account, make_transaction):
        other = store.put_account(make_account())
        store.apply_transaction(other.id, make_transaction(other.id))
        assert engine.list_transactions(TransactionFilters(account_id=other.id)).total == 1
        assert engine.list_transactions().total == 9

    def test_newest_first(self, engine, store, account, make_transaction):
        now = datetime.utcnow()
        transactions = [
            make_transaction(account.id, date=now - timedelta(days=d)) for d in (4, 9, 1)
        ]
        for txn in transactions:
            txn.balance_after = Decimal("0.00")
        store.put_transactions(transactions)

        dates = [t.date for t in engine.list_transactions_for(account.id).items]
        assert dates == sorted(dates, reverse=True)

    def test_unknown_account_raises(self, engine):
        with pytest.raises(NotFoundError):
            engine.list_transactions_for("missing")

    def test_negative_paging_rejected(self):
        with pytest.raises(InvalidInputError):
            PageRequest(limit=-1)


class TestSummarize:

    def test_totals_and_net(self, engine, seeded_account):
        summary = engine.summarize(seeded_account.id)
        assert summary.total_transactions == 8
        assert summary.total_debit == Decimal("150.00")
        assert summary.total_credit == Decimal("600.00")
        assert summary.net_amount == summary.total_credit - summary.total_debit
        assert summary.net_amount == Decimal("450.00")

    def test_average_covers_all_types(self, engine, seeded_account):
        summary = engine.summarize(seeded_account.id)
        assert summary.avg_transaction_amount == Decimal("93.75")

    def test_rounding_happens_once(self, engine, store, account, make_transaction):
        for amount in ("0.10", "0.20", "0.30"):
            store.apply_transaction(
                account.id, make_transaction(account.id, TransactionType.DEBIT, amount)
            )
        summary = engine.summarize(account.id)
        assert summary.total_debit == Decimal("0.60")
        assert summary.avg_transaction_amount == Decimal("0.20")

    def test_last_30_days(self, engine, store, account, make_transaction):
        now = datetime.utcnow()
        transactions = [
            make_transaction(account.id, date=now - timedelta(days=d))
            for d in (1, 29, 31, 59)
        ]
        for txn in transactions:
            txn.balance_after = Decimal("0.00")
        store.put_transactions(transactions)

        assert engine.summarize(account.id, now=now).last_30_days_transactions == 2

    def test_zero_transactions_signalled(self, engine, account):
        summary = engine.summarize(account.id)
        assert summary.total_transactions == 0
        assert summary.has_transactions is False
        assert summary.avg_transaction_amount is None
        assert summary.total_debit == Decimal("0.00")
        assert summary.net_amount == Decimal("0.00")

    def test_unknown_account_raises(self, engine):
        with pytest.raises(NotFoundError):
            engine.summarize("missing")


class TestReplayBalances:

    def test_consistent_after_writes(self, engine, seeded_account):
        replay = engine.replay_balances(seeded_account.id)
        assert replay.consistent
        assert replay.replayed_balance == Decimal("1450.00")

    def test_detects_tampered_balance(self, engine, store, account, make_transaction):
        txn = make_transaction(account.id, TransactionType.DEBIT, "10.00")
        txn.balance_after = Decimal("123.45")
        store.put_transactions([txn])

        replay = engine.replay_balances(account.id)
        assert not replay.consistent
        assert replay.mismatched_sequences == [txn.sequence]
