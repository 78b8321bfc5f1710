"""
Tests for the LedgerStore write path and reads.
"""

import threading
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from synthetic_bank.exceptions import NotFoundError
from synthetic_bank.models.enums import TransactionType


class TestApplyTransaction:

    def test_debit_reduces_balance(self, store, account, make_transaction):
        txn = store.apply_transaction(
            account.id,
            make_transaction(account.id, TransactionType.DEBIT, "500.00"),
        )
        assert txn.balance_after == Decimal("500.00")
        assert store.get_account(account.id).balance == Decimal("500.00")

    def test_credit_increases_balance(self, store, account, make_transaction):
        txn = store.apply_transaction(
            account.id,
            make_transaction(account.id, TransactionType.CREDIT, "250.50"),
        )
        assert txn.balance_after == Decimal("1250.50")
        assert store.get_account(account.id).balance == Decimal("1250.50")

    def test_uses_current_balance(self, store, account, make_transaction):
        store.apply_transaction(
            account.id, make_transaction(account.id, TransactionType.DEBIT, "100.00")
        )
        second = store.apply_transaction(
            account.id, make_transaction(account.id, TransactionType.DEBIT, "100.00")
        )
        assert second.balance_after == Decimal("800.00")

    def test_hold_reduces_available_balance(self, store, account, make_transaction):
        store.apply_transaction(
            account.id,
            make_transaction(account.id, TransactionType.DEBIT, "100.00"),
            hold=Decimal("25.00"),
        )
        stored = store.get_account(account.id)
        assert stored.available_balance == Decimal("875.00")
        assert stored.available_balance <= stored.balance

    def test_last_updated_advances(self, store, account, make_transaction):
        before = store.get_account(account.id).last_updated
        store.apply_transaction(
            account.id, make_transaction(account.id, TransactionType.DEBIT, "1.00")
        )
        assert store.get_account(account.id).last_updated >= before

    def test_unknown_account_raises(self, store, make_transaction):
        with pytest.raises(NotFoundError, match="not found"):
            store.apply_transaction(
                "missing", make_transaction("missing", TransactionType.DEBIT)
            )
        assert store.count_transactions() == 0

    def test_sequence_is_monotonic(self, store, account, make_transaction):
        sequences = [
            store.apply_transaction(
                account.id, make_transaction(account.id, TransactionType.DEBIT, "1.00")
            ).sequence
            for _ in range(5)
        ]
        assert sequences == sorted(sequences)
        assert len(set(sequences)) == 5

    def test_new_transaction_heads_the_listing(self, store, account, make_transaction):
        old = make_transaction(
            account.id, date=datetime.utcnow() - timedelta(days=3)
        )
        old.balance_after = Decimal("900.00")
        store.put_transactions([old])

        new = store.apply_transaction(
            account.id, make_transaction(account.id, TransactionType.CREDIT, "5.00")
        )
        assert store.list_transactions()[0].id == new.id

    def test_concurrent_writers_do_not_lose_updates(
        self, store, account, make_transaction
    ):
        def post_debits():
            for _ in range(10):
                store.apply_transaction(
                    account.id,
                    make_transaction(account.id, TransactionType.DEBIT, "1.00"),
                )

        threads = [threading.Thread(target=post_debits) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.get_account(account.id).balance == Decimal("960.00")
        balances = sorted(t.balance_after for t in store.history(account.id))
        assert balances == [Decimal(960 + i) for i in range(40)]


class TestRecordHistory:

    def test_account_and_transactions_stored_together(
        self, store, make_account, make_transaction
    ):
        account = make_account("100.00")
        transactions = [
            make_transaction(account.id, TransactionType.CREDIT, "10.00"),
            make_transaction(account.id, TransactionType.DEBIT, "5.00"),
        ]
        transactions[0].balance_after = Decimal("110.00")
        transactions[1].balance_after = Decimal("105.00")
        account.balance = Decimal("105.00")

        store.record_history(account, transactions)

        assert store.get_account(account.id).balance == Decimal("105.00")
        history = store.history(account.id)
        assert [t.id for t in history] == [t.id for t in transactions]
        assert history[0].sequence < history[1].sequence

    def test_holder_is_stored(self, store, make_account):
        account = make_account()
        store.record_history(account, [])
        assert store.get_account(account.id).account_holder.name == "Test User"


class TestReads:

    def test_get_unknown_account_raises(self, store):
        with pytest.raises(NotFoundError):
            store.get_account("nope")

    def test_get_unknown_transaction_raises(self, store):
        with pytest.raises(NotFoundError):
            store.get_transaction("nope")

    def test_list_accounts_in_creation_order(self, store, make_account):
        first = store.put_account(make_account())
        second = make_account()
        second.created_at = first.created_at + timedelta(seconds=1)
        store.put_account(second)
        assert [a.id for a in store.list_accounts()] == [first.id, second.id]

    def test_list_transactions_newest_first(self, store, account, make_transaction):
        now = datetime.utcnow()
        transactions = [
            make_transaction(account.id, date=now - timedelta(days=days))
            for days in (5, 1, 10, 3)
        ]
        for txn in transactions:
            txn.balance_after = Decimal("0.00")
        store.put_transactions(transactions)

        dates = [t.date for t in store.list_transactions()]
        assert dates == sorted(dates, reverse=True)

    def test_history_unknown_account_raises(self, store):
        with pytest.raises(NotFoundError):
            store.history("nope")

    def test_ping_and_counts(self, store, account):
        assert store.ping() is True
        assert store.count_accounts() == 1
        assert store.count_transactions() == 0
