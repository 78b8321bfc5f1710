"""
Tests for bulk generation and startup seeding.
"""

import asyncio
from decimal import Decimal

import pytest

from synthetic_bank.exceptions import GenerationError, InvalidInputError
from synthetic_bank.models.enums import TransactionType
from synthetic_bank.services.generation_service import GenerationService
from synthetic_bank.services.query_engine import QueryEngine


async def no_sleep(delay):
    return None


@pytest.fixture
def service(store, provider, rng):
    return GenerationService(store, provider, rng=rng, sleep=no_sleep)


class TestGenerate:

    def test_generates_requested_counts(self, service, store):
        result = asyncio.run(service.generate(3, 12))
        assert len(result.accounts) == 3
        assert len(result.transactions) == 36
        assert store.count_accounts() == 3
        assert store.count_transactions() == 36

    def test_every_account_replays(self, service, store):
        asyncio.run(service.generate(4, 25))
        engine = QueryEngine(store)
        for account in store.list_accounts():
            assert engine.replay_balances(account.id).consistent

    def test_causal_replay_by_hand(self, service, store):
        asyncio.run(service.generate(2, 30))
        for account in store.list_accounts():
            running = account.opening_balance
            for txn in store.history(account.id):
                if txn.type == TransactionType.CREDIT:
                    running += txn.amount
                else:
                    running -= txn.amount
                assert txn.balance_after == running
            assert account.balance == running
            assert account.available_balance <= account.balance

    def test_bulk_hold_is_at_most_generate_hold_max(self, service, store):
        asyncio.run(service.generate(10, 3))
        for account in store.list_accounts():
            hold = account.balance - account.available_balance
            assert Decimal("0") <= hold <= service.settings.GENERATE_HOLD_MAX

    def test_zero_transactions_per_account(self, service, store):
        result = asyncio.run(service.generate(1, 0))
        account = store.get_account(result.accounts[0].id)
        assert account.balance == account.opening_balance

    def test_generation_adds_to_existing_data(self, service, store):
        asyncio.run(service.generate(1, 5))
        asyncio.run(service.generate(2, 5))
        assert store.count_accounts() == 3

    def test_rejects_out_of_range_counts(self, service):
        with pytest.raises(InvalidInputError):
            asyncio.run(service.generate(0, 5))
        with pytest.raises(InvalidInputError):
            asyncio.run(service.generate(1, 100000))

    def test_unexpected_failure_is_wrapped(self, service, store, monkeypatch):
        def broken(account, transactions):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(store, "record_history", broken)
        with pytest.raises(GenerationError) as exc_info:
            asyncio.run(service.generate(1, 3))
        assert exc_info.value.details == "disk on fire"

    def test_partial_failure_leaves_complete_accounts(self, service, store, monkeypatch):
        original = store.record_history
        calls = []

        def fail_second(account, transactions):
            calls.append(account.id)
            if len(calls) == 2:
                raise RuntimeError("boom")
            return original(account, transactions)

        monkeypatch.setattr(store, "record_history", fail_second)
        with pytest.raises(GenerationError):
            asyncio.run(service.generate(3, 5))

        assert store.count_accounts() == 1
        engine = QueryEngine(store)
        assert engine.replay_balances(calls[0]).consistent


class TestSeedSampleData:

    def test_seeds_accounts_with_histories(self, service, store):
        result = asyncio.run(service.seed_sample_data(3))
        assert store.count_accounts() == 3
        for account in result.accounts:
            count = len(store.history(account.id))
            assert 20 <= count <= 49
            assert store.get_account(account.id).balance == account.balance

    def test_seed_hold_uses_history_hold_max(self, service, monkeypatch):
        calls = []
        original = service.ledger_generator.generate_history

        async def recording(account, count, hold_max=None):
            calls.append(hold_max)
            return await original(account, count, hold_max)

        monkeypatch.setattr(service.ledger_generator, "generate_history", recording)
        asyncio.run(service.seed_sample_data(2))
        assert calls == [None, None]

        calls.clear()
        asyncio.run(service.generate(2, 1))
        assert calls == [service.settings.GENERATE_HOLD_MAX] * 2
