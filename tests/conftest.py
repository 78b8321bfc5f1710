"""
Shared test fixtures.

Every test gets its own in-memory ledger store, so no data
leaks between tests. The content provider is always the
seeded fallback, so tests never touch the network.
"""

import random
from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from synthetic_bank.dependencies import get_content_provider, get_store
from synthetic_bank.main import app
from synthetic_bank.models.account import Account, new_id
from synthetic_bank.models.account_holder import AccountHolder
from synthetic_bank.models.enums import (
    AccountStatus,
    AccountType,
    TransactionStatus,
    TransactionType,
)
from synthetic_bank.models.transaction import Transaction
from synthetic_bank.services.content_provider import FallbackContentProvider
from synthetic_bank.services.ledger_store import LedgerStore


@pytest.fixture
def store():
    """A fresh, empty in-memory ledger."""
    return LedgerStore("sqlite://")


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def provider(rng):
    return FallbackContentProvider(rng)


@pytest.fixture
def client(store, provider):
    """
    Provide a test client bound to the test store.

    We override the store and provider dependencies so the app
    uses our fixtures instead of the process-wide singletons.
    """
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_content_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()


def build_account(balance: str = "1000.00") -> Account:
    """Helper: an unsaved account with a fixed opening balance."""
    now = datetime.utcnow()
    opening = Decimal(balance)
    return Account(
        id=new_id(),
        account_number="1234567890",
        account_type=AccountType.SAVINGS,
        bank_name="HDFC Bank",
        bank_code="HDFC",
        branch_code="HDFC0MUMAB1",
        ifsc_code="HDFC0MUM001",
        account_holder=AccountHolder(
            name="Test User",
            email="test.user@gmail.com",
            phone="+91 12345-67890",
            street="1, User Colony",
            city="Mumbai",
            state="Maharashtra",
            pincode="400001",
        ),
        opening_balance=opening,
        balance=opening,
        available_balance=opening,
        currency="INR",
        status=AccountStatus.ACTIVE,
        open_date=now - timedelta(days=365),
        last_updated=now,
        created_at=now,
    )


def build_transaction(
    account_id: str,
    transaction_type: TransactionType = TransactionType.DEBIT,
    amount: str = "100.00",
    category: str = "Food & Dining",
    status: TransactionStatus = TransactionStatus.COMPLETED,
    date: datetime | None = None,
) -> Transaction:
    """Helper: an unsaved transaction without a balance_after."""
    return Transaction(
        id=new_id(),
        account_id=account_id,
        type=transaction_type,
        amount=Decimal(amount),
        description="Test payment",
        category=category,
        date=date or datetime.utcnow(),
        status=status,
        reference="UPITEST00001",
    )


@pytest.fixture
def account(store):
    """An account with balance 1000.00 and no transactions."""
    return store.put_account(build_account("1000.00"))


@pytest.fixture
def make_account():
    return build_account


@pytest.fixture
def make_transaction():
    return build_transaction
