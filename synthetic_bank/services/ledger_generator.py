"""
Ledger generator: fabricates transaction histories.

Generation has two phases:

1. An asynchronous phase that draws the transactions. This is
   where the content provider is called and where pacing
   delays happen, so it may suspend.
2. A synchronous phase, apply_history(), that walks the
   transactions in causal order and writes the running
   balance. It never suspends, so no other request can observe
   a half-applied balance.
"""

import asyncio
import logging
import random
from datetime import datetime
from decimal import Decimal

from synthetic_bank.config import Settings, get_settings
from synthetic_bank.models.account import Account, new_id
from synthetic_bank.models.enums import TransactionType, TransactionStatus
from synthetic_bank.models.transaction import Transaction
from synthetic_bank.reference_data import TRANSACTION_CATEGORIES
from synthetic_bank.services.content_provider import ContentProvider
from synthetic_bank.services.randomness import (
    random_amount,
    random_past_datetime,
    random_reference,
)

logger = logging.getLogger(__name__)

CREDIT_PROBABILITY = 0.3
COMPLETED_PROBABILITY = 0.9
MIN_AMOUNT = Decimal("5")
MAX_DEBIT_AMOUNT = Decimal("1500")
MAX_CREDIT_AMOUNT = Decimal("3000")
# Generated history is backdated up to 60 days
HISTORY_DAYS_BACK = 60


def apply_history(
    account: Account, transactions: list[Transaction], hold: Decimal
) -> Decimal:
    """
    Apply transactions to a fresh account in causal order.

    Each transaction's balance_after is the opening balance plus
    the signed amounts of every transaction up to and including
    it. The account ends with the final running balance, and an
    available balance reduced by the hold.
    """
    running_balance = account.opening_balance
    for transaction in transactions:
        running_balance += transaction.signed_amount
        transaction.balance_after = running_balance

    account.balance = running_balance
    account.available_balance = running_balance - hold
    account.last_updated = datetime.utcnow()
    return running_balance


class LedgerGenerator:

    def __init__(
        self,
        provider: ContentProvider,
        settings: Settings | None = None,
        rng: random.Random | None = None,
        sleep=asyncio.sleep,
    ):
        self.provider = provider
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self._sleep = sleep

    async def generate_transaction(
        self,
        account_id: str,
        forced_type: TransactionType | None = None,
    ) -> Transaction:
        """
        Draw a single transaction for an account.

        balance_after is left unset; it only has meaning once the
        transaction is applied in causal order.
        """
        if forced_type is not None:
            transaction_type = forced_type
        elif self.rng.random() < CREDIT_PROBABILITY:
            transaction_type = TransactionType.CREDIT
        else:
            transaction_type = TransactionType.DEBIT

        max_amount = (
            MAX_CREDIT_AMOUNT
            if transaction_type == TransactionType.CREDIT
            else MAX_DEBIT_AMOUNT
        )
        amount = random_amount(self.rng, MIN_AMOUNT, max_amount)
        category = self.rng.choice(TRANSACTION_CATEGORIES)
        status = (
            TransactionStatus.COMPLETED
            if self.rng.random() < COMPLETED_PROBABILITY
            else TransactionStatus.PENDING
        )

        description = await self.provider.generate_transaction_description(
            category, transaction_type.value
        )

        return Transaction(
            id=new_id(),
            account_id=account_id,
            type=transaction_type,
            amount=amount,
            description=description,
            category=category,
            date=random_past_datetime(self.rng, HISTORY_DAYS_BACK),
            status=status,
            reference=random_reference(self.rng),
            balance_after=None,
        )

    async def draw_transactions(
        self, account_id: str, count: int
    ) -> list[Transaction]:
        """
        Draw count transactions, in causal order.

        When the provider is rate limited, every PACING_EVERY-th
        item is followed by a short sleep. Nothing is locked
        while sleeping.
        """
        transactions = []
        for index in range(count):
            transactions.append(await self.generate_transaction(account_id))
            if (
                self.provider.paces_requests
                and index % self.settings.PACING_EVERY == 0
            ):
                await self._sleep(self.settings.PACING_DELAY)
        return transactions

    async def generate_history(
        self, account: Account, count: int, hold_max: Decimal | None = None
    ) -> list[Transaction]:
        """
        Build a causally ordered history for a new account.

        The returned list is in causal order and every
        transaction carries its balance_after. The account's
        balance and available balance are updated to match; the
        hold is drawn from [0, hold_max], HISTORY_HOLD_MAX by default.
        """
        if hold_max is None:
            hold_max = self.settings.HISTORY_HOLD_MAX
        transactions = await self.draw_transactions(account.id, count)
        hold = random_amount(self.rng, 0, hold_max)
        final_balance = apply_history(account, transactions, hold)
        logger.debug(
            "Generated %d transactions for account %s, final balance %s",
            count, account.id, final_balance,
        )
        return transactions
