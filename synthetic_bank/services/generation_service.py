"""
Generation service: bulk synthesis of accounts and histories.

For each requested account:
1. AccountFactory builds the account and its holder
2. LedgerGenerator draws a history and applies the running
   balance to it
3. LedgerStore stores the account and its history together

Content provider failures never reach this layer; they are
absorbed by the provider's fallback. Anything else that goes
wrong is raised as GenerationError with the original message.
"""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from decimal import Decimal

from synthetic_bank.config import Settings, get_settings
from synthetic_bank.exceptions import GenerationError, InvalidInputError
from synthetic_bank.models.account import Account
from synthetic_bank.models.transaction import Transaction
from synthetic_bank.services.account_factory import AccountFactory
from synthetic_bank.services.content_provider import ContentProvider
from synthetic_bank.services.identity_factory import IdentityFactory
from synthetic_bank.services.ledger_generator import LedgerGenerator
from synthetic_bank.services.ledger_store import LedgerStore

logger = logging.getLogger(__name__)

# Sample data seeded at startup gets 20-49 transactions per account
SEED_MIN_TRANSACTIONS = 20
SEED_MAX_TRANSACTIONS = 49


@dataclass
class GenerationResult:
    accounts: list[Account] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)


class GenerationService:

    def __init__(
        self,
        store: LedgerStore,
        provider: ContentProvider,
        settings: Settings | None = None,
        rng: random.Random | None = None,
        sleep=asyncio.sleep,
    ):
        self.store = store
        self.provider = provider
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.account_factory = AccountFactory(
            IdentityFactory(provider), self.settings, self.rng
        )
        self.ledger_generator = LedgerGenerator(
            provider, self.settings, self.rng, sleep=sleep
        )

    def _validate_counts(
        self, account_count: int, transactions_per_account: int
    ) -> None:
        if not 1 <= account_count <= self.settings.MAX_GENERATE_ACCOUNTS:
            raise InvalidInputError(
                f"accountCount must be between 1 and "
                f"{self.settings.MAX_GENERATE_ACCOUNTS}"
            )
        if not (
            0 <= transactions_per_account
            <= self.settings.MAX_TRANSACTIONS_PER_ACCOUNT
        ):
            raise InvalidInputError(
                f"transactionsPerAccount must be between 0 and "
                f"{self.settings.MAX_TRANSACTIONS_PER_ACCOUNT}"
            )

    async def _generate_account(
        self,
        transaction_count: int,
        result: GenerationResult,
        hold_max: Decimal | None = None,
    ) -> None:
        account = await self.account_factory.create_account()
        transactions = await self.ledger_generator.generate_history(
            account, transaction_count, hold_max
        )
        self.store.record_history(account, transactions)
        result.accounts.append(account)
        result.transactions.extend(transactions)
        logger.info(
            "Generated account for %s at %s with %d transactions",
            account.account_holder.name, account.bank_name, transaction_count,
        )

    async def generate(
        self, account_count: int = 1, transactions_per_account: int = 25
    ) -> GenerationResult:
        """
        Generate accounts with transaction histories.

        Each account is stored as soon as its history is
        complete, so a failure part way through leaves only
        fully applied accounts behind.
        """
        self._validate_counts(account_count, transactions_per_account)
        logger.info(
            "Generating %d accounts with %d transactions each (provider: %s)",
            account_count, transactions_per_account, self.provider.name,
        )

        result = GenerationResult()
        try:
            for _ in range(account_count):
                await self._generate_account(
                    transactions_per_account,
                    result,
                    self.settings.GENERATE_HOLD_MAX,
                )
        except Exception as e:
            logger.exception("Data generation failed")
            raise GenerationError("Failed to generate data", details=str(e)) from e
        return result

    async def seed_sample_data(self, account_count: int = 3) -> GenerationResult:
        """Populate an empty store with a few accounts at startup."""
        logger.info("Generating initial synthetic data...")
        result = GenerationResult()
        for _ in range(account_count):
            transaction_count = self.rng.randint(
                SEED_MIN_TRANSACTIONS, SEED_MAX_TRANSACTIONS
            )
            await self._generate_account(transaction_count, result)
        logger.info(
            "Sample data ready: %d accounts, %d transactions",
            len(result.accounts), len(result.transactions),
        )
        return result
