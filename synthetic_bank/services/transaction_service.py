"""
Transaction service: posts single transactions on demand.

Each operation:
1. Validates the request (type and amount are required)
2. Checks the account exists
3. Fills in category and description (asking the content
   provider when no description is given)
4. Hands the transaction to the ledger store, which applies it
   to the current balance inside the account's critical section

Step 3 may suspend; step 4 never does.
"""

import random
from datetime import datetime

from synthetic_bank.config import Settings, get_settings
from synthetic_bank.exceptions import InvalidInputError
from synthetic_bank.models.account import new_id
from synthetic_bank.models.enums import TransactionStatus
from synthetic_bank.models.transaction import Transaction
from synthetic_bank.reference_data import DEFAULT_CATEGORY
from synthetic_bank.schemas.transaction import TransactionCreate
from synthetic_bank.services.content_provider import ContentProvider
from synthetic_bank.services.ledger_store import LedgerStore
from synthetic_bank.services.randomness import (
    random_amount,
    random_reference,
    to_money,
)


class TransactionService:

    def __init__(
        self,
        store: LedgerStore,
        provider: ContentProvider,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.store = store
        self.provider = provider
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()

    async def create_transaction(
        self, account_id: str, request: TransactionCreate
    ) -> Transaction:
        """
        Create a completed transaction dated now.

        Raises NotFoundError for an unknown account and
        InvalidInputError when type or amount is missing.
        """
        if request.type is None or request.amount is None:
            raise InvalidInputError("Type and amount are required")
        amount = to_money(request.amount)
        if amount <= 0:
            raise InvalidInputError("Amount must be positive")

        # Fail before spending a provider call on a missing account
        self.store.get_account(account_id)

        category = request.category or DEFAULT_CATEGORY
        description = request.description
        if not description:
            description = await self.provider.generate_transaction_description(
                category, request.type.value
            )

        transaction = Transaction(
            id=new_id(),
            type=request.type,
            amount=amount,
            description=description,
            category=category,
            date=datetime.utcnow(),
            status=TransactionStatus.COMPLETED,
            reference=random_reference(self.rng),
        )
        hold = random_amount(self.rng, 0, self.settings.CREATE_HOLD_MAX)
        return self.store.apply_transaction(account_id, transaction, hold)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Get a transaction by ID."""
        return self.store.get_transaction(transaction_id)
