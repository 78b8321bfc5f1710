"""Business logic services."""

from synthetic_bank.services.content_provider import (
    ContentProvider,
    FallbackContentProvider,
    GeminiContentProvider,
    select_content_provider,
)
from synthetic_bank.services.identity_factory import IdentityFactory
from synthetic_bank.services.account_factory import AccountFactory
from synthetic_bank.services.ledger_generator import LedgerGenerator
from synthetic_bank.services.ledger_store import LedgerStore
from synthetic_bank.services.query_engine import QueryEngine
from synthetic_bank.services.transaction_service import TransactionService
from synthetic_bank.services.generation_service import GenerationService

__all__ = [
    "ContentProvider",
    "FallbackContentProvider",
    "GeminiContentProvider",
    "select_content_provider",
    "IdentityFactory",
    "AccountFactory",
    "LedgerGenerator",
    "LedgerStore",
    "QueryEngine",
    "TransactionService",
    "GenerationService",
]
