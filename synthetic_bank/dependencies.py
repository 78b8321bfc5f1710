"""
FastAPI dependencies.

The ledger store and the content provider are process-wide
singletons, created on first use. Tests replace them through
app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends

from synthetic_bank.config import get_settings
from synthetic_bank.services.content_provider import (
    ContentProvider,
    select_content_provider,
)
from synthetic_bank.services.generation_service import GenerationService
from synthetic_bank.services.ledger_store import LedgerStore
from synthetic_bank.services.query_engine import QueryEngine
from synthetic_bank.services.transaction_service import TransactionService


@lru_cache()
def get_store() -> LedgerStore:
    return LedgerStore(get_settings().DATABASE_URL)


@lru_cache()
def get_content_provider() -> ContentProvider:
    return select_content_provider(get_settings())


def get_query_engine(store: LedgerStore = Depends(get_store)) -> QueryEngine:
    return QueryEngine(store)


def get_transaction_service(
    store: LedgerStore = Depends(get_store),
    provider: ContentProvider = Depends(get_content_provider),
) -> TransactionService:
    return TransactionService(store, provider)


def get_generation_service(
    store: LedgerStore = Depends(get_store),
    provider: ContentProvider = Depends(get_content_provider),
) -> GenerationService:
    return GenerationService(store, provider)
