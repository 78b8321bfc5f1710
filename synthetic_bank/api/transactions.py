"""
Transaction API endpoints.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from synthetic_bank.api.accounts import page_envelope
from synthetic_bank.dependencies import get_query_engine, get_store
from synthetic_bank.exceptions import NotFoundError
from synthetic_bank.models.enums import TransactionType, TransactionStatus
from synthetic_bank.schemas.common import Envelope, PageEnvelope
from synthetic_bank.schemas.transaction import TransactionResponse
from synthetic_bank.services.ledger_store import LedgerStore
from synthetic_bank.services.query_engine import (
    DEFAULT_LIMIT,
    PageRequest,
    QueryEngine,
    TransactionFilters,
)

router = APIRouter(prefix="/api/transactions", tags=["Transactions"])


@router.get("", response_model=PageEnvelope[TransactionResponse])
async def list_transactions(
    account_id: str | None = Query(default=None, alias="accountId"),
    type: TransactionType | None = None,
    status: TransactionStatus | None = None,
    category: str | None = None,
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=0),
    offset: int = Query(default=0, ge=0),
    engine: QueryEngine = Depends(get_query_engine),
):
    """List transactions across all accounts, newest first."""
    filters = TransactionFilters(
        account_id=account_id,
        type=type,
        status=status,
        category=category,
        start_date=start_date,
        end_date=end_date,
    )
    page = engine.list_transactions(
        filters, PageRequest(limit=limit, offset=offset)
    )
    return page_envelope(page)


@router.get("/{transaction_id}", response_model=Envelope[TransactionResponse])
async def get_transaction(
    transaction_id: str,
    store: LedgerStore = Depends(get_store),
):
    """Get transaction details."""
    try:
        transaction = store.get_transaction(transaction_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Envelope[TransactionResponse](
        data=TransactionResponse.model_validate(transaction)
    )
