"""
Account API endpoints.

The API layer is thin. It handles HTTP concerns (status codes,
response envelopes) and delegates all work to the services.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from synthetic_bank.dependencies import (
    get_query_engine,
    get_store,
    get_transaction_service,
)
from synthetic_bank.exceptions import InvalidInputError, NotFoundError
from synthetic_bank.models.enums import TransactionType, TransactionStatus
from synthetic_bank.schemas.account import (
    AccountResponse,
    AccountBalanceResponse,
    AccountSummaryResponse,
    SummaryAccount,
    SummaryStatistics,
)
from synthetic_bank.schemas.common import (
    Envelope,
    ListEnvelope,
    PageEnvelope,
    Pagination,
)
from synthetic_bank.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
)
from synthetic_bank.services.ledger_store import LedgerStore
from synthetic_bank.services.query_engine import (
    DEFAULT_LIMIT,
    PageRequest,
    QueryEngine,
    TransactionFilters,
    TransactionPage,
)
from synthetic_bank.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/accounts", tags=["Accounts"])


def page_envelope(page: TransactionPage) -> PageEnvelope[TransactionResponse]:
    return PageEnvelope[TransactionResponse](
        data=[TransactionResponse.model_validate(t) for t in page.items],
        pagination=Pagination(
            total=page.total,
            limit=page.limit,
            offset=page.offset,
            has_next=page.has_next,
        ),
    )


@router.get("", response_model=ListEnvelope[AccountResponse])
async def list_accounts(store: LedgerStore = Depends(get_store)):
    """List every account in the ledger."""
    accounts = store.list_accounts()
    return ListEnvelope[AccountResponse](
        data=[AccountResponse.model_validate(a) for a in accounts],
        count=len(accounts),
    )


@router.get("/{account_id}", response_model=Envelope[AccountResponse])
async def get_account(
    account_id: str,
    store: LedgerStore = Depends(get_store),
):
    """Get account details."""
    try:
        account = store.get_account(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Envelope[AccountResponse](data=AccountResponse.model_validate(account))


@router.get(
    "/{account_id}/balance",
    response_model=Envelope[AccountBalanceResponse],
)
async def get_account_balance(
    account_id: str,
    store: LedgerStore = Depends(get_store),
):
    """Get the current and available balance of an account."""
    try:
        account = store.get_account(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Envelope[AccountBalanceResponse](data=AccountBalanceResponse(
        account_id=account.id,
        balance=account.balance,
        available_balance=account.available_balance,
        currency=account.currency,
        last_updated=account.last_updated,
    ))


@router.get(
    "/{account_id}/transactions",
    response_model=PageEnvelope[TransactionResponse],
)
async def list_account_transactions(
    account_id: str,
    type: TransactionType | None = None,
    status: TransactionStatus | None = None,
    category: str | None = None,
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=0),
    offset: int = Query(default=0, ge=0),
    engine: QueryEngine = Depends(get_query_engine),
):
    """
    List an account's transactions, newest first.

    Filters are combined; pagination applies after filtering.
    """
    filters = TransactionFilters(
        type=type,
        status=status,
        category=category,
        start_date=start_date,
        end_date=end_date,
    )
    try:
        page = engine.list_transactions_for(
            account_id, filters, PageRequest(limit=limit, offset=offset)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return page_envelope(page)


@router.get(
    "/{account_id}/summary",
    response_model=Envelope[AccountSummaryResponse],
)
async def get_account_summary(
    account_id: str,
    engine: QueryEngine = Depends(get_query_engine),
):
    """
    Aggregate statistics for an account.

    avgTransactionAmount is null when the account has no
    transactions; hasTransactions says so explicitly.
    """
    try:
        summary = engine.summarize(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    account = summary.account
    return Envelope[AccountSummaryResponse](data=AccountSummaryResponse(
        account=SummaryAccount(
            id=account.id,
            type=account.account_type,
            balance=account.balance,
            available_balance=account.available_balance,
        ),
        statistics=SummaryStatistics(
            total_transactions=summary.total_transactions,
            total_debit=summary.total_debit,
            total_credit=summary.total_credit,
            net_amount=summary.net_amount,
            last_30_days_transactions=summary.last_30_days_transactions,
            avg_transaction_amount=summary.avg_transaction_amount,
            has_transactions=summary.has_transactions,
        ),
    ))


@router.post(
    "/{account_id}/transactions",
    response_model=Envelope[TransactionResponse],
    status_code=201,
)
async def create_transaction(
    account_id: str,
    request: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Post a transaction against an account.

    The account balance moves immediately and the new
    transaction records the resulting balance.
    """
    try:
        transaction = await service.create_transaction(account_id, request)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Envelope[TransactionResponse](
        data=TransactionResponse.model_validate(transaction)
    )
