"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from synthetic_bank.dependencies import get_content_provider, get_store
from synthetic_bank.services.content_provider import ContentProvider
from synthetic_bank.services.ledger_store import LedgerStore

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    store: LedgerStore = Depends(get_store),
    provider: ContentProvider = Depends(get_content_provider),
):
    """
    Return application health, the active content provider
    and the size of the ledger.

    The ledger check runs a trivial query against the store.
    If it fails the service reports itself as degraded.
    """
    ledger_ok = store.ping()
    data = {"accounts": 0, "transactions": 0}
    if ledger_ok:
        data = {
            "accounts": store.count_accounts(),
            "transactions": store.count_transactions(),
        }

    return {
        "success": True,
        "status": "healthy" if ledger_ok else "degraded",
        "service": "synthetic-bank-api",
        "message": "Synthetic Bank API is running",
        "ledger": "healthy" if ledger_ok else "unhealthy",
        "aiProvider": provider.name,
        "timestamp": datetime.utcnow().isoformat(),
        "data": data,
    }
