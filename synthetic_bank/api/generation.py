"""
Bulk data generation endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException

from synthetic_bank.dependencies import get_generation_service
from synthetic_bank.exceptions import InvalidInputError
from synthetic_bank.schemas.generation import (
    GenerateRequest,
    GenerateResponse,
    GeneratedCounts,
    GenerationSamples,
)
from synthetic_bank.schemas.transaction import TransactionSample
from synthetic_bank.services.generation_service import GenerationService

router = APIRouter(prefix="/api", tags=["Generation"])

SAMPLE_TRANSACTIONS = 5


@router.post("/generate-data", response_model=GenerateResponse)
async def generate_data(
    request: GenerateRequest | None = None,
    service: GenerationService = Depends(get_generation_service),
):
    """
    Generate new accounts, each with a transaction history.

    GenerationError is left to the application's error handler,
    which reports it as a 500 with the underlying message.
    """
    request = request or GenerateRequest()
    try:
        result = await service.generate(
            request.account_count, request.transactions_per_account
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    provider = service.provider
    if provider.paces_requests:
        message = f"Bank data generated successfully using {provider.name}"
    else:
        message = "Bank data generated using fallback templates"

    return GenerateResponse(
        message=message,
        ai_provider=provider.code,
        generated=GeneratedCounts(
            accounts=len(result.accounts),
            transactions=len(result.transactions),
        ),
        samples=GenerationSamples(
            account_holders=[a.account_holder.name for a in result.accounts],
            banks=[a.bank_name for a in result.accounts],
            sample_transactions=[
                TransactionSample.model_validate(t)
                for t in result.transactions[:SAMPLE_TRANSACTIONS]
            ],
        ),
    )
