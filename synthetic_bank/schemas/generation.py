"""
Pydantic schemas for bulk data generation.
"""

from pydantic import Field

from synthetic_bank.schemas.common import RequestModel, ResponseModel
from synthetic_bank.schemas.transaction import TransactionSample


class GenerateRequest(RequestModel):
    account_count: int = Field(default=1, ge=1)
    transactions_per_account: int = Field(default=25, ge=0)


class GeneratedCounts(ResponseModel):
    accounts: int
    transactions: int


class GenerationSamples(ResponseModel):
    account_holders: list[str]
    banks: list[str]
    sample_transactions: list[TransactionSample]


class GenerateResponse(ResponseModel):
    success: bool = True
    message: str
    ai_provider: str
    generated: GeneratedCounts
    samples: GenerationSamples
