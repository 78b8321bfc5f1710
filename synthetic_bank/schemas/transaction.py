"""
Pydantic schemas for transaction operations.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from synthetic_bank.models.enums import TransactionType, TransactionStatus
from synthetic_bank.schemas.common import Money, RequestModel, ResponseModel


class TransactionCreate(RequestModel):
    """
    Request to post a single transaction against an account.

    type and amount are optional here so that a missing value is
    reported as an input error by the service, with the same
    message whichever one is absent.
    """
    type: TransactionType | None = None
    # Same precision as the Numeric(14, 2) amount column
    amount: Decimal | None = Field(
        default=None, gt=0, max_digits=14, decimal_places=2
    )
    description: str | None = Field(default=None, max_length=255)
    category: str | None = Field(default=None, max_length=100)


class TransactionResponse(ResponseModel):
    id: str
    sequence: int
    account_id: str
    type: TransactionType
    amount: Money
    description: str
    category: str
    date: datetime
    status: TransactionStatus
    reference: str
    balance_after: Money | None


class TransactionSample(ResponseModel):
    description: str
    category: str
    amount: Money
    type: TransactionType
