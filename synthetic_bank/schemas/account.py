"""
Pydantic schemas for accounts and their holders.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from synthetic_bank.models.enums import AccountType, AccountStatus
from synthetic_bank.schemas.common import Money, ResponseModel


# --- Identity Schemas ---

class Address(BaseModel):
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    pincode: str = Field(min_length=1)

    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)


class Identity(BaseModel):
    """
    A synthetic person, as produced by a content provider.

    AI-generated identities are validated against this schema
    before they are used, so a half-formed reply never reaches
    the ledger.
    """
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str = Field(min_length=1)
    address: Address

    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)


# --- Account Schemas ---

class AccountResponse(ResponseModel):
    id: str
    account_number: str
    account_type: AccountType
    bank_name: str
    bank_code: str
    branch_code: str
    ifsc_code: str
    account_holder: Identity
    opening_balance: Money
    balance: Money
    available_balance: Money
    currency: str
    status: AccountStatus
    open_date: datetime
    last_updated: datetime


class AccountBalanceResponse(ResponseModel):
    account_id: str
    balance: Money
    available_balance: Money
    currency: str
    last_updated: datetime


# --- Summary Schemas ---

class SummaryAccount(ResponseModel):
    id: str
    type: AccountType
    balance: Money
    available_balance: Money


class SummaryStatistics(ResponseModel):
    total_transactions: int
    total_debit: Money
    total_credit: Money
    net_amount: Money
    last_30_days_transactions: int
    # None when the account has no transactions; never reported as 0
    avg_transaction_amount: Money | None
    has_transactions: bool


class AccountSummaryResponse(ResponseModel):
    account: SummaryAccount
    statistics: SummaryStatistics
