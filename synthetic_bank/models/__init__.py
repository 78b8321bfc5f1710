"""
Database models package.

All models must be imported here so that Base.metadata knows
every table before a store creates them.
"""

from synthetic_bank.models.base import Base
from synthetic_bank.models.enums import (
    AccountType,
    AccountStatus,
    TransactionType,
    TransactionStatus,
)
from synthetic_bank.models.account_holder import AccountHolder
from synthetic_bank.models.account import Account
from synthetic_bank.models.transaction import Transaction

__all__ = [
    "Base",
    "AccountType",
    "AccountStatus",
    "TransactionType",
    "TransactionStatus",
    "AccountHolder",
    "Account",
    "Transaction",
]
