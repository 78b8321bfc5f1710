"""
Shared enumerations for database models.

Enum values are the strings clients see in JSON, so they keep
the casing of the public API ("Savings", "debit", ...).
"""

import enum


class AccountType(str, enum.Enum):
    """Kinds of account a synthetic customer can hold."""
    SAVINGS = "Savings"
    CURRENT = "Current"
    SALARY = "Salary"


class AccountStatus(str, enum.Enum):
    """Only active accounts are modelled."""
    ACTIVE = "Active"


class TransactionType(str, enum.Enum):
    """Direction of money relative to the account."""
    CREDIT = "credit"
    DEBIT = "debit"


class TransactionStatus(str, enum.Enum):
    COMPLETED = "completed"
    PENDING = "pending"
