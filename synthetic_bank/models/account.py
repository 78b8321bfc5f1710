"""
Account model.

An account carries its own running balance. The balance is
only changed by the ledger store, together with the
transaction that caused the change, so it always equals the
balance_after of the latest transaction in causal order
(or the opening balance when there are none).
"""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from synthetic_bank.models.base import Base
from synthetic_bank.models.enums import AccountType, AccountStatus


def new_id() -> str:
    return str(uuid.uuid4())


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id
    )
    account_number: Mapped[str] = mapped_column(String(20), nullable=False)
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(AccountType, name="account_type_enum"),
        nullable=False,
    )
    bank_name: Mapped[str] = mapped_column(String(100), nullable=False)
    bank_code: Mapped[str] = mapped_column(String(10), nullable=False)
    branch_code: Mapped[str] = mapped_column(String(20), nullable=False)
    ifsc_code: Mapped[str] = mapped_column(String(20), nullable=False)
    holder_id: Mapped[int] = mapped_column(
        ForeignKey("account_holders.id"), nullable=False
    )
    opening_balance: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False
    )
    balance: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    available_balance: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False
    )
    currency: Mapped[str] = mapped_column(
        String(3), nullable=False, default="INR"
    )
    status: Mapped[AccountStatus] = mapped_column(
        SAEnum(AccountStatus, name="account_status_enum"),
        nullable=False,
        default=AccountStatus.ACTIVE,
    )
    open_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    # Joined eagerly so a detached account still carries its holder
    account_holder: Mapped["AccountHolder"] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return (
            f"<Account {self.account_number} "
            f"{self.account_type.value} {self.balance} {self.currency}>"
        )
