"""
Transaction model.

Each transaction belongs to exactly one account. Two orders
matter and they are different:

- sequence: the causal order in which the store applied the
  transaction to the account balance. balance_after is only
  meaningful along this order.
- date: the (possibly backdated) timestamp shown to readers.
  Listings are sorted by date, newest first.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Integer, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column

from synthetic_bank.models.account import new_id
from synthetic_bank.models.base import Base
from synthetic_bank.models.enums import TransactionType, TransactionStatus


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id
    )
    sequence: Mapped[int] = mapped_column(
        Integer, unique=True, nullable=False, index=True
    )
    account_id: Mapped[str] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    type: Mapped[TransactionType] = mapped_column(
        SAEnum(TransactionType, name="transaction_type_enum"),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, index=True
    )
    status: Mapped[TransactionStatus] = mapped_column(
        SAEnum(TransactionStatus, name="transaction_status_enum"),
        nullable=False,
        default=TransactionStatus.COMPLETED,
    )
    reference: Mapped[str] = mapped_column(String(30), nullable=False)
    balance_after: Mapped[Decimal | None] = mapped_column(
        Numeric(14, 2), nullable=True
    )

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it affects the balance: credits add, debits subtract."""
        if self.type == TransactionType.CREDIT:
            return self.amount
        return -self.amount

    def __repr__(self) -> str:
        return (
            f"<Transaction #{self.sequence} {self.type.value} "
            f"{self.amount} ({self.status.value})>"
        )
