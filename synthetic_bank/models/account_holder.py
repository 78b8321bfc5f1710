"""
Account holder model.

The synthetic person behind an account. Produced by the
content provider and never changed afterwards.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from synthetic_bank.models.base import Base


class AccountHolder(Base):
    __tablename__ = "account_holders"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    pincode: Mapped[str] = mapped_column(String(20), nullable=False)

    @property
    def address(self) -> dict:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
        }

    def __repr__(self) -> str:
        return f"<AccountHolder {self.name}>"
