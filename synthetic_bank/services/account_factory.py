"""
Account factory: fabricates a new synthetic bank account.

Bank, city and account type are drawn uniformly from the fixed
reference tables. Branch and IFSC codes share the layout
{ifsc prefix}0{city code}{suffix}; the branch code uses an
alphanumeric suffix and the IFSC code a 3-digit number.
"""

import random
from datetime import datetime

from synthetic_bank.config import Settings, get_settings
from synthetic_bank.models.account import Account, new_id
from synthetic_bank.models.enums import AccountType, AccountStatus
from synthetic_bank.reference_data import BANKS, BRANCH_CITIES, Bank
from synthetic_bank.services.identity_factory import IdentityFactory
from synthetic_bank.services.randomness import (
    random_alphanumeric,
    random_amount,
    random_digits,
    random_past_datetime,
)

# Accounts are backdated up to five years
OPEN_DATE_DAYS_BACK = 1825


def branch_code(bank: Bank, city: str, suffix: str) -> str:
    return f"{bank.ifsc_prefix}0{city}{suffix}"


class AccountFactory:

    def __init__(
        self,
        identity_factory: IdentityFactory,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.identity_factory = identity_factory
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()

    async def create_account(self) -> Account:
        """
        Build a new, unsaved account with its holder.

        The balance starts at the opening balance. It is only
        moved afterwards by applying transactions.
        """
        account_type = self.rng.choice(list(AccountType))
        bank = self.rng.choice(BANKS)
        city = self.rng.choice(BRANCH_CITIES)

        holder = await self.identity_factory.create_account_holder()

        opening_balance = random_amount(
            self.rng,
            self.settings.OPENING_BALANCE_MIN,
            self.settings.OPENING_BALANCE_MAX,
        )
        now = datetime.utcnow()

        return Account(
            id=new_id(),
            account_number=random_digits(self.rng, 10),
            account_type=account_type,
            bank_name=bank.name,
            bank_code=bank.code,
            branch_code=branch_code(
                bank, city, random_alphanumeric(self.rng, 3)
            ),
            ifsc_code=branch_code(
                bank, city, f"{self.rng.randrange(1000):03d}"
            ),
            account_holder=holder,
            opening_balance=opening_balance,
            balance=opening_balance,
            available_balance=opening_balance,
            currency=self.settings.CURRENCY,
            status=AccountStatus.ACTIVE,
            open_date=random_past_datetime(
                self.rng, OPEN_DATE_DAYS_BACK, now=now
            ),
            last_updated=now,
            created_at=now,
        )
