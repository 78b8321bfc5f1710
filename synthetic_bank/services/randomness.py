"""
Helpers for drawing synthetic values.

Every helper takes the random.Random instance to draw from, so a
seeded generator reproduces the same dataset.
"""

import random
import string
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Round a number to 2 decimal places."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def random_amount(rng: random.Random, low, high) -> Decimal:
    """Uniform amount in [low, high] with 2-decimal precision."""
    return to_money(rng.uniform(float(low), float(high)))


def random_past_datetime(
    rng: random.Random, days_back: int, now: datetime | None = None
) -> datetime:
    """A timestamp between now and days_back whole days ago."""
    now = now or datetime.utcnow()
    return now - timedelta(days=rng.randrange(days_back))


def random_digits(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.digits, k=length))


def random_alphanumeric(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_uppercase + string.digits, k=length))


def random_reference(rng: random.Random) -> str:
    """Synthetic UPI payment reference, unique enough for display."""
    return f"UPI{random_alphanumeric(rng, 9)}"
