"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode secrets or API keys in code.
"""

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Synthetic Bank API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))

    # Ledger store. The default is an in-memory SQLite database that
    # lives exactly as long as the process.
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://")

    # Content provider
    GEMINI_API_KEY: str | None = os.getenv("GEMINI_API_KEY") or None
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    CONTENT_PROVIDER_TIMEOUT: float = float(
        os.getenv("CONTENT_PROVIDER_TIMEOUT", "10")
    )
    PACING_EVERY: int = int(os.getenv("PACING_EVERY", "3"))
    PACING_DELAY: float = float(os.getenv("PACING_DELAY", "0.2"))

    # Generation
    CURRENCY: str = "INR"
    OPENING_BALANCE_MIN: Decimal = Decimal(os.getenv("OPENING_BALANCE_MIN", "1000"))
    OPENING_BALANCE_MAX: Decimal = Decimal(os.getenv("OPENING_BALANCE_MAX", "50000"))
    # Holds on available balance: startup seeding, bulk generation and
    # single posted transactions each draw from their own range
    HISTORY_HOLD_MAX: Decimal = Decimal(os.getenv("HISTORY_HOLD_MAX", "500"))
    GENERATE_HOLD_MAX: Decimal = Decimal(os.getenv("GENERATE_HOLD_MAX", "100"))
    CREATE_HOLD_MAX: Decimal = Decimal(os.getenv("CREATE_HOLD_MAX", "50"))
    MAX_GENERATE_ACCOUNTS: int = int(os.getenv("MAX_GENERATE_ACCOUNTS", "20"))
    MAX_TRANSACTIONS_PER_ACCOUNT: int = int(
        os.getenv("MAX_TRANSACTIONS_PER_ACCOUNT", "500")
    )

    # Startup seeding
    SEED_ON_STARTUP: bool = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"
    SEED_ACCOUNTS: int = int(os.getenv("SEED_ACCOUNTS", "3"))

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()
