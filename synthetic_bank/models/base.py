"""
Database engine, session management, and base model.

The ledger lives in SQLite. With the default in-memory URL the
data exists only for the lifetime of the process, which is all a
synthetic dataset needs.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool


def build_engine(database_url: str) -> Engine:
    """
    Create the engine backing a ledger store.

    An in-memory SQLite database is private to a single
    connection, so StaticPool hands that one connection to
    every session. Without it each session would see its own
    empty database.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    """
    Session factory for a ledger store.

    expire_on_commit=False keeps committed objects readable after
    their session closes, so the API layer can serialize them.
    """
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


# --- Base Model Class ---
# Every model (Account, AccountHolder, Transaction) inherits from
# this class. SQLAlchemy uses it to track all models and create
# the tables when a store is initialised.
class Base(DeclarativeBase):
    pass
