"""Engine for the ConsultFlow accounting store.

Charts of accounts, trial balances and general ledger entries live in one
database, reached through a single engine created on first use.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from consultflow.application.ports.database import DatabaseEnginePort


ACCOUNTING_DB_URL_VAR = "CONSULTFLOW_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required setting, consulting a local ``.env`` file first.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the pooled engine shared by the ledger and trial balance queries.

    Connections are pinged before use, so a restarted accounting database
    does not fail the next report request with a stale connection.

    Args:
        db_url: SQLAlchemy URL of the accounting store.

    Returns:
        Engine: Engine holding five pooled and five overflow connections.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_accounting_engine: Optional[Engine] = None


def get_accounting_engine() -> Engine:
    """Return the process-wide accounting engine, creating it on first use.

    Raises:
        RuntimeError: If CONSULTFLOW_DB_URL is not configured.
    """
    global _accounting_engine
    if _accounting_engine is None:
        db_url = _get_env_var(ACCOUNTING_DB_URL_VAR)
        _accounting_engine = _create_engine(db_url)
    return _accounting_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Hands the shared accounting engine to the SQL repositories."""

    def get_accounting_engine(self) -> Engine:
        return get_accounting_engine()


__all__ = [
    "get_accounting_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
