"""Database ports for the ConsultFlow reporting core.

This module defines the application-layer protocol for accessing the
accounting database engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the accounting database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_accounting_engine(self) -> Engine:
        """Get the engine for the accounting database.

        Returns:
            Engine: SQLAlchemy engine holding ledgers and trial balances.
        """


__all__ = ["DatabaseEnginePort"]
