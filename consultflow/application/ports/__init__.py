"""Application ports package."""

from .accounting_repository import AccountingRepositoryPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .reports_gateway import ReportsGatewayPort

__all__ = [
    "AccountingRepositoryPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "ReportsGatewayPort",
]
