"""Composition root for wiring infrastructure adapters."""

from consultflow.application.ports.accounting_repository import (
    AccountingRepositoryPort,
)
from consultflow.application.ports.database import DatabaseEnginePort
from consultflow.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from consultflow.application.ports.reports_gateway import ReportsGatewayPort
from consultflow.application.use_cases.build_pl_report import (
    BuildProfitAndLossUseCase,
)
from consultflow.application.use_cases.get_drilldown import (
    GetDrillDownUseCase,
)
from consultflow.application.use_cases.load_report_data import (
    LoadReportDataUseCase,
)
from consultflow.infrastructure.accounting_repository import (
    SqlAlchemyAccountingRepository,
)
from consultflow.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from consultflow.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from consultflow.infrastructure.logging.logger import get_app_logger
from consultflow.infrastructure.reports_gateway import HttpReportsGateway
from consultflow.infrastructure.settings import ConsultFlowSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounting_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountingRepositoryPort:
    """Return the trial balance and chart of accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountingRepository(resolved_db)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the general ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_reports_gateway(
    settings: ConsultFlowSettings | None = None,
) -> ReportsGatewayPort:
    """Return the HTTP gateway for the configured data source."""
    resolved = settings or ConsultFlowSettings.from_env()
    return HttpReportsGateway(
        base_url=resolved.reports_base_url,
        data_source=resolved.data_source,
        timeout=resolved.reports_timeout,
        logger=get_app_logger(),
    )


def build_load_report_data(
    db_port: DatabaseEnginePort | None = None,
    settings: ConsultFlowSettings | None = None,
) -> LoadReportDataUseCase:
    """Return the report data loader wired to its adapters."""
    resolved = settings or ConsultFlowSettings.from_env()
    return LoadReportDataUseCase(
        accounting_repository=build_accounting_repository(db_port),
        reports_gateway=build_reports_gateway(resolved),
        logger=get_app_logger(),
        default_company_id=resolved.default_company_id,
    )


def build_pl_report_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ConsultFlowSettings | None = None,
) -> BuildProfitAndLossUseCase:
    """Return the P&L report use case."""
    return BuildProfitAndLossUseCase(
        load_report_data=build_load_report_data(db_port, settings),
        logger=get_app_logger(),
    )


def build_drilldown_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ConsultFlowSettings | None = None,
) -> GetDrillDownUseCase:
    """Return the drill-down use case with the configured cache TTL."""
    resolved = settings or ConsultFlowSettings.from_env()
    return GetDrillDownUseCase(
        ledger_repository=build_ledger_repository(db_port),
        logger=get_app_logger(),
        cache_ttl_seconds=resolved.drilldown_cache_ttl,
    )


__all__ = [
    "build_database_adapter",
    "build_accounting_repository",
    "build_ledger_repository",
    "build_reports_gateway",
    "build_load_report_data",
    "build_pl_report_use_case",
    "build_drilldown_use_case",
]
