"""Use case to produce the profit and loss rows for a company."""

from dataclasses import dataclass

from consultflow.application.use_cases.load_report_data import (
    LoadReportDataUseCase,
    ReportDataResult,
)
from consultflow.domain.constants import DEFAULT_REPORTING_CURRENCY
from consultflow.domain.models import PLRow, ReportFilters
from consultflow.domain.services.pl_rows import compute_pl_rows
from consultflow.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ProfitAndLossReport:
    """Rows of the P&L report with the data they were computed from."""

    rows: list[PLRow]
    data: ReportDataResult

    @property
    def error(self) -> str | None:
        return self.data.error


class BuildProfitAndLossUseCase:
    """Load report data and aggregate it into P&L rows."""

    def __init__(
        self,
        load_report_data: LoadReportDataUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            load_report_data: Loader providing the monthly series.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._load_report_data = load_report_data
        self._logger = logger or get_app_logger()

    def execute(
        self,
        company_id: str = "",
        filters: ReportFilters | None = None,
        range_preset: str = "90",
        date_from: str | None = None,
        date_to: str | None = None,
        reporting_currency: str = DEFAULT_REPORTING_CURRENCY,
    ) -> ProfitAndLossReport:
        """Return the P&L report; rows are empty when data failed to load."""
        data = self._load_report_data.execute(
            company_id=company_id,
            range_preset=range_preset,
            date_from=date_from,
            date_to=date_to,
            reporting_currency=reporting_currency,
        )
        if not data.ok:
            return ProfitAndLossReport(rows=[], data=data)
        rows = compute_pl_rows(
            data.points,
            filters or ReportFilters(),
            logger=self._logger,
        )
        self._logger.info(
            f"Built {len(rows)} P&L rows from {len(data.points)} points"
        )
        return ProfitAndLossReport(rows=rows, data=data)

    def recompute(
        self,
        report: ProfitAndLossReport,
        filters: ReportFilters,
    ) -> ProfitAndLossReport:
        """Re-run the aggregation for new filters without reloading data."""
        if not report.data.ok:
            return report
        rows = compute_pl_rows(
            report.data.points,
            filters,
            logger=self._logger,
        )
        return ProfitAndLossReport(rows=rows, data=report.data)


__all__ = ["BuildProfitAndLossUseCase", "ProfitAndLossReport"]
