"""Use case to load the monthly series behind the P&L report."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

from consultflow.application.ports.accounting_repository import (
    AccountingRepositoryPort,
)
from consultflow.application.ports.reports_gateway import ReportsGatewayPort
from consultflow.domain.constants import (
    DEFAULT_COMPANY_ID,
    DEFAULT_REPORTING_CURRENCY,
)
from consultflow.domain.models import MonthlyFinancialPoint
from consultflow.domain.services.currency import (
    convert_amount,
    format_currency,
)
from consultflow.domain.services.trial_balance import (
    latest_trial_balance,
    point_from_trial_balance,
)
from consultflow.infrastructure.logging.logger import get_app_logger


SOURCE_TRIAL_BALANCE = "trial_balance"
SOURCE_REMOTE = "remote"
SOURCE_TRIAL_BALANCE_RETRY = "trial_balance_retry"
DEFAULT_ERROR_MESSAGE = "Failed to load data"


@dataclass(frozen=True)
class ReportDataResult:
    """Outcome of a report data load.

    Attributes:
        points: Monthly series, empty when loading failed.
        error: Human readable error, None on success.
        source: Which backing store produced the points.
        reporting_currency: Currency used by ``format_currency``.
        base_currency: Currency the amounts are stored in.
        rates_per_usd: Optional FX rates for display conversion.
        loading: Always False once the result is returned.
    """

    points: list[MonthlyFinancialPoint]
    error: str | None
    source: str | None
    reporting_currency: str = DEFAULT_REPORTING_CURRENCY
    base_currency: str = DEFAULT_REPORTING_CURRENCY
    rates_per_usd: Mapping[str, Decimal] | None = field(default=None)
    loading: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def format_currency(self, amount: Decimal) -> str:
        """Format an amount in the reporting currency."""
        converted = convert_amount(
            amount,
            self.base_currency,
            self.reporting_currency,
            self.rates_per_usd,
        )
        return format_currency(converted, self.reporting_currency)


class LoadReportDataUseCase:
    """Load monthly P&L figures, preferring the latest trial balance."""

    def __init__(
        self,
        accounting_repository: AccountingRepositoryPort,
        reports_gateway: ReportsGatewayPort,
        logger=None,
        default_company_id: str = DEFAULT_COMPANY_ID,
        rates_per_usd: Mapping[str, Decimal] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounting_repository: Port providing trial balances and CoA.
            reports_gateway: Port providing server-side computed series.
            logger: Optional logger compatible with logging.Logger-like API.
            default_company_id: Company used when none is given.
            rates_per_usd: Optional FX rates attached to results.
        """
        self._accounting_repository = accounting_repository
        self._reports_gateway = reports_gateway
        self._logger = logger or get_app_logger()
        self._default_company_id = default_company_id
        self._rates_per_usd = rates_per_usd

    def execute(
        self,
        company_id: str = "",
        range_preset: str = "90",
        date_from: str | None = None,
        date_to: str | None = None,
        reporting_currency: str = DEFAULT_REPORTING_CURRENCY,
    ) -> ReportDataResult:
        """Return the monthly series for a company, never raising.

        The trial balance path runs first. When no trial balance exists the
        remote endpoint is queried. When that fails the trial balance path is
        attempted once more before an error result is returned.

        Args:
            company_id: Company identifier; empty uses the default company.
            range_preset: Range preset forwarded to the remote endpoint.
            date_from: Optional ISO lower bound.
            date_to: Optional ISO upper bound.
            reporting_currency: Currency for display formatting.

        Returns:
            ReportDataResult: Points or an error message.
        """
        resolved_company = company_id or self._default_company_id
        try:
            point = self._trial_balance_point(resolved_company)
            if point is not None:
                self._logger.info(
                    f"Loaded P&L for {resolved_company} from trial balance "
                    f"ending {point.date}"
                )
                return self._result(
                    [point],
                    SOURCE_TRIAL_BALANCE,
                    reporting_currency,
                )
            points = self._reports_gateway.fetch_series(
                company_id,
                range_preset,
                date_from,
                date_to,
                reporting_currency,
            )
            self._logger.info(
                f"Loaded {len(points)} series points for "
                f"{resolved_company} from the reporting endpoint"
            )
            return self._result(points, SOURCE_REMOTE, reporting_currency)
        except Exception as exc:
            self._logger.warning(
                f"Report data load failed for {resolved_company}: {exc}"
            )
            return self._recover(resolved_company, exc, reporting_currency)

    def _recover(
        self,
        company_id: str,
        original_error: Exception,
        reporting_currency: str,
    ) -> ReportDataResult:
        try:
            point = self._trial_balance_point(company_id)
        except Exception as exc:
            self._logger.error(
                f"Trial balance retry failed for {company_id}: {exc}"
            )
            point = None
        if point is not None:
            self._logger.info(
                f"Recovered P&L for {company_id} from trial balance"
            )
            return self._result(
                [point],
                SOURCE_TRIAL_BALANCE_RETRY,
                reporting_currency,
            )
        message = str(original_error) or DEFAULT_ERROR_MESSAGE
        self._logger.error(
            f"Report data unavailable for {company_id}: {message}"
        )
        return ReportDataResult(
            points=[],
            error=message,
            source=None,
            reporting_currency=reporting_currency,
            rates_per_usd=self._rates_per_usd,
        )

    def _trial_balance_point(
        self,
        company_id: str,
    ) -> MonthlyFinancialPoint | None:
        latest = latest_trial_balance(
            self._accounting_repository.list_trial_balances(company_id)
        )
        if latest is None:
            return None
        coa = self._accounting_repository.list_chart_of_accounts(company_id)
        if not coa:
            return None
        return point_from_trial_balance(coa, latest)

    def _result(
        self,
        points: list[MonthlyFinancialPoint],
        source: str,
        reporting_currency: str,
    ) -> ReportDataResult:
        return ReportDataResult(
            points=list(points),
            error=None,
            source=source,
            reporting_currency=reporting_currency,
            rates_per_usd=self._rates_per_usd,
        )


__all__ = [
    "LoadReportDataUseCase",
    "ReportDataResult",
    "SOURCE_TRIAL_BALANCE",
    "SOURCE_REMOTE",
    "SOURCE_TRIAL_BALANCE_RETRY",
    "DEFAULT_ERROR_MESSAGE",
]
