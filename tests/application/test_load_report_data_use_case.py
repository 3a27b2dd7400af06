"""Tests for the LoadReportDataUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from consultflow.application.exceptions import DataUnavailableError
from consultflow.application.use_cases.load_report_data import (
    DEFAULT_ERROR_MESSAGE,
    SOURCE_REMOTE,
    SOURCE_TRIAL_BALANCE,
    SOURCE_TRIAL_BALANCE_RETRY,
    LoadReportDataUseCase,
)
from consultflow.domain.models import (
    ChartOfAccountEntry,
    MonthlyFinancialPoint,
    TrialBalance,
    TrialBalanceEntry,
)


COA = [
    ChartOfAccountEntry("4000", "Revenue", "Revenue"),
    ChartOfAccountEntry("6000", "Salaries", "Expense"),
]

TRIAL_BALANCE = TrialBalance(
    id="tb-1",
    company_id="lagos-ng",
    period_start=date(2024, 1, 1),
    period_end=date(2024, 1, 31),
    entries=[
        TrialBalanceEntry("4000", Decimal("0"), Decimal("5000")),
        TrialBalanceEntry("6000", Decimal("2000"), Decimal("0")),
    ],
)

REMOTE_POINTS = [
    MonthlyFinancialPoint(
        date=date(2024, 1, 1),
        revenue=Decimal("100"),
        cogs=Decimal("40"),
        expenses=Decimal("60"),
    )
]


def _build(repository, gateway, **kwargs):
    return LoadReportDataUseCase(
        accounting_repository=repository,
        reports_gateway=gateway,
        logger=MagicMock(),
        **kwargs,
    )


def test_trial_balance_path_is_preferred() -> None:
    repository = MagicMock()
    repository.list_trial_balances.return_value = [TRIAL_BALANCE]
    repository.list_chart_of_accounts.return_value = COA
    gateway = MagicMock()

    result = _build(repository, gateway).execute(company_id="lagos-ng")

    assert result.ok
    assert result.source == SOURCE_TRIAL_BALANCE
    assert result.loading is False
    assert len(result.points) == 1
    point = result.points[0]
    assert point.date == date(2024, 1, 31)
    assert point.revenue == Decimal("5000")
    assert point.expenses == Decimal("2000")
    gateway.fetch_series.assert_not_called()


def test_remote_endpoint_used_without_trial_balance() -> None:
    repository = MagicMock()
    repository.list_trial_balances.return_value = []
    gateway = MagicMock()
    gateway.fetch_series.return_value = REMOTE_POINTS

    result = _build(repository, gateway).execute(
        company_id="abuja",
        range_preset="30",
        date_from="2024-01-01",
        date_to="2024-01-31",
        reporting_currency="USD",
    )

    assert result.source == SOURCE_REMOTE
    assert result.points == REMOTE_POINTS
    assert result.reporting_currency == "USD"
    gateway.fetch_series.assert_called_once_with(
        "abuja",
        "30",
        "2024-01-01",
        "2024-01-31",
        "USD",
    )


def test_remote_endpoint_used_when_chart_of_accounts_is_empty() -> None:
    repository = MagicMock()
    repository.list_trial_balances.return_value = [TRIAL_BALANCE]
    repository.list_chart_of_accounts.return_value = []
    gateway = MagicMock()
    gateway.fetch_series.return_value = REMOTE_POINTS

    result = _build(repository, gateway).execute(company_id="lagos-ng")

    assert result.source == SOURCE_REMOTE


def test_trial_balance_retried_after_remote_failure() -> None:
    """A transient repository failure should be recovered on retry."""
    repository = MagicMock()
    repository.list_trial_balances.side_effect = [
        DataUnavailableError("database busy"),
        [TRIAL_BALANCE],
    ]
    repository.list_chart_of_accounts.return_value = COA
    gateway = MagicMock()

    result = _build(repository, gateway).execute(company_id="lagos-ng")

    assert result.ok
    assert result.source == SOURCE_TRIAL_BALANCE_RETRY
    assert repository.list_trial_balances.call_count == 2


def test_error_result_when_everything_fails() -> None:
    repository = MagicMock()
    repository.list_trial_balances.return_value = []
    gateway = MagicMock()
    gateway.fetch_series.side_effect = DataUnavailableError(
        "Reports endpoint returned 503"
    )
    logger = MagicMock()

    use_case = LoadReportDataUseCase(
        accounting_repository=repository,
        reports_gateway=gateway,
        logger=logger,
    )
    result = use_case.execute(company_id="lagos-ng")

    assert not result.ok
    assert result.points == []
    assert result.source is None
    assert result.error == "Reports endpoint returned 503"
    assert repository.list_trial_balances.call_count == 2
    logger.error.assert_called()


def test_error_without_message_uses_default_text() -> None:
    repository = MagicMock()
    repository.list_trial_balances.return_value = []
    gateway = MagicMock()
    gateway.fetch_series.side_effect = RuntimeError()

    result = _build(repository, gateway).execute(company_id="lagos-ng")

    assert result.error == DEFAULT_ERROR_MESSAGE


def test_retry_failure_keeps_original_error() -> None:
    repository = MagicMock()
    repository.list_trial_balances.side_effect = [
        [],
        DataUnavailableError("still down"),
    ]
    gateway = MagicMock()
    gateway.fetch_series.side_effect = DataUnavailableError("remote down")

    result = _build(repository, gateway).execute(company_id="lagos-ng")

    assert result.error == "remote down"


def test_empty_company_uses_default_for_trial_balance() -> None:
    repository = MagicMock()
    repository.list_trial_balances.return_value = [TRIAL_BALANCE]
    repository.list_chart_of_accounts.return_value = COA

    _build(
        repository,
        MagicMock(),
        default_company_id="accra-gh",
    ).execute()

    repository.list_trial_balances.assert_called_once_with("accra-gh")
    repository.list_chart_of_accounts.assert_called_once_with("accra-gh")


def test_result_formats_in_reporting_currency() -> None:
    repository = MagicMock()
    repository.list_trial_balances.return_value = []
    gateway = MagicMock()
    gateway.fetch_series.return_value = REMOTE_POINTS

    result = _build(
        repository,
        gateway,
        rates_per_usd={"NGN": Decimal("1500")},
    ).execute(reporting_currency="USD")

    assert result.format_currency(Decimal("3000")) == "$2"
