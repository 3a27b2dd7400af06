"""Port for reading trial balances and charts of accounts."""

from typing import Protocol

from consultflow.domain.models import ChartOfAccountEntry, TrialBalance


class AccountingRepositoryPort(Protocol):
    """Port exposing read access to company accounting records."""

    def list_trial_balances(self, company_id: str) -> list[TrialBalance]:
        """Return every trial balance uploaded for the company."""

    def list_chart_of_accounts(
        self,
        company_id: str,
    ) -> list[ChartOfAccountEntry]:
        """Return the company chart of accounts."""


__all__ = ["AccountingRepositoryPort"]
