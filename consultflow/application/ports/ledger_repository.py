"""Port for general ledger queries used by drill-down."""

from datetime import date
from typing import Protocol

from consultflow.domain.models import LedgerAccount, LedgerEntry


class LedgerRepositoryPort(Protocol):
    """Port exposing account metadata and ledger entries."""

    def fetch_account(
        self,
        company_id: str,
        account_code: str,
    ) -> LedgerAccount:
        """Return metadata for one account.

        Raises:
            LedgerFetchError: If the account cannot be read.
        """

    def fetch_ledger_entries(
        self,
        company_id: str,
        account_code: str,
        date_from: date,
        date_to: date,
    ) -> list[LedgerEntry]:
        """Return ledger entries for the account in posting order."""

    def fetch_child_accounts(
        self,
        company_id: str,
        parent_account_code: str,
    ) -> list[LedgerAccount]:
        """Return the direct children of a group account."""


__all__ = ["LedgerRepositoryPort"]
