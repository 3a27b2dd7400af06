"""Domain models for chart of accounts and trial balances."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ChartOfAccountEntry:
    """Account from a company chart of accounts."""

    account_code: str
    account_name: str
    account_type: str
    parent_account_code: str | None = None
    currency: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class TrialBalanceEntry:
    """Debit and credit totals for one account in a trial balance."""

    account_code: str
    debit: Decimal
    credit: Decimal
    name: str | None = None


@dataclass(frozen=True)
class TrialBalance:
    """Snapshot of account balances for a period."""

    id: str
    company_id: str
    period_start: date
    period_end: date
    entries: list[TrialBalanceEntry] = field(default_factory=list)
    status: str = "draft"
    currency: str | None = None


@dataclass(frozen=True)
class ProfitAndLossTotals:
    """P&L totals derived from a trial balance."""

    revenue: Decimal
    cogs: Decimal
    opex: Decimal

    @property
    def gross_profit(self) -> Decimal:
        return self.revenue - self.cogs

    @property
    def net_income(self) -> Decimal:
        return self.gross_profit - self.opex


__all__ = [
    "ChartOfAccountEntry",
    "TrialBalanceEntry",
    "TrialBalance",
    "ProfitAndLossTotals",
]
