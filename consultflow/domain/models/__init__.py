"""Domain models package."""

from .accounting import (
    ChartOfAccountEntry,
    ProfitAndLossTotals,
    TrialBalance,
    TrialBalanceEntry,
)
from .drilldown import (
    DrillDownData,
    LedgerAccount,
    LedgerEntry,
    TransactionDetail,
)
from .financials import (
    MonthlyFinancialPoint,
    PLRow,
    ReportFilters,
    SyntheticTransaction,
)

__all__ = [
    "ChartOfAccountEntry",
    "ProfitAndLossTotals",
    "TrialBalance",
    "TrialBalanceEntry",
    "DrillDownData",
    "LedgerAccount",
    "LedgerEntry",
    "TransactionDetail",
    "MonthlyFinancialPoint",
    "PLRow",
    "ReportFilters",
    "SyntheticTransaction",
]
