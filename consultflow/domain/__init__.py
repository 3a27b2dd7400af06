"""Domain package for P&L rules and core models."""

from .models import (
    ChartOfAccountEntry,
    DrillDownData,
    MonthlyFinancialPoint,
    PLRow,
    ReportFilters,
    SyntheticTransaction,
    TrialBalance,
)
from .services import build_pl_rows, compute_pl_rows

__all__ = [
    "ChartOfAccountEntry",
    "DrillDownData",
    "MonthlyFinancialPoint",
    "PLRow",
    "ReportFilters",
    "SyntheticTransaction",
    "TrialBalance",
    "build_pl_rows",
    "compute_pl_rows",
]
