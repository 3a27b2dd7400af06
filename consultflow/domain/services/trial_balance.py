"""Domain services deriving P&L figures from trial balances."""

from collections.abc import Iterable
from decimal import Decimal

from consultflow.domain.models import (
    ChartOfAccountEntry,
    MonthlyFinancialPoint,
    ProfitAndLossTotals,
    TrialBalance,
)
from consultflow.utils.decimal_utils import coerce_decimal


def compute_pl_from_trial_balance(
    coa: Iterable[ChartOfAccountEntry],
    trial_balance: TrialBalance,
) -> ProfitAndLossTotals:
    """Sum trial balance entries into revenue, COGS and operating expenses.

    Revenue accounts carry credit balances, so their sign is flipped.
    Inventory asset accounts stand in for cost of goods sold.

    Args:
        coa: Chart of accounts used to classify entries.
        trial_balance: Trial balance to aggregate.

    Returns:
        ProfitAndLossTotals: Aggregated totals.
    """
    accounts = {account.account_code: account for account in coa}
    revenue = Decimal("0")
    cogs = Decimal("0")
    opex = Decimal("0")
    for entry in trial_balance.entries:
        account = accounts.get(entry.account_code)
        if account is None:
            continue
        balance = coerce_decimal(entry.debit) - coerce_decimal(entry.credit)
        if account.account_type == "Revenue":
            revenue += -balance
        elif account.account_type == "Expense":
            opex += balance
        elif (
            account.account_type == "Asset"
            and "inventory" in account.account_name.lower()
        ):
            cogs += balance
    return ProfitAndLossTotals(revenue=revenue, cogs=cogs, opex=opex)


def latest_trial_balance(
    trial_balances: Iterable[TrialBalance],
) -> TrialBalance | None:
    """Return the trial balance with the most recent period end."""
    ordered = sorted(trial_balances, key=lambda tb: tb.period_end)
    return ordered[-1] if ordered else None


def point_from_trial_balance(
    coa: Iterable[ChartOfAccountEntry],
    trial_balance: TrialBalance,
) -> MonthlyFinancialPoint:
    """Turn a trial balance into a single monthly point dated at period end."""
    totals = compute_pl_from_trial_balance(coa, trial_balance)
    return MonthlyFinancialPoint(
        date=trial_balance.period_end,
        revenue=totals.revenue,
        cogs=totals.cogs,
        expenses=totals.opex,
        cash=Decimal("0"),
    )


__all__ = [
    "compute_pl_from_trial_balance",
    "latest_trial_balance",
    "point_from_trial_balance",
]
