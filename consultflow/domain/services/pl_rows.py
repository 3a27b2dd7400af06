"""Build the ordered profit and loss rows from filtered transactions."""

from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from logging import Logger

from consultflow.domain.constants import (
    COGS,
    COGS_ACCOUNT,
    COGS_KEY,
    COMPUTED,
    EXPENSE,
    EXPENSE_CHILD_ACCOUNTS,
    EXPENSES_KEY,
    GROSS_PROFIT_KEY,
    NET_INCOME_KEY,
    REVENUE,
    REVENUE_KEY,
    SALES_ACCOUNT,
)
from consultflow.domain.models import (
    MonthlyFinancialPoint,
    PLRow,
    ReportFilters,
    SyntheticTransaction,
)
from consultflow.domain.services.transactions import (
    filter_transactions,
    synthesize_transactions,
)


def _total(
    transactions: Iterable[SyntheticTransaction],
    predicate: Callable[[SyntheticTransaction], bool],
) -> Decimal:
    return sum(
        (txn.amount for txn in transactions if predicate(txn)),
        Decimal("0"),
    )


def build_pl_rows(
    transactions: list[SyntheticTransaction],
    expanded: Mapping[str, bool] | None = None,
) -> list[PLRow]:
    """Aggregate transactions into the fixed P&L structure.

    The sequence is always Revenue, COGS, Gross Profit, Operating Expenses,
    Net Income, with child rows inserted under expanded sections. Expense
    child rows with a zero total are omitted.

    Args:
        transactions: Already filtered transactions.
        expanded: Row keys currently drilled open.

    Returns:
        list[PLRow]: Display rows with signed amounts.
    """
    expanded = expanded or {}
    rows: list[PLRow] = []

    revenue_total = _total(
        transactions,
        lambda txn: txn.transaction_type == REVENUE,
    )
    rows.append(
        PLRow(
            key=REVENUE_KEY,
            label="Revenue",
            amount=revenue_total,
            row_type=REVENUE,
            expandable=True,
        )
    )
    if expanded.get(REVENUE_KEY):
        sales_total = _total(
            transactions,
            lambda txn: txn.transaction_type == REVENUE
            and txn.account == SALES_ACCOUNT,
        )
        rows.append(
            PLRow(
                key="sales",
                label="  Product & Service Sales",
                amount=sales_total,
                row_type=REVENUE,
                account=SALES_ACCOUNT,
            )
        )

    cogs_total = _total(transactions, lambda txn: txn.transaction_type == COGS)
    rows.append(
        PLRow(
            key=COGS_KEY,
            label="Cost of Goods Sold",
            amount=-cogs_total,
            row_type=COGS,
            expandable=True,
        )
    )
    if expanded.get(COGS_KEY):
        for key, label, marker in (
            ("materials", "  Direct Materials", "Materials"),
            ("labor", "  Direct Labor", "Labor"),
        ):
            child_total = _total(
                transactions,
                lambda txn, marker=marker: txn.transaction_type == COGS
                and marker in txn.description,
            )
            rows.append(
                PLRow(
                    key=key,
                    label=label,
                    amount=-child_total,
                    row_type=COGS,
                    account=COGS_ACCOUNT,
                )
            )

    rows.append(
        PLRow(
            key=GROSS_PROFIT_KEY,
            label="Gross Profit",
            amount=revenue_total - cogs_total,
            row_type=COMPUTED,
        )
    )

    expense_total = _total(
        transactions,
        lambda txn: txn.transaction_type == EXPENSE,
    )
    rows.append(
        PLRow(
            key=EXPENSES_KEY,
            label="Operating Expenses",
            amount=-expense_total,
            row_type=EXPENSE,
            expandable=True,
        )
    )
    if expanded.get(EXPENSES_KEY):
        for account in EXPENSE_CHILD_ACCOUNTS:
            account_total = _total(
                transactions,
                lambda txn, account=account: txn.transaction_type == EXPENSE
                and txn.account == account,
            )
            if account_total > 0:
                rows.append(
                    PLRow(
                        key=account.lower(),
                        label=f"  {account}",
                        amount=-account_total,
                        row_type=EXPENSE,
                        account=account,
                    )
                )

    rows.append(
        PLRow(
            key=NET_INCOME_KEY,
            label="Net Income",
            amount=revenue_total - cogs_total - expense_total,
            row_type=COMPUTED,
        )
    )
    return rows


def compute_pl_rows(
    points: Iterable[MonthlyFinancialPoint] | None,
    filters: ReportFilters,
    id_factory: Callable[[], str] | None = None,
    logger: Logger | None = None,
) -> list[PLRow]:
    """Run the full synthesize, filter and aggregate pipeline.

    Args:
        points: Monthly series; None or empty yields zero-valued rows.
        filters: Current report filters.
        id_factory: Optional id generator for synthetic transactions.
        logger: Optional logger for ignored filter values.

    Returns:
        list[PLRow]: Ordered report rows.
    """
    transactions = synthesize_transactions(points or [], id_factory)
    filtered = filter_transactions(transactions, filters, logger)
    return build_pl_rows(filtered, filters.expanded)


__all__ = ["build_pl_rows", "compute_pl_rows"]
