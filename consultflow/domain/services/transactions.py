"""Synthesize and filter transaction-level records from monthly points."""

from collections.abc import Callable, Iterable
from decimal import Decimal
from logging import Logger
import random
import string
import time

from consultflow.domain.constants import (
    ALL,
    COGS,
    COGS_SPLITS,
    DEFAULT_COGS_RATIO,
    EXPENSE,
    EXPENSE_SPLITS,
    REVENUE,
    REVENUE_SPLITS,
)
from consultflow.domain.models import (
    MonthlyFinancialPoint,
    ReportFilters,
    SyntheticTransaction,
)
from consultflow.utils.decimal_utils import coerce_decimal, parse_decimal


_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_transaction_id() -> str:
    """Return a throwaway id made of the epoch millis and a random suffix."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=6))
    return f"{int(time.time() * 1000)}-{suffix}"


def synthesize_transactions(
    points: Iterable[MonthlyFinancialPoint],
    id_factory: Callable[[], str] | None = None,
) -> list[SyntheticTransaction]:
    """Decompose each monthly point into fixed-ratio transactions.

    Args:
        points: Monthly aggregates to decompose.
        id_factory: Optional callable producing transaction ids.

    Returns:
        list[SyntheticTransaction]: Eight transactions per point, in split
        order (revenue, COGS, expenses).
    """
    make_id = id_factory or new_transaction_id
    transactions: list[SyntheticTransaction] = []
    for point in points:
        revenue = coerce_decimal(point.revenue)
        if point.cogs is None:
            cogs = revenue * DEFAULT_COGS_RATIO
        else:
            cogs = coerce_decimal(point.cogs)
        expenses = coerce_decimal(point.expenses)
        for transaction_type, total, splits in (
            (REVENUE, revenue, REVENUE_SPLITS),
            (COGS, cogs, COGS_SPLITS),
            (EXPENSE, expenses, EXPENSE_SPLITS),
        ):
            for account, description, ratio in splits:
                transactions.append(
                    SyntheticTransaction(
                        id=make_id(),
                        date=point.date,
                        account=account,
                        description=description,
                        amount=total * ratio,
                        transaction_type=transaction_type,
                    )
                )
    return transactions


def parse_amount_bound(raw, logger: Logger | None = None) -> Decimal | None:
    """Parse a min/max amount filter value.

    Empty input means no bound. Non-numeric input is ignored as well, with a
    debug message when a logger is given. ``"0"`` is a real bound.

    Args:
        raw: Raw filter value.
        logger: Optional logger for ignored values.

    Returns:
        Decimal | None: Parsed bound, or None when the bound is absent.
    """
    parsed = parse_decimal(raw)
    if parsed is None and logger is not None:
        if raw is not None and not (isinstance(raw, str) and not raw.strip()):
            logger.debug(f"Ignoring non-numeric amount filter: {raw!r}")
    return parsed


def filter_transactions(
    transactions: Iterable[SyntheticTransaction],
    filters: ReportFilters,
    logger: Logger | None = None,
) -> list[SyntheticTransaction]:
    """Keep the transactions matching every active filter.

    Args:
        transactions: Candidate transactions.
        filters: Current report filters.
        logger: Optional logger for ignored filter values.

    Returns:
        list[SyntheticTransaction]: Matching transactions, order preserved.
    """
    query = (filters.query or "").lower()
    min_amount = parse_amount_bound(filters.min_amount, logger)
    max_amount = parse_amount_bound(filters.max_amount, logger)

    matched: list[SyntheticTransaction] = []
    for txn in transactions:
        if query and query not in txn.description.lower():
            continue
        if min_amount is not None and txn.amount < min_amount:
            continue
        if max_amount is not None and txn.amount > max_amount:
            continue
        if filters.account != ALL and txn.account != filters.account:
            continue
        if (
            filters.transaction_type != ALL
            and txn.transaction_type != filters.transaction_type
        ):
            continue
        matched.append(txn)
    return matched


__all__ = [
    "new_transaction_id",
    "synthesize_transactions",
    "parse_amount_bound",
    "filter_transactions",
]
