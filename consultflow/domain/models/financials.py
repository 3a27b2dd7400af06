"""Domain models for the profit and loss pipeline."""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Any, Mapping

from consultflow.domain.constants import ALL
from consultflow.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class MonthlyFinancialPoint:
    """Monthly aggregate figures for one company.

    Attributes:
        date: First day of the month the figures belong to.
        revenue: Revenue for the month.
        cogs: Cost of goods sold, or None when the source omitted it.
        expenses: Operating expenses for the month.
        cash: Running cash balance at month end.
    """

    date: date
    revenue: Decimal
    cogs: Decimal | None
    expenses: Decimal
    cash: Decimal = Decimal("0")

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
    ) -> "MonthlyFinancialPoint":
        """Build a point from a JSON series row.

        Args:
            payload: Mapping with ``date`` and numeric fields.

        Returns:
            MonthlyFinancialPoint: Parsed point.

        Raises:
            ValueError: If the date is missing or malformed.
        """
        raw_date = str(payload.get("date") or "")
        if not raw_date:
            raise ValueError("Series row is missing its date")
        raw_cogs = payload.get("cogs")
        return cls(
            date=date.fromisoformat(raw_date[:10]),
            revenue=coerce_decimal(payload.get("revenue")),
            cogs=None if raw_cogs is None else coerce_decimal(raw_cogs),
            expenses=coerce_decimal(payload.get("expenses")),
            cash=coerce_decimal(payload.get("cash")),
        )


@dataclass(frozen=True)
class SyntheticTransaction:
    """Transaction-level record derived from a monthly aggregate."""

    id: str
    date: date
    account: str
    description: str
    amount: Decimal
    transaction_type: str


@dataclass(frozen=True)
class ReportFilters:
    """User controlled query state for the P&L report.

    ``min_amount`` and ``max_amount`` keep the raw user input; they are parsed
    when filters are applied.
    """

    query: str = ""
    min_amount: str | int | float | Decimal | None = None
    max_amount: str | int | float | Decimal | None = None
    account: str = ALL
    transaction_type: str = ALL
    expanded: dict[str, bool] = field(default_factory=dict)

    def with_updates(self, **changes) -> "ReportFilters":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def toggle_expanded(self, key: str) -> "ReportFilters":
        """Return a copy with the expansion state of ``key`` flipped."""
        expanded = dict(self.expanded)
        expanded[key] = not expanded.get(key, False)
        return replace(self, expanded=expanded)

    def is_expanded(self, key: str) -> bool:
        return bool(self.expanded.get(key, False))

    @staticmethod
    def cleared() -> "ReportFilters":
        """Return the default filter state."""
        return ReportFilters()


@dataclass(frozen=True)
class PLRow:
    """One line of the rendered profit and loss report."""

    key: str
    label: str
    amount: Decimal
    row_type: str
    account: str | None = None
    expandable: bool = False


__all__ = [
    "MonthlyFinancialPoint",
    "SyntheticTransaction",
    "ReportFilters",
    "PLRow",
]
