"""Domain services package."""

from .currency import convert_amount, format_currency
from .drilldown import (
    build_fallback_drilldown,
    build_transaction_details,
    compute_balance,
)
from .periods import resolve_period
from .pl_rows import build_pl_rows, compute_pl_rows
from .trial_balance import (
    compute_pl_from_trial_balance,
    latest_trial_balance,
    point_from_trial_balance,
)
from .transactions import (
    filter_transactions,
    parse_amount_bound,
    synthesize_transactions,
)

__all__ = [
    "convert_amount",
    "format_currency",
    "build_fallback_drilldown",
    "build_transaction_details",
    "compute_balance",
    "resolve_period",
    "build_pl_rows",
    "compute_pl_rows",
    "compute_pl_from_trial_balance",
    "latest_trial_balance",
    "point_from_trial_balance",
    "filter_transactions",
    "parse_amount_bound",
    "synthesize_transactions",
]
