"""Domain constants for the profit and loss report."""

from decimal import Decimal

ALL = "All"

REVENUE = "Revenue"
COGS = "COGS"
EXPENSE = "Expense"
COMPUTED = "Computed"

TRANSACTION_TYPES = (REVENUE, COGS, EXPENSE)

SALES_ACCOUNT = "Sales"
COGS_ACCOUNT = "COGS"
PAYROLL_ACCOUNT = "Payroll"
RENT_ACCOUNT = "Rent"
MARKETING_ACCOUNT = "Marketing"
OTHER_ACCOUNT = "Other"

TRANSACTION_ACCOUNTS = (
    SALES_ACCOUNT,
    COGS_ACCOUNT,
    PAYROLL_ACCOUNT,
    RENT_ACCOUNT,
    MARKETING_ACCOUNT,
    OTHER_ACCOUNT,
)

# (account, description, ratio); ratios of each category sum to 1.
REVENUE_SPLITS = (
    (SALES_ACCOUNT, "Product Sales", Decimal("0.7")),
    (SALES_ACCOUNT, "Service Revenue", Decimal("0.3")),
)
COGS_SPLITS = (
    (COGS_ACCOUNT, "Direct Materials", Decimal("0.6")),
    (COGS_ACCOUNT, "Direct Labor", Decimal("0.4")),
)
EXPENSE_SPLITS = (
    (PAYROLL_ACCOUNT, "Salaries & Benefits", Decimal("0.5")),
    (RENT_ACCOUNT, "Office Rent", Decimal("0.2")),
    (MARKETING_ACCOUNT, "Marketing & Advertising", Decimal("0.2")),
    (OTHER_ACCOUNT, "General & Administrative", Decimal("0.1")),
)

# Applied when a series row carries no COGS figure at all.
DEFAULT_COGS_RATIO = Decimal("0.4")

EXPENSE_CHILD_ACCOUNTS = (
    PAYROLL_ACCOUNT,
    RENT_ACCOUNT,
    MARKETING_ACCOUNT,
    OTHER_ACCOUNT,
)

REVENUE_KEY = "revenue"
COGS_KEY = "cogs"
EXPENSES_KEY = "expenses"
GROSS_PROFIT_KEY = "gross-profit"
NET_INCOME_KEY = "net-income"
EXPANDABLE_ROW_KEYS = (REVENUE_KEY, COGS_KEY, EXPENSES_KEY)

ACCOUNT_TYPES = ("Asset", "Liability", "Equity", "Revenue", "Expense")

DEFAULT_COMPANY_ID = "lagos-ng"
DEFAULT_REPORTING_CURRENCY = "NGN"


__all__ = [
    "ALL",
    "REVENUE",
    "COGS",
    "EXPENSE",
    "COMPUTED",
    "TRANSACTION_TYPES",
    "SALES_ACCOUNT",
    "COGS_ACCOUNT",
    "PAYROLL_ACCOUNT",
    "RENT_ACCOUNT",
    "MARKETING_ACCOUNT",
    "OTHER_ACCOUNT",
    "TRANSACTION_ACCOUNTS",
    "REVENUE_SPLITS",
    "COGS_SPLITS",
    "EXPENSE_SPLITS",
    "DEFAULT_COGS_RATIO",
    "EXPENSE_CHILD_ACCOUNTS",
    "REVENUE_KEY",
    "COGS_KEY",
    "EXPENSES_KEY",
    "GROSS_PROFIT_KEY",
    "NET_INCOME_KEY",
    "EXPANDABLE_ROW_KEYS",
    "ACCOUNT_TYPES",
    "DEFAULT_COMPANY_ID",
    "DEFAULT_REPORTING_CURRENCY",
]
