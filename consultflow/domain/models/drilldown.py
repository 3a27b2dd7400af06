"""Domain models for account drill-down."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LedgerAccount:
    """Account metadata from the general ledger."""

    account_code: str
    account_name: str | None
    is_group: bool = False
    parent_account_code: str | None = None


@dataclass(frozen=True)
class LedgerEntry:
    """Raw general ledger entry for an account."""

    entry_id: str | None
    posting_date: date
    voucher_type: str | None
    voucher_no: str | None
    remarks: str | None
    account_code: str
    debit: Decimal
    credit: Decimal
    created_by: str | None = None


@dataclass(frozen=True)
class TransactionDetail:
    """Ledger line as displayed in a drill-down."""

    id: str
    date: date
    reference: str
    description: str
    debit: Decimal
    credit: Decimal
    balance: Decimal
    created_by: str


@dataclass(frozen=True)
class DrillDownData:
    """Ledger detail for one account, with children for group accounts.

    Attributes:
        account_code: Account identifier.
        account_name: Display name of the account.
        balance: Sum of debit minus credit over ``transactions`` only.
        transactions: Ledger lines in posting order.
        children: Resolved child accounts, None for leaf accounts.
        is_fallback: True when the ledger was unreachable and the data is
            synthetic.
    """

    account_code: str
    account_name: str
    balance: Decimal
    transactions: list[TransactionDetail]
    children: list["DrillDownData"] | None = None
    is_fallback: bool = False

    @property
    def rollup_balance(self) -> Decimal:
        """Return the own balance plus every descendant balance."""
        total = self.balance
        for child in self.children or []:
            total += child.rollup_balance
        return total


__all__ = [
    "LedgerAccount",
    "LedgerEntry",
    "TransactionDetail",
    "DrillDownData",
]
