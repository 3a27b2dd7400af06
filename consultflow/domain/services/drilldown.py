"""Domain services for account drill-down."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal
import random
import zlib

from consultflow.domain.models import (
    DrillDownData,
    LedgerEntry,
    TransactionDetail,
)
from consultflow.utils.decimal_utils import coerce_decimal


FALLBACK_TRANSACTION_COUNT = 10
FALLBACK_CREATOR = "admin@consultflow.com"


def build_transaction_details(
    entries: Iterable[LedgerEntry],
) -> list[TransactionDetail]:
    """Convert ledger entries into display lines with running balances.

    Args:
        entries: Ledger entries in posting order.

    Returns:
        list[TransactionDetail]: Lines carrying the cumulative debit minus
        credit balance.
    """
    details: list[TransactionDetail] = []
    running = Decimal("0")
    for entry in entries:
        debit = coerce_decimal(entry.debit)
        credit = coerce_decimal(entry.credit)
        running += debit - credit
        voucher_type = entry.voucher_type or ""
        voucher_no = entry.voucher_no or ""
        details.append(
            TransactionDetail(
                id=entry.entry_id or f"{voucher_type}-{voucher_no}",
                date=entry.posting_date,
                reference=f"{voucher_type} {voucher_no}".strip(),
                description=entry.remarks or entry.account_code,
                debit=debit,
                credit=credit,
                balance=running,
                created_by=entry.created_by or "System",
            )
        )
    return details


def compute_balance(transactions: Iterable[TransactionDetail]) -> Decimal:
    """Return the sum of debit minus credit."""
    return sum(
        (txn.debit - txn.credit for txn in transactions),
        Decimal("0"),
    )


def humanize_account_code(account_code: str) -> str:
    """Turn ``cost_of_sales`` into ``Cost Of Sales``."""
    words = account_code.replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def _random_amount(rng: random.Random) -> Decimal:
    if rng.random() > 0.5:
        return Decimal(rng.randrange(50000))
    return Decimal("0")


def build_fallback_drilldown(
    company_id: str,
    account_code: str,
    date_from: date,
    date_to: date,
) -> DrillDownData:
    """Return synthetic drill-down data for an unreachable ledger.

    The content is seeded from the request so repeated calls agree.

    Args:
        company_id: Company identifier.
        account_code: Account identifier.
        date_from: Lower bound for the synthetic posting dates.
        date_to: Upper bound for the synthetic posting dates.

    Returns:
        DrillDownData: Ten synthetic lines flagged with ``is_fallback``.
    """
    seed_key = f"{company_id}|{account_code}|{date_from}|{date_to}"
    rng = random.Random(zlib.crc32(seed_key.encode("utf-8")))
    span_days = max((date_to - date_from).days, 0)

    raw_lines: list[tuple[date, int, Decimal, Decimal]] = []
    for index in range(FALLBACK_TRANSACTION_COUNT):
        posted = date_from + timedelta(days=rng.randint(0, span_days))
        debit = _random_amount(rng)
        credit = _random_amount(rng)
        raw_lines.append((posted, index, debit, credit))
    raw_lines.sort(key=lambda line: (line[0], line[1]))

    transactions: list[TransactionDetail] = []
    running = Decimal("0")
    for posted, index, debit, credit in raw_lines:
        running += debit - credit
        transactions.append(
            TransactionDetail(
                id=f"txn-{index + 1}",
                date=posted,
                reference=f"INV-{1000 + index}",
                description=f"Transaction {index + 1} for {account_code}",
                debit=debit,
                credit=credit,
                balance=running,
                created_by=FALLBACK_CREATOR,
            )
        )
    return DrillDownData(
        account_code=account_code,
        account_name=humanize_account_code(account_code),
        balance=compute_balance(transactions),
        transactions=transactions,
        children=None,
        is_fallback=True,
    )


__all__ = [
    "FALLBACK_TRANSACTION_COUNT",
    "FALLBACK_CREATOR",
    "build_transaction_details",
    "compute_balance",
    "humanize_account_code",
    "build_fallback_drilldown",
]
