"""CSV export of P&L rows."""

import csv
from collections.abc import Iterable
from typing import TextIO

from consultflow.domain.models import PLRow


CSV_HEADER = ("Account", "Amount", "Type")


def export_pl_rows_csv(rows: Iterable[PLRow], stream: TextIO) -> int:
    """Write P&L rows as CSV with indentation stripped from labels.

    Args:
        rows: Rows in display order.
        stream: Text stream opened with ``newline=""``.

    Returns:
        int: Number of data rows written.
    """
    writer = csv.writer(stream)
    writer.writerow(CSV_HEADER)
    count = 0
    for row in rows:
        writer.writerow([row.label.strip(), str(row.amount), row.row_type])
        count += 1
    return count


__all__ = ["CSV_HEADER", "export_pl_rows_csv"]
