"""Tests for the P&L CSV export."""

import csv
import io
from decimal import Decimal

from consultflow.adapters.csv_export import export_pl_rows_csv
from consultflow.domain.models import PLRow


def test_export_writes_header_and_stripped_labels() -> None:
    rows = [
        PLRow("revenue", "Revenue", Decimal("100000"), "Revenue", None, True),
        PLRow(
            "sales",
            "  Product & Service Sales",
            Decimal("100000"),
            "Revenue",
            "Sales",
        ),
        PLRow("net-income", "Net Income", Decimal("-250.5"), "Computed"),
    ]
    stream = io.StringIO(newline="")

    count = export_pl_rows_csv(rows, stream)

    assert count == 3
    stream.seek(0)
    assert list(csv.reader(stream)) == [
        ["Account", "Amount", "Type"],
        ["Revenue", "100000", "Revenue"],
        ["Product & Service Sales", "100000", "Revenue"],
        ["Net Income", "-250.5", "Computed"],
    ]
