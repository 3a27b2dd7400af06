"""Tests for the SQLAlchemy ledger repository."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from consultflow.application.exceptions import LedgerFetchError
from consultflow.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)


class _FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(results) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_accounting_engine.return_value = engine
    return db_port


def _account_row(code, name, is_group=0, parent=None):
    return SimpleNamespace(
        account_code=code,
        account_name=name,
        is_group=is_group,
        parent_account_code=parent,
    )


def test_fetch_account_returns_metadata() -> None:
    repository = SqlAlchemyLedgerRepository(
        _build_db_port([[_account_row("6000", "Operating Expenses", 1)]])
    )

    account = repository.fetch_account("lagos-ng", "6000")

    assert account.account_name == "Operating Expenses"
    assert account.is_group is True


def test_fetch_account_raises_when_missing() -> None:
    repository = SqlAlchemyLedgerRepository(_build_db_port([[]]))

    with pytest.raises(LedgerFetchError, match="6999"):
        repository.fetch_account("lagos-ng", "6999")


def test_fetch_ledger_entries_passes_range_and_maps_rows() -> None:
    rows = [
        SimpleNamespace(
            id=17,
            posting_date=datetime(2024, 1, 5, 9, 30),
            voucher_type="Sales Invoice",
            voucher_no="SINV-0001",
            remarks="Retainer",
            account_code="4000",
            debit=None,
            credit="2500.00",
            owner="ada@firm.ng",
        ),
        SimpleNamespace(
            id=None,
            posting_date="2024-01-09",
            voucher_type="Journal Entry",
            voucher_no="JV-0003",
            remarks=None,
            account_code="4000",
            debit="100",
            credit=0,
            owner=None,
        ),
    ]
    db_port = _build_db_port([rows])
    repository = SqlAlchemyLedgerRepository(db_port)

    entries = repository.fetch_ledger_entries(
        "lagos-ng",
        "4000",
        date(2024, 1, 1),
        date(2024, 1, 31),
    )

    assert entries[0].entry_id == "17"
    assert entries[0].posting_date == date(2024, 1, 5)
    assert entries[0].debit == Decimal("0")
    assert entries[0].credit == Decimal("2500.00")
    assert entries[0].created_by == "ada@firm.ng"
    assert entries[1].entry_id is None
    assert entries[1].posting_date == date(2024, 1, 9)

    engine = db_port.get_accounting_engine.return_value
    conn = engine.connect.return_value.__enter__.return_value
    params = conn.execute.call_args.args[1]
    assert params == {
        "company_id": "lagos-ng",
        "account_code": "4000",
        "date_from": date(2024, 1, 1),
        "date_to": date(2024, 1, 31),
    }


def test_fetch_child_accounts() -> None:
    rows = [
        _account_row("6100", "Rent", parent="6000"),
        _account_row("6200", "Travel", 1, parent="6000"),
    ]
    repository = SqlAlchemyLedgerRepository(_build_db_port([rows]))

    children = repository.fetch_child_accounts("lagos-ng", "6000")

    assert [(c.account_code, c.is_group) for c in children] == [
        ("6100", False),
        ("6200", True),
    ]


def test_sqlalchemy_errors_become_ledger_fetch_errors() -> None:
    db_port = MagicMock()
    engine = db_port.get_accounting_engine.return_value
    engine.connect.side_effect = OperationalError(
        "SELECT 1",
        {},
        Exception("connection refused"),
    )
    repository = SqlAlchemyLedgerRepository(db_port)

    with pytest.raises(LedgerFetchError):
        repository.fetch_child_accounts("lagos-ng", "6000")
