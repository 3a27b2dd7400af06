"""Tests for the SQLAlchemy accounting repository."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from consultflow.application.exceptions import DataUnavailableError
from consultflow.infrastructure.accounting_repository import (
    SqlAlchemyAccountingRepository,
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


def _tb_row(tb_id, period_end, account_code=None, debit=None, credit=None):
    return SimpleNamespace(
        tb_id=tb_id,
        period_start="2024-01-01",
        period_end=period_end,
        status="final",
        currency="NGN",
        account_code=account_code,
        debit=debit,
        credit=credit,
        entry_name=None,
    )


def test_list_trial_balances_groups_entries_by_header() -> None:
    rows = [
        _tb_row("tb-1", date(2024, 1, 31), "4000", 0, "5000.00"),
        _tb_row("tb-1", date(2024, 1, 31), "6000", "1200.50", None),
        _tb_row("tb-2", datetime(2024, 2, 29, 12, 0)),
    ]
    db_port = _build_db_port([rows])
    repository = SqlAlchemyAccountingRepository(db_port)

    balances = repository.list_trial_balances("lagos-ng")

    assert [tb.id for tb in balances] == ["tb-1", "tb-2"]
    first, second = balances
    assert first.company_id == "lagos-ng"
    assert first.period_start == date(2024, 1, 1)
    assert first.period_end == date(2024, 1, 31)
    assert first.status == "final"
    assert [
        (e.account_code, e.debit, e.credit) for e in first.entries
    ] == [
        ("4000", Decimal("0"), Decimal("5000.00")),
        ("6000", Decimal("1200.50"), Decimal("0")),
    ]
    assert second.period_end == date(2024, 2, 29)
    assert second.entries == []

    engine = db_port.get_accounting_engine.return_value
    conn = engine.connect.return_value.__enter__.return_value
    params = conn.execute.call_args.args[1]
    assert params == {"company_id": "lagos-ng"}


def test_list_chart_of_accounts_maps_rows() -> None:
    rows = [
        SimpleNamespace(
            account_code="4000",
            account_name="Consulting Revenue",
            account_type="Revenue",
            parent_account_code=None,
            currency="NGN",
            is_active=1,
        ),
        SimpleNamespace(
            account_code="1300",
            account_name=None,
            account_type="Asset",
            parent_account_code="1000",
            currency=None,
            is_active=None,
        ),
    ]
    repository = SqlAlchemyAccountingRepository(_build_db_port([rows]))

    accounts = repository.list_chart_of_accounts("lagos-ng")

    assert accounts[0].account_name == "Consulting Revenue"
    assert accounts[0].is_active is True
    assert accounts[1].account_name == "1300"
    assert accounts[1].parent_account_code == "1000"
    assert accounts[1].is_active is True


def test_sqlalchemy_errors_become_data_unavailable() -> None:
    db_port = MagicMock()
    engine = db_port.get_accounting_engine.return_value
    engine.connect.side_effect = OperationalError(
        "SELECT 1",
        {},
        Exception("connection refused"),
    )
    repository = SqlAlchemyAccountingRepository(db_port)

    with pytest.raises(DataUnavailableError):
        repository.list_trial_balances("lagos-ng")
