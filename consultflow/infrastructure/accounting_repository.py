"""SQLAlchemy-backed repository for trial balances and charts of accounts."""

from datetime import date, datetime

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from consultflow.application.exceptions import DataUnavailableError
from consultflow.application.ports.accounting_repository import (
    AccountingRepositoryPort,
)
from consultflow.application.ports.database import DatabaseEnginePort
from consultflow.domain.models import (
    ChartOfAccountEntry,
    TrialBalance,
    TrialBalanceEntry,
)
from consultflow.utils.decimal_utils import coerce_decimal


SELECT_TRIAL_BALANCES_SQL = text(
    """
    SELECT tb.id AS tb_id,
           tb.period_start AS period_start,
           tb.period_end AS period_end,
           tb.status AS status,
           tb.currency AS currency,
           e.account_code AS account_code,
           e.debit AS debit,
           e.credit AS credit,
           e.name AS entry_name
    FROM trial_balances tb
    LEFT JOIN trial_balance_entries e ON e.trial_balance_id = tb.id
    WHERE tb.company_id = :company_id
    ORDER BY tb.period_end, tb.id
    """
)

SELECT_CHART_OF_ACCOUNTS_SQL = text(
    """
    SELECT account_code,
           account_name,
           account_type,
           parent_account_code,
           currency,
           is_active
    FROM chart_of_accounts
    WHERE company_id = :company_id
    ORDER BY account_code
    """
)


def _coerce_date(raw_value) -> date:
    if isinstance(raw_value, datetime):
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    return date.fromisoformat(str(raw_value)[:10])


class SqlAlchemyAccountingRepository(AccountingRepositoryPort):
    """Repository backed by SQLAlchemy for accounting records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the accounting engine.
        """
        self._db_port = db_port

    def list_trial_balances(self, company_id: str) -> list[TrialBalance]:
        rows = self._fetch(SELECT_TRIAL_BALANCES_SQL, company_id)
        headers: dict[str, dict] = {}
        entries: dict[str, list[TrialBalanceEntry]] = {}
        for row in rows:
            if row.tb_id not in headers:
                headers[row.tb_id] = {
                    "period_start": _coerce_date(row.period_start),
                    "period_end": _coerce_date(row.period_end),
                    "status": row.status or "draft",
                    "currency": row.currency,
                }
                entries[row.tb_id] = []
            if row.account_code is None:
                continue
            entries[row.tb_id].append(
                TrialBalanceEntry(
                    account_code=row.account_code,
                    debit=coerce_decimal(row.debit),
                    credit=coerce_decimal(row.credit),
                    name=row.entry_name,
                )
            )
        return [
            TrialBalance(
                id=tb_id,
                company_id=company_id,
                entries=entries[tb_id],
                **header,
            )
            for tb_id, header in headers.items()
        ]

    def list_chart_of_accounts(
        self,
        company_id: str,
    ) -> list[ChartOfAccountEntry]:
        rows = self._fetch(SELECT_CHART_OF_ACCOUNTS_SQL, company_id)
        return [
            ChartOfAccountEntry(
                account_code=row.account_code,
                account_name=row.account_name or row.account_code,
                account_type=row.account_type,
                parent_account_code=row.parent_account_code,
                currency=row.currency,
                is_active=(
                    True if row.is_active is None else bool(row.is_active)
                ),
            )
            for row in rows
        ]

    def _fetch(self, query, company_id: str):
        engine = self._db_port.get_accounting_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, {"company_id": company_id}).all()
        except SQLAlchemyError as exc:
            raise DataUnavailableError(
                f"Accounting database query failed: {exc}"
            ) from exc


__all__ = ["SqlAlchemyAccountingRepository"]
