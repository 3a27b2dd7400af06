"""SQLAlchemy-backed repository for general ledger drill-down queries."""

from datetime import date, datetime

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from consultflow.application.exceptions import LedgerFetchError
from consultflow.application.ports.database import DatabaseEnginePort
from consultflow.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from consultflow.domain.models import LedgerAccount, LedgerEntry
from consultflow.utils.decimal_utils import coerce_decimal


SELECT_ACCOUNT_SQL = text(
    """
    SELECT account_code, account_name, is_group, parent_account_code
    FROM ledger_accounts
    WHERE company_id = :company_id AND account_code = :account_code
    LIMIT 1
    """
)

SELECT_CHILD_ACCOUNTS_SQL = text(
    """
    SELECT account_code, account_name, is_group, parent_account_code
    FROM ledger_accounts
    WHERE company_id = :company_id
      AND parent_account_code = :parent_account_code
    ORDER BY account_code
    """
)

SELECT_GL_ENTRIES_SQL = text(
    """
    SELECT id, posting_date, voucher_type, voucher_no, remarks,
           account_code, debit, credit, owner
    FROM gl_entries
    WHERE company_id = :company_id
      AND account_code = :account_code
      AND posting_date >= :date_from
      AND posting_date <= :date_to
    ORDER BY posting_date, id
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger reads."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the accounting engine.
        """
        self._db_port = db_port

    def fetch_account(
        self,
        company_id: str,
        account_code: str,
    ) -> LedgerAccount:
        rows = self._fetch(
            SELECT_ACCOUNT_SQL,
            {"company_id": company_id, "account_code": account_code},
        )
        if not rows:
            raise LedgerFetchError(f"Missing ledger account: {account_code}")
        return self._to_account(rows[0])

    def fetch_ledger_entries(
        self,
        company_id: str,
        account_code: str,
        date_from: date,
        date_to: date,
    ) -> list[LedgerEntry]:
        rows = self._fetch(
            SELECT_GL_ENTRIES_SQL,
            {
                "company_id": company_id,
                "account_code": account_code,
                "date_from": date_from,
                "date_to": date_to,
            },
        )
        return [
            LedgerEntry(
                entry_id=str(row.id) if row.id is not None else None,
                posting_date=self._coerce_date(row.posting_date),
                voucher_type=row.voucher_type,
                voucher_no=row.voucher_no,
                remarks=row.remarks,
                account_code=row.account_code,
                debit=coerce_decimal(row.debit),
                credit=coerce_decimal(row.credit),
                created_by=row.owner,
            )
            for row in rows
        ]

    def fetch_child_accounts(
        self,
        company_id: str,
        parent_account_code: str,
    ) -> list[LedgerAccount]:
        rows = self._fetch(
            SELECT_CHILD_ACCOUNTS_SQL,
            {
                "company_id": company_id,
                "parent_account_code": parent_account_code,
            },
        )
        return [self._to_account(row) for row in rows]

    def _fetch(self, query, params: dict):
        engine = self._db_port.get_accounting_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise LedgerFetchError(f"Ledger query failed: {exc}") from exc

    @staticmethod
    def _to_account(row) -> LedgerAccount:
        return LedgerAccount(
            account_code=row.account_code,
            account_name=row.account_name,
            is_group=bool(row.is_group),
            parent_account_code=row.parent_account_code,
        )

    @staticmethod
    def _coerce_date(raw_value) -> date:
        if isinstance(raw_value, datetime):
            return raw_value.date()
        if isinstance(raw_value, date):
            return raw_value
        return date.fromisoformat(str(raw_value)[:10])


__all__ = ["SqlAlchemyLedgerRepository"]
