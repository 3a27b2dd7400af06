"""Use case to resolve an account into its ledger detail."""

from datetime import date
import time
from typing import Callable

from consultflow.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from consultflow.domain.models import DrillDownData
from consultflow.domain.services.drilldown import (
    build_fallback_drilldown,
    build_transaction_details,
    compute_balance,
)
from consultflow.infrastructure.logging.logger import get_app_logger


DEFAULT_CACHE_TTL_SECONDS = 5 * 60

CacheKey = tuple[str, str, date, date]


class GetDrillDownUseCase:
    """Resolve account drill-downs with a time-bounded cache.

    Ledger failures never propagate: the caller receives synthetic data
    flagged with ``is_fallback`` instead. Fallback results are not cached.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing accounts and ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
            cache_ttl_seconds: Lifetime of cached results.
            clock: Monotonic clock returning seconds.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._cache_ttl_seconds = cache_ttl_seconds
        self._clock = clock
        self._cache: dict[CacheKey, tuple[float, DrillDownData]] = {}

    def execute(
        self,
        company_id: str,
        account_code: str,
        date_from: date,
        date_to: date,
    ) -> DrillDownData:
        """Return ledger detail for an account and its children.

        Args:
            company_id: Company identifier.
            account_code: Account to inspect.
            date_from: Inclusive lower bound for posting dates.
            date_to: Inclusive upper bound for posting dates.

        Returns:
            DrillDownData: Ledger detail, or fallback data on failure.
        """
        return self._execute(
            company_id,
            account_code,
            date_from,
            date_to,
            frozenset(),
        )

    def clear_cache(self) -> None:
        self._cache.clear()

    def _execute(
        self,
        company_id: str,
        account_code: str,
        date_from: date,
        date_to: date,
        path: frozenset[str],
    ) -> DrillDownData:
        key = (company_id, account_code, date_from, date_to)
        cached = self._get_cached(key)
        if cached is not None:
            return cached
        try:
            result = self._resolve(
                company_id,
                account_code,
                date_from,
                date_to,
                path | {account_code},
            )
        except Exception as exc:
            self._logger.error(
                f"Failed to get drill-down data for {account_code}: {exc}"
            )
            return build_fallback_drilldown(
                company_id,
                account_code,
                date_from,
                date_to,
            )
        if _contains_fallback(result):
            self._logger.warning(
                f"Not caching drill-down for {account_code}: "
                "a child account returned sample data"
            )
            return result
        self._cache[key] = (self._clock(), result)
        return result

    def _resolve(
        self,
        company_id: str,
        account_code: str,
        date_from: date,
        date_to: date,
        path: frozenset[str],
    ) -> DrillDownData:
        account = self._ledger_repository.fetch_account(
            company_id,
            account_code,
        )
        entries = self._ledger_repository.fetch_ledger_entries(
            company_id,
            account_code,
            date_from,
            date_to,
        )
        transactions = build_transaction_details(entries)

        children: list[DrillDownData] = []
        if account.is_group:
            child_accounts = self._ledger_repository.fetch_child_accounts(
                company_id,
                account_code,
            )
            for child in child_accounts:
                if child.account_code in path:
                    self._logger.warning(
                        f"Skipping cyclic child account {child.account_code} "
                        f"under {account_code}"
                    )
                    continue
                children.append(
                    self._execute(
                        company_id,
                        child.account_code,
                        date_from,
                        date_to,
                        path,
                    )
                )

        self._logger.info(
            f"Resolved drill-down for {account_code}: "
            f"{len(transactions)} entries, {len(children)} children"
        )
        return DrillDownData(
            account_code=account_code,
            account_name=account.account_name or account_code,
            balance=compute_balance(transactions),
            transactions=transactions,
            children=children or None,
        )

    def _get_cached(self, key: CacheKey) -> DrillDownData | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        stored_at, data = entry
        if self._clock() - stored_at < self._cache_ttl_seconds:
            return data
        del self._cache[key]
        return None


def _contains_fallback(data: DrillDownData) -> bool:
    return data.is_fallback or any(
        _contains_fallback(child) for child in data.children or []
    )


__all__ = ["GetDrillDownUseCase", "DEFAULT_CACHE_TTL_SECONDS"]
