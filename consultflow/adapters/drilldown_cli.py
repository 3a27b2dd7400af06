"""CLI adapter to print the ledger drill-down of an account."""

from datetime import date
import os

from consultflow.domain.models import DrillDownData
from consultflow.domain.services.currency import format_currency
from consultflow.domain.services.periods import resolve_period
from consultflow.infrastructure.container import build_drilldown_use_case
from consultflow.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from consultflow.infrastructure.settings import ConsultFlowSettings


def _print_tree(data: DrillDownData, currency: str, depth: int = 0) -> None:
    indent = "  " * depth
    print(
        f"{indent}{data.account_name} ({data.account_code}) "
        f"balance={format_currency(data.balance, currency)}"
    )
    for txn in data.transactions:
        print(
            f"{indent}  {txn.date.isoformat()} {txn.reference:<16} "
            f"Dr {format_currency(txn.debit, currency)} "
            f"Cr {format_currency(txn.credit, currency)} "
            f"Bal {format_currency(txn.balance, currency)} "
            f"{txn.description}"
        )
    for child in data.children or []:
        _print_tree(child, currency, depth + 1)


def main() -> None:
    """Resolve an account drill-down and print it as a tree."""
    logger = get_app_logger()
    settings = ConsultFlowSettings.from_env()
    account_code = os.getenv("DRILLDOWN_ACCOUNT", "").strip()
    if not account_code:
        logger.warning("DRILLDOWN_ACCOUNT is required for a drill-down.")
        return
    company_id = (
        os.getenv("DRILLDOWN_COMPANY", "").strip()
        or settings.default_company_id
    )
    try:
        date_from, date_to = resolve_period(
            "90",
            os.getenv("DRILLDOWN_FROM") or None,
            os.getenv("DRILLDOWN_TO") or None,
            today=date.today(),
        )
    except ValueError:
        logger.warning(
            "Invalid drill-down dates. Expected format YYYY-MM-DD."
        )
        return

    use_case = build_drilldown_use_case(settings=settings)
    data = use_case.execute(company_id, account_code, date_from, date_to)
    get_usage_logger().info(
        f"drilldown company={company_id} account={account_code} "
        f"fallback={data.is_fallback}"
    )

    print(f"Drill-down {company_id} {date_from} .. {date_to}")
    if data.is_fallback:
        print("Ledger unavailable; showing sample data.")
    _print_tree(data, settings.reporting_currency)


if __name__ == "__main__":  # pragma: no cover
    main()
