"""CLI adapter to print the profit and loss report."""

import os

from consultflow.adapters.csv_export import export_pl_rows_csv
from consultflow.domain.constants import ALL, EXPANDABLE_ROW_KEYS
from consultflow.domain.models import ReportFilters
from consultflow.domain.services.transactions import parse_amount_bound
from consultflow.infrastructure.container import build_pl_report_use_case
from consultflow.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from consultflow.infrastructure.settings import ConsultFlowSettings


def _read_filters(logger) -> ReportFilters:
    """Build report filters from REPORT_* environment variables."""
    expanded = {}
    for key in os.getenv("REPORT_EXPAND", "").split(","):
        key = key.strip()
        if not key:
            continue
        if key not in EXPANDABLE_ROW_KEYS:
            logger.warning(f"Ignoring unknown REPORT_EXPAND key '{key}'")
            continue
        expanded[key] = True
    return ReportFilters(
        query=os.getenv("REPORT_QUERY", ""),
        min_amount=parse_amount_bound(
            os.getenv("REPORT_MIN_AMOUNT"),
            logger=logger,
        ),
        max_amount=parse_amount_bound(
            os.getenv("REPORT_MAX_AMOUNT"),
            logger=logger,
        ),
        account=os.getenv("REPORT_ACCOUNT") or ALL,
        transaction_type=os.getenv("REPORT_TYPE") or ALL,
        expanded=expanded,
    )


def main() -> None:
    """Load report data, aggregate it and print the P&L rows."""
    logger = get_app_logger()
    settings = ConsultFlowSettings.from_env()
    company_id = os.getenv("REPORT_COMPANY", "")
    currency = (
        os.getenv("REPORT_CURRENCY", "").strip().upper()
        or settings.reporting_currency
    )
    filters = _read_filters(logger)

    use_case = build_pl_report_use_case(settings=settings)
    report = use_case.execute(
        company_id=company_id,
        filters=filters,
        range_preset=os.getenv("REPORT_RANGE", "90"),
        date_from=os.getenv("REPORT_FROM") or None,
        date_to=os.getenv("REPORT_TO") or None,
        reporting_currency=currency,
    )
    get_usage_logger().info(
        f"pl_report company={company_id or settings.default_company_id} "
        f"source={report.data.source} error={report.error}"
    )
    if report.error is not None:
        print(f"Error: {report.error}")
        return

    print(
        f"Profit & Loss ({company_id or settings.default_company_id}, "
        f"source={report.data.source}, currency={currency})"
    )
    for row in report.rows:
        marker = "+" if row.expandable else " "
        amount = report.data.format_currency(row.amount)
        print(f"{marker} {row.label:<32} {amount:>18}")

    export_path = os.getenv("REPORT_EXPORT_CSV")
    if export_path:
        with open(export_path, "w", newline="", encoding="utf-8") as handle:
            count = export_pl_rows_csv(report.rows, handle)
        logger.info(f"Exported {count} P&L rows to {export_path}")
        print(f"Exported {count} rows to {export_path}")


if __name__ == "__main__":  # pragma: no cover
    main()
