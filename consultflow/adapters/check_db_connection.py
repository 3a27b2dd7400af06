"""Simple CLI to validate the accounting database connection."""

from consultflow.infrastructure.container import build_database_adapter
from consultflow.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the accounting database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_accounting_engine()
    logger.info(f"Accounting DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Accounting connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
