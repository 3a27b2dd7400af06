"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from consultflow.domain.constants import (
    DEFAULT_COMPANY_ID,
    DEFAULT_REPORTING_CURRENCY,
)
from consultflow.infrastructure.logging.logger import get_app_logger


DATA_SOURCES = ("demo", "localDb", "frappe")


@dataclass(frozen=True)
class ConsultFlowSettings:
    """Settings for the reporting core.

    Attributes:
        data_source: Backing mode of the reporting endpoint (demo, localDb
            or frappe).
        reports_base_url: Base URL of the reporting API.
        reports_timeout: Request timeout in seconds.
        drilldown_cache_ttl: Lifetime of cached drill-downs in seconds.
        default_company_id: Company used when a request names none.
        reporting_currency: Currency used to display amounts.
    """

    data_source: str = "localDb"
    reports_base_url: str = "http://localhost:3000"
    reports_timeout: float = 10.0
    drilldown_cache_ttl: float = 300.0
    default_company_id: str = DEFAULT_COMPANY_ID
    reporting_currency: str = DEFAULT_REPORTING_CURRENCY

    @classmethod
    def from_env(cls) -> "ConsultFlowSettings":
        """Build settings from environment variables.

        Returns:
            ConsultFlowSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        data_source = cls._normalize_data_source(
            os.getenv("CONSULTFLOW_DATA_SOURCE", "localDb"),
            logger=logger,
        )
        base_url = os.getenv("REPORTS_API_BASE_URL", "").strip()
        return cls(
            data_source=data_source,
            reports_base_url=(base_url or cls.reports_base_url).rstrip("/"),
            reports_timeout=cls._parse_seconds(
                "REPORTS_API_TIMEOUT",
                cls.reports_timeout,
                logger=logger,
            ),
            drilldown_cache_ttl=cls._parse_seconds(
                "DRILLDOWN_CACHE_TTL",
                cls.drilldown_cache_ttl,
                logger=logger,
            ),
            default_company_id=(
                os.getenv("CONSULTFLOW_DEFAULT_COMPANY", "").strip()
                or DEFAULT_COMPANY_ID
            ),
            reporting_currency=(
                os.getenv("REPORTING_CURRENCY", "").strip().upper()
                or DEFAULT_REPORTING_CURRENCY
            ),
        )

    @staticmethod
    def _normalize_data_source(raw_value: str, logger) -> str:
        """Match the data source case-insensitively against known modes.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            str: Canonical data source name, localDb when unknown.
        """
        cleaned = raw_value.strip().lower()
        for candidate in DATA_SOURCES:
            if candidate.lower() == cleaned:
                return candidate
        logger.warning(
            f"Unknown CONSULTFLOW_DATA_SOURCE '{raw_value}'; using localDb"
        )
        return "localDb"

    @staticmethod
    def _parse_seconds(name: str, default: float, logger) -> float:
        raw_value = os.getenv(name)
        if not raw_value:
            return default
        try:
            value = float(raw_value)
        except ValueError:
            logger.warning(f"Invalid {name} '{raw_value}'; using {default}")
            return default
        if value <= 0:
            logger.warning(f"Invalid {name} '{raw_value}'; using {default}")
            return default
        return value


__all__ = ["ConsultFlowSettings", "DATA_SOURCES"]
