"""HTTP adapter for the remote reporting endpoint."""

from decimal import InvalidOperation

import httpx

from consultflow.application.exceptions import DataUnavailableError
from consultflow.application.ports.reports_gateway import ReportsGatewayPort
from consultflow.domain.models import MonthlyFinancialPoint
from consultflow.infrastructure.logging.logger import get_app_logger


REPORT_ENDPOINTS = {
    "demo": "/api/demo/reports",
    "localDb": "/api/local/reports",
    "frappe": "/api/reports",
}


def endpoint_for(data_source: str) -> str:
    """Return the reports path served for a data source.

    Unknown data sources use the local database endpoint.
    """
    return REPORT_ENDPOINTS.get(data_source, REPORT_ENDPOINTS["localDb"])


class HttpReportsGateway(ReportsGatewayPort):
    """Fetch monthly series from the reporting API over HTTP."""

    def __init__(
        self,
        base_url: str,
        data_source: str = "localDb",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
        logger=None,
    ) -> None:
        """Initialize the gateway.

        Args:
            base_url: Base URL of the reporting API.
            data_source: Backing mode selecting the endpoint.
            timeout: Request timeout in seconds.
            client: Optional preconfigured httpx client.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
        )
        self._path = endpoint_for(data_source)
        self._logger = logger or get_app_logger()

    def fetch_series(
        self,
        company_id: str,
        range_preset: str,
        date_from: str | None,
        date_to: str | None,
        currency: str,
    ) -> list[MonthlyFinancialPoint]:
        params = {
            "company": company_id,
            "range": range_preset,
            "currency": currency,
        }
        if date_from:
            params["from"] = date_from
        if date_to:
            params["to"] = date_to
        self._logger.debug(f"GET {self._path} params={params}")
        try:
            response = self._client.get(self._path, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise DataUnavailableError(
                f"Reports endpoint returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DataUnavailableError(
                f"Reports endpoint unreachable: {exc}"
            ) from exc
        except ValueError as exc:
            raise DataUnavailableError(
                "Reports endpoint returned invalid JSON"
            ) from exc
        return self._parse_series(payload)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _parse_series(payload) -> list[MonthlyFinancialPoint]:
        if not isinstance(payload, dict):
            raise DataUnavailableError("Reports payload is not an object")
        series = payload.get("series")
        if series is None:
            return []
        if not isinstance(series, list):
            raise DataUnavailableError("Reports series is not a list")
        try:
            return [MonthlyFinancialPoint.from_payload(row) for row in series]
        except (
            AttributeError,
            InvalidOperation,
            KeyError,
            TypeError,
            ValueError,
        ) as exc:
            raise DataUnavailableError(
                "Reports endpoint returned a malformed series"
            ) from exc


__all__ = ["HttpReportsGateway", "REPORT_ENDPOINTS", "endpoint_for"]
