"""Port for the remote reporting endpoint."""

from typing import Protocol

from consultflow.domain.models import MonthlyFinancialPoint


class ReportsGatewayPort(Protocol):
    """Port exposing server-side computed monthly series."""

    def fetch_series(
        self,
        company_id: str,
        range_preset: str,
        date_from: str | None,
        date_to: str | None,
        currency: str,
    ) -> list[MonthlyFinancialPoint]:
        """Return the monthly series for a company and period.

        Raises:
            DataUnavailableError: If the endpoint cannot serve the series.
        """


__all__ = ["ReportsGatewayPort"]
