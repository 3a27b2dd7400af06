"""Tests for the HTTP reports gateway."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import httpx
import pytest

from consultflow.application.exceptions import DataUnavailableError
from consultflow.application.use_cases.load_report_data import (
    LoadReportDataUseCase,
)
from consultflow.infrastructure.reports_gateway import (
    HttpReportsGateway,
    endpoint_for,
)


def _gateway(handler, data_source="localDb") -> HttpReportsGateway:
    client = httpx.Client(
        base_url="http://reports.test",
        transport=httpx.MockTransport(handler),
    )
    return HttpReportsGateway(
        base_url="http://reports.test",
        data_source=data_source,
        client=client,
        logger=MagicMock(),
    )


@pytest.mark.parametrize(
    ("data_source", "path"),
    [
        ("demo", "/api/demo/reports"),
        ("localDb", "/api/local/reports"),
        ("frappe", "/api/reports"),
        ("unknown", "/api/local/reports"),
    ],
)
def test_endpoint_for(data_source, path) -> None:
    assert endpoint_for(data_source) == path


def test_fetch_series_sends_params_and_parses_points() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json={
                "series": [
                    {
                        "date": "2024-01-01",
                        "revenue": 100000,
                        "cogs": 40000,
                        "expenses": 60000,
                        "cash": 5000,
                    },
                    {"date": "2024-02-01", "revenue": 1000},
                ]
            },
        )

    gateway = _gateway(handler, data_source="demo")

    points = gateway.fetch_series(
        "lagos-ng",
        "custom",
        "2024-01-01",
        "2024-02-29",
        "NGN",
    )

    assert seen["path"] == "/api/demo/reports"
    assert seen["params"] == {
        "company": "lagos-ng",
        "range": "custom",
        "from": "2024-01-01",
        "to": "2024-02-29",
        "currency": "NGN",
    }
    assert points[0].date == date(2024, 1, 1)
    assert points[0].revenue == Decimal("100000")
    assert points[0].cash == Decimal("5000")
    assert points[1].cogs is None


def test_fetch_series_omits_empty_date_bounds() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"series": []})

    points = _gateway(handler).fetch_series("", "90", None, None, "USD")

    assert points == []
    assert seen["params"] == {
        "company": "",
        "range": "90",
        "currency": "USD",
    }


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(503, json={"error": "down"}),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, json={"series": {"date": "2024-01-01"}}),
        httpx.Response(200, json={"series": [{"revenue": 10}]}),
        httpx.Response(
            200,
            json={"series": [{"date": "2024-01-01", "revenue": "abc"}]},
        ),
    ],
)
def test_bad_responses_raise_data_unavailable(response) -> None:
    gateway = _gateway(lambda request: response)

    with pytest.raises(DataUnavailableError):
        gateway.fetch_series("lagos-ng", "90", None, None, "NGN")


def test_transport_errors_raise_data_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(DataUnavailableError, match="unreachable"):
        _gateway(handler).fetch_series("lagos-ng", "90", None, None, "NGN")


def test_non_numeric_amount_reaches_loader_as_readable_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"series": [{"date": "2024-01-01", "revenue": "abc"}]},
        )

    repository = MagicMock()
    repository.list_trial_balances.return_value = []
    use_case = LoadReportDataUseCase(
        accounting_repository=repository,
        reports_gateway=_gateway(handler),
        logger=MagicMock(),
    )

    result = use_case.execute("lagos-ng")

    assert result.points == []
    assert result.error == "Reports endpoint returned a malformed series"
