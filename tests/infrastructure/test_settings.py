"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from consultflow.infrastructure import settings as settings_module
from consultflow.infrastructure.settings import ConsultFlowSettings


ENV_VARS = (
    "CONSULTFLOW_DATA_SOURCE",
    "REPORTS_API_BASE_URL",
    "REPORTS_API_TIMEOUT",
    "DRILLDOWN_CACHE_TTL",
    "CONSULTFLOW_DEFAULT_COMPANY",
    "REPORTING_CURRENCY",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults() -> None:
    settings = ConsultFlowSettings.from_env()

    assert settings == ConsultFlowSettings()
    assert settings.data_source == "localDb"
    assert settings.reports_base_url == "http://localhost:3000"
    assert settings.drilldown_cache_ttl == 300.0
    assert settings.default_company_id == "lagos-ng"
    assert settings.reporting_currency == "NGN"


def test_from_env_reads_values(monkeypatch) -> None:
    monkeypatch.setenv("CONSULTFLOW_DATA_SOURCE", "FRAPPE")
    monkeypatch.setenv("REPORTS_API_BASE_URL", "https://reports.example/")
    monkeypatch.setenv("REPORTS_API_TIMEOUT", "2.5")
    monkeypatch.setenv("DRILLDOWN_CACHE_TTL", "60")
    monkeypatch.setenv("CONSULTFLOW_DEFAULT_COMPANY", "accra-gh")
    monkeypatch.setenv("REPORTING_CURRENCY", "usd")

    settings = ConsultFlowSettings.from_env()

    assert settings.data_source == "frappe"
    assert settings.reports_base_url == "https://reports.example"
    assert settings.reports_timeout == 2.5
    assert settings.drilldown_cache_ttl == 60.0
    assert settings.default_company_id == "accra-gh"
    assert settings.reporting_currency == "USD"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("REPORTS_API_TIMEOUT", "soon"),
        ("REPORTS_API_TIMEOUT", "0"),
        ("DRILLDOWN_CACHE_TTL", "-5"),
    ],
)
def test_invalid_seconds_fall_back_to_defaults(
    monkeypatch,
    name,
    value,
) -> None:
    monkeypatch.setenv(name, value)

    settings = ConsultFlowSettings.from_env()

    assert settings.reports_timeout == 10.0
    assert settings.drilldown_cache_ttl == 300.0


def test_unknown_data_source_warns_and_uses_local_db() -> None:
    logger = MagicMock()

    result = ConsultFlowSettings._normalize_data_source(
        "mainframe",
        logger=logger,
    )

    assert result == "localDb"
    logger.warning.assert_called_once()
