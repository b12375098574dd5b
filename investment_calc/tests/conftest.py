from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investment_calc.app import create_app
from investment_calc.config import Settings
from investment_calc.core.currency import CurrencyConverter, CurrencyTable


@pytest.fixture()
def app_settings() -> Settings:
    return Settings(_env_file=None, max_horizon_years=30, log_level="WARNING")


@pytest.fixture()
def client(app_settings: Settings) -> FlaskClient:
    flask_app = create_app(app_settings)
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def mock_table() -> CurrencyTable:
    return CurrencyTable(
        pivot="XPV",
        rates={"XPV": 1.0, "XAA": 2.0, "XBB": 0.25},
        symbols={"XPV": "P", "XAA": "A", "XBB": "B"},
    )


@pytest.fixture()
def mock_converter(mock_table: CurrencyTable) -> CurrencyConverter:
    return CurrencyConverter(mock_table)
