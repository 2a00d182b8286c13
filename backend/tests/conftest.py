"""Test configuration and fixtures."""

import pytest


@pytest.fixture
def catalog():
    from app.services.hazard_catalog import HazardCatalog
    return HazardCatalog.default()


@pytest.fixture
def portfolio_provider():
    from app.clients.portfolio_client import StaticPortfolioProvider
    return StaticPortfolioProvider()


@pytest.fixture
def make_observation():
    from app.models.weather import WeatherAlert, WeatherObservation

    def _make(
        condition="Clear",
        wind=5.0,
        precipitation=None,
        alerts=(),
        temperature=22.0,
        humidity=60.0,
        region="Miami",
    ):
        return WeatherObservation(
            region=region,
            condition=condition,
            temperature_c=temperature,
            humidity_pct=humidity,
            wind_speed_mps=wind,
            precipitation_mm_per_hour=precipitation,
            alerts=tuple(WeatherAlert(event=e) for e in alerts),
        )

    return _make


@pytest.fixture
def make_loan():
    from app.models.portfolio import Loan

    def _make(loan_id="T001", value=300_000, region="Miami", risk="medium", ltv=0.7):
        return Loan(
            id=loan_id,
            address=f"{loan_id} Test St",
            value=value,
            balance=value * ltv,
            ltv=ltv,
            region=region,
            base_risk_level=risk,
        )

    return _make


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.config import Settings
    from app.main import create_app

    app = create_app(Settings(app_env="test", scenario_seed=None, risk_factor_clamp=False))
    with TestClient(app) as test_client:
        yield test_client
