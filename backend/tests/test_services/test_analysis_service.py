"""Tests for the risk analysis service and its run history."""

import asyncio

import pytest

from app.clients.weather_client import MockWeatherProvider
from app.exceptions import DataUnavailableError, InvalidInputError
from app.models.scenario import ScenarioParameters, Timeframe
from app.services.analysis_service import AnalysisHistory, RiskAnalysisService


@pytest.fixture
def service(catalog, portfolio_provider):
    return RiskAnalysisService(
        catalog=catalog,
        weather=MockWeatherProvider(),
        portfolio=portfolio_provider,
        history=AnalysisHistory(limit=3),
    )


class TestAssessRegion:
    def test_miami(self, service):
        summary = asyncio.run(service.assess_region("Miami"))
        assert summary.region == "Miami"
        assert summary.total_value == 1_045_000
        assert summary.total_expected_loss == pytest.approx(0.45 * 1_045_000)
        assert summary.high_risk_count == 3

    def test_new_york_clear_weather(self, service):
        summary = asyncio.run(service.assess_region("NewYork"))
        assert summary.total_expected_loss == 0
        assert summary.percentage_at_risk == 0

    def test_unknown_region(self, service):
        with pytest.raises(DataUnavailableError):
            asyncio.run(service.assess_region("Atlantis"))

    def test_region_without_weather(self, catalog, portfolio_provider):
        service = RiskAnalysisService(
            catalog=catalog,
            weather=MockWeatherProvider(snapshots={}),
            portfolio=portfolio_provider,
            history=AnalysisHistory(),
        )
        with pytest.raises(DataUnavailableError):
            asyncio.run(service.assess_region("Miami"))


class TestHazardZones:
    def test_miami_flood_mid_century(self, service):
        zones = service.hazard_zones("flood", "Miami", 2050)
        assert [z.zone.id for z in zones] == [1, 2]
        assert zones[0].expected_loss == pytest.approx(4_500_000)
        assert all(z.timeframe is Timeframe.MID_CENTURY for z in zones)

    def test_region_without_matching_zones(self, service):
        assert service.hazard_zones("heat", "NewYork") == []

    def test_unknown_region(self, service):
        with pytest.raises(DataUnavailableError):
            service.hazard_zones("flood", "Atlantis")

    def test_unknown_timeframe(self, service):
        with pytest.raises(InvalidInputError):
            service.hazard_zones("flood", "Miami", 2075)


class TestRunScenario:
    def test_run_is_recorded(self, service):
        run = service.run_scenario(ScenarioParameters(hazard_type="flood"))
        assert run.id.startswith("analysis-")
        assert service.get_run(run.id) is run
        assert run.seed is None

    def test_percentage_uses_book_value(self, service):
        run = service.run_scenario(ScenarioParameters(hazard_type="flood", intensity=0))
        assert run.result.percentage_of_portfolio == pytest.approx(16_600_000 / 375_000_000)

    def test_unknown_region(self, service):
        with pytest.raises(DataUnavailableError):
            service.run_scenario(ScenarioParameters(hazard_type="flood", region="Atlantis"))

    def test_known_portfolio(self, service):
        run = service.run_scenario(ScenarioParameters(hazard_type="flood", portfolio_id="portfolio-main"))
        assert run.parameters.portfolio_id == "portfolio-main"

    def test_unknown_portfolio(self, service):
        with pytest.raises(DataUnavailableError):
            service.run_scenario(ScenarioParameters(hazard_type="flood", portfolio_id="other-book"))
        assert len(service.history) == 0

    def test_unknown_run(self, service):
        with pytest.raises(DataUnavailableError):
            service.get_run("analysis-missing")

    def test_seeded_runs_replay(self, catalog, portfolio_provider):
        def make():
            return RiskAnalysisService(
                catalog=catalog,
                weather=MockWeatherProvider(),
                portfolio=portfolio_provider,
                history=AnalysisHistory(),
                seed=7,
            )

        params = ScenarioParameters(hazard_type="wind", timeframe=2100)
        first = make().run_scenario(params)
        second = make().run_scenario(params)
        assert first.seed == 7
        assert first.result.total_expected_loss == second.result.total_expected_loss


class TestAnalysisHistory:
    def test_newest_first_and_bounded(self, service):
        runs = [service.run_scenario(ScenarioParameters(hazard_type="flood")) for _ in range(4)]
        listed = service.history.list()
        assert len(service.history) == 3
        assert [r.id for r in listed] == [r.id for r in reversed(runs[1:])]
        assert service.history.get(runs[0].id) is None

    def test_limit_floor(self):
        assert AnalysisHistory(limit=0)._limit == 1


class TestStressTest:
    def test_parses_hazard(self, service):
        result = service.stress_test("Wind", 2.5, 500_000)
        assert result.damage_ratio == pytest.approx(0.2)
        assert result.expected_loss_value == pytest.approx(100_000)

    def test_unknown_hazard(self, service):
        with pytest.raises(InvalidInputError):
            service.stress_test("volcano", 2.5, 500_000)
