"""
Risk analysis service.

Wires the data providers to the scoring, projection, and aggregation
functions, and keeps a bounded in-memory history of scenario runs.
"""

import random
import uuid
from collections import OrderedDict
from datetime import datetime, timezone

import structlog

from app.clients.portfolio_client import PortfolioProvider
from app.clients.weather_client import WeatherProvider
from app.exceptions import DataUnavailableError
from app.models.hazard import HazardType, Region, parse_hazard_type
from app.models.portfolio import PortfolioRiskSummary
from app.models.scenario import (
    AnalysisRun,
    ProjectedZone,
    ScenarioParameters,
    StressTestResult,
    Timeframe,
)
from app.services.hazard_catalog import HazardCatalog
from app.services.portfolio_aggregator import (
    assess_region_portfolio,
    run_scenario_analysis,
    stress_test_property,
)
from app.services.scenario_projector import project_zones

logger = structlog.get_logger()


class AnalysisHistory:
    """Most recent scenario runs, oldest evicted first once ``limit`` is reached."""

    def __init__(self, limit: int = 50):
        self._limit = max(1, limit)
        self._runs: OrderedDict[str, AnalysisRun] = OrderedDict()

    def add(self, run: AnalysisRun) -> None:
        self._runs[run.id] = run
        while len(self._runs) > self._limit:
            self._runs.popitem(last=False)

    def get(self, analysis_id: str) -> AnalysisRun | None:
        return self._runs.get(analysis_id)

    def list(self) -> list[AnalysisRun]:
        """Runs newest first."""
        return list(reversed(self._runs.values()))

    def __len__(self) -> int:
        return len(self._runs)


class RiskAnalysisService:
    """Region assessments, hazard zone projections, and scenario runs."""

    def __init__(
        self,
        catalog: HazardCatalog,
        weather: WeatherProvider,
        portfolio: PortfolioProvider,
        history: AnalysisHistory,
        *,
        clamp: bool = False,
        seed: int | None = None,
    ):
        self.catalog = catalog
        self.weather = weather
        self.portfolio = portfolio
        self.history = history
        self._clamp = clamp
        self._seed = seed

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def require_region(self, region_id: str) -> Region:
        region = self.catalog.get_region(region_id)
        if region is None:
            raise DataUnavailableError(f"Unknown region: {region_id}")
        return region

    async def assess_region(self, region_id: str) -> PortfolioRiskSummary:
        """Score the region's loans against its current weather."""
        self.require_region(region_id)

        observation = await self.weather.get_observation(region_id)
        if observation is None:
            raise DataUnavailableError(f"No weather data available for region: {region_id}")

        loans = self.portfolio.get_loans(region=region_id)
        summary = assess_region_portfolio(loans, observation, clamp=self._clamp)

        logger.info(
            "Region weather risk assessed",
            region=region_id,
            condition=observation.condition.value,
            loans=len(loans),
            total_expected_loss=summary.total_expected_loss,
            high_risk_count=summary.high_risk_count,
        )
        if not summary.has_data:
            logger.warning("Region has no loan value to assess", region=region_id)
        return summary

    def hazard_zones(
        self,
        hazard_type: HazardType | str,
        region_id: str,
        timeframe: Timeframe | int | str = Timeframe.PRESENT,
    ) -> list[ProjectedZone]:
        """Risk zones for one region and hazard, projected to the horizon."""
        self.require_region(region_id)
        params = ScenarioParameters(
            hazard_type=parse_hazard_type(hazard_type),
            timeframe=Timeframe.parse(timeframe),
            region=region_id,
        )
        return project_zones(self.portfolio.get_zones(), params)

    def run_scenario(self, params: ScenarioParameters) -> AnalysisRun:
        """Run a scenario against the portfolio and record it in the history."""
        if params.region is not None:
            self.require_region(params.region)

        book = self.portfolio.get_book()
        if params.portfolio_id is not None and params.portfolio_id != book.portfolio_id:
            raise DataUnavailableError(f"Unknown portfolio: {params.portfolio_id}")
        rng = random.Random(self._seed) if self._seed is not None else None

        result = run_scenario_analysis(
            params,
            self.portfolio.get_zones(),
            portfolio_value=book.total_value,
            average_ltv=book.average_ltv,
            rng=rng,
        )

        run = AnalysisRun(
            id=f"analysis-{uuid.uuid4().hex[:12]}",
            timestamp=datetime.now(timezone.utc),
            parameters=params,
            result=result,
            seed=self._seed,
        )
        self.history.add(run)

        logger.info(
            "scenario.run_complete",
            analysis_id=run.id,
            hazard_type=params.hazard_type.value,
            timeframe=params.timeframe.value,
            return_period=params.return_period_years,
            intensity=params.intensity,
            zones=len(result.zones),
            total_expected_loss=result.total_expected_loss,
        )
        return run

    def get_run(self, analysis_id: str) -> AnalysisRun:
        run = self.history.get(analysis_id)
        if run is None:
            raise DataUnavailableError(f"Analysis not found: {analysis_id}")
        return run

    def stress_test(
        self,
        hazard_type: HazardType | str,
        intensity: float,
        property_value: float,
    ) -> StressTestResult:
        return stress_test_property(parse_hazard_type(hazard_type), intensity, property_value)
