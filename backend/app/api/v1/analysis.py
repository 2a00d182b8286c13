from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from app.api.deps import get_analysis_service
from app.api.serializers import run_to_dict, run_to_history_dict, stress_to_dict
from app.models.scenario import ScenarioParameters
from app.services.analysis_service import RiskAnalysisService

router = APIRouter()


class ScenarioRequest(BaseModel):
    hazard_type: str
    return_period: int = 100
    intensity: float = 3.0
    timeframe: int | str = "present"
    region: str | None = None
    portfolio_id: str | None = None


class StressRequest(BaseModel):
    hazard_type: str
    intensity: float
    property_value: float
    lat: float | None = None
    lon: float | None = None


@router.post("/run")
async def run_analysis(
    req: ScenarioRequest,
    request: Request,
    service: RiskAnalysisService = Depends(get_analysis_service),
):
    """Run a climate scenario against the portfolio and store it in the history."""
    app_settings = request.app.state.settings
    params = ScenarioParameters(
        hazard_type=req.hazard_type,
        return_period_years=req.return_period,
        intensity=req.intensity,
        timeframe=req.timeframe,
        region=req.region,
        portfolio_id=req.portfolio_id or app_settings.default_portfolio_id,
    )
    run = service.run_scenario(params)
    return run_to_dict(run)


@router.get("/history")
async def get_analysis_history(service: RiskAnalysisService = Depends(get_analysis_service)):
    return [run_to_history_dict(run) for run in service.history.list()]


@router.post("/stress")
async def stress_test(
    req: StressRequest,
    service: RiskAnalysisService = Depends(get_analysis_service),
):
    """Damage ratio and expected loss for a single property."""
    result = service.stress_test(req.hazard_type, req.intensity, req.property_value)
    return {**stress_to_dict(result), "lat": req.lat, "lon": req.lon}


@router.get("/{analysis_id}")
async def get_analysis(
    analysis_id: str,
    service: RiskAnalysisService = Depends(get_analysis_service),
):
    return run_to_dict(service.get_run(analysis_id))
