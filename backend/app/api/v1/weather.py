from fastapi import APIRouter, Depends

from app.api.deps import get_analysis_service
from app.api.serializers import observation_to_dict, risk_summary_to_dict
from app.exceptions import DataUnavailableError
from app.services.analysis_service import RiskAnalysisService

router = APIRouter()


@router.get("/{region_id}")
async def get_current_weather(
    region_id: str,
    service: RiskAnalysisService = Depends(get_analysis_service),
):
    service.require_region(region_id)
    observation = await service.weather.get_observation(region_id)
    if observation is None:
        raise DataUnavailableError(f"No weather data available for region: {region_id}")
    return observation_to_dict(observation)


@router.get("/{region_id}/assessment")
async def get_weather_risk_assessment(
    region_id: str,
    service: RiskAnalysisService = Depends(get_analysis_service),
):
    """Score the region's loans against its current weather."""
    summary = await service.assess_region(region_id)
    return risk_summary_to_dict(summary)
