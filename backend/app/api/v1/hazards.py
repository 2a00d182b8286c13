from fastapi import APIRouter, Depends, Query

from app.api.deps import get_analysis_service, get_catalog
from app.api.serializers import (
    event_to_dict,
    hazard_to_dict,
    projected_zone_to_dict,
    region_to_dict,
)
from app.models.hazard import parse_hazard_type
from app.models.scenario import Timeframe
from app.services.analysis_service import RiskAnalysisService
from app.services.hazard_catalog import HazardCatalog

router = APIRouter()


@router.get("/types")
async def list_hazard_types(catalog: HazardCatalog = Depends(get_catalog)):
    return [hazard_to_dict(h) for h in catalog.hazard_types()]


@router.get("/regions")
async def list_regions(catalog: HazardCatalog = Depends(get_catalog)):
    return [region_to_dict(r) for r in catalog.regions()]


@router.get("/historical/{hazard_type}")
async def get_historical_events(hazard_type: str, catalog: HazardCatalog = Depends(get_catalog)):
    hazard = catalog.get_hazard(hazard_type)
    return {
        "hazard_type": hazard.hazard_type.value,
        "events": [event_to_dict(e) for e in catalog.historical_events(hazard.hazard_type)],
    }


@router.get("/{hazard_type}/{region_id}")
async def get_region_hazard(
    hazard_type: str,
    region_id: str,
    timeframe: str = Query("present", description="present, 2023, 2050 or 2100"),
    service: RiskAnalysisService = Depends(get_analysis_service),
):
    """Risk zones for a hazard in one region, projected to the timeframe."""
    horizon = Timeframe.parse(timeframe)
    region = service.require_region(region_id)
    zones = service.hazard_zones(hazard_type, region_id, horizon)
    return {
        "hazard_type": parse_hazard_type(hazard_type).value,
        "region": region_to_dict(region),
        "timeframe": horizon.value,
        "timeframe_label": horizon.label,
        "zone_count": len(zones),
        "affected_properties": sum(z.affected_properties for z in zones),
        "expected_loss": sum(z.expected_loss for z in zones),
        "zones": [projected_zone_to_dict(z) for z in zones],
    }
