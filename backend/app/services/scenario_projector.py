"""
Forward projection of risk zones to a climate horizon.

Zone radius and loss grow by fixed multipliers per horizon. The count of
affected properties follows the radius growth damped by 0.7:

    affected = round(base * (1 + (radius_multiplier - 1) * 0.7))
"""

import math

from app.models.hazard import RiskZone
from app.models.scenario import ProjectedZone, ScenarioParameters, Timeframe

# timeframe -> (radius multiplier, loss multiplier)
TIMEFRAME_MULTIPLIERS: dict[Timeframe, tuple[float, float]] = {
    Timeframe.PRESENT: (1.0, 1.0),
    Timeframe.MID_CENTURY: (1.5, 1.8),
    Timeframe.END_CENTURY: (2.2, 3.2),
}

AFFECTED_PROPERTY_DAMPING = 0.7


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_eligible(zone: RiskZone, params: ScenarioParameters) -> bool:
    """A zone takes part in a scenario when hazard (and region, if set) match."""
    if zone.hazard_type != params.hazard_type:
        return False
    return params.region is None or zone.region == params.region


def project_scenario(zone: RiskZone, params: ScenarioParameters) -> ProjectedZone:
    """Scale one zone to the scenario horizon. Intensity is not applied here."""
    radius_multiplier, loss_multiplier = TIMEFRAME_MULTIPLIERS[params.timeframe]
    growth = 1 + (radius_multiplier - 1) * AFFECTED_PROPERTY_DAMPING

    return ProjectedZone(
        zone=zone,
        timeframe=params.timeframe,
        radius_meters=zone.base_radius_meters * radius_multiplier,
        expected_loss=zone.base_expected_loss * loss_multiplier,
        affected_properties=round_half_up(zone.base_affected_properties * growth),
    )


def project_zones(zones: list[RiskZone], params: ScenarioParameters) -> list[ProjectedZone]:
    """Project every eligible zone; ineligible zones are left out of the result."""
    return [project_scenario(zone, params) for zone in zones if is_eligible(zone, params)]
