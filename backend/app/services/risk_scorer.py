"""
Weather-driven property risk scoring.

Additive point score (not a probability), built from the current weather
observation for the property's region:

    Rain            +0.05   plus a precipitation tier:
                              > 20 mm/h  +0.15
                              > 10 mm/h  +0.08
                              > 0 mm/h   +0.03
    Thunderstorm    +0.12   no precipitation tier
    Wind            > 18 m/s +0.10, > 10 m/s +0.05
    Alerts          per category on each alert:
                      flood +0.20, hurricane +0.30, tornado +0.25, storm +0.15

Risk level cutoffs are strict: > 0.20 high, > 0.10 medium, else low.
The factor is uncapped unless ``clamp=True``; with several alerts it can
exceed 1.0 and the expected loss then exceeds the property value.
"""

import math

from app.exceptions import InvalidInputError
from app.models.hazard import RiskLevel
from app.models.portfolio import RiskAssessment
from app.models.weather import AlertCategory, WeatherCondition, WeatherObservation

RAIN_BASE = 0.05
THUNDERSTORM_BASE = 0.12

# (exclusive lower bound mm/h, increment), checked in order
PRECIPITATION_TIERS: list[tuple[float, float]] = [
    (20.0, 0.15),
    (10.0, 0.08),
    (0.0, 0.03),
]

# (exclusive lower bound m/s, increment), checked in order
WIND_TIERS: list[tuple[float, float]] = [
    (18.0, 0.10),
    (10.0, 0.05),
]

ALERT_INCREMENTS: dict[AlertCategory, float] = {
    AlertCategory.FLOOD: 0.20,
    AlertCategory.HURRICANE: 0.30,
    AlertCategory.TORNADO: 0.25,
    AlertCategory.STORM: 0.15,
}

HIGH_RISK_THRESHOLD = 0.20
MEDIUM_RISK_THRESHOLD = 0.10

# Increments are two-decimal constants; rounding removes float accumulation
# noise so that e.g. 0.05 + 0.15 lands on the 0.20 cutoff exactly.
_FACTOR_PRECISION = 10


def _tier_increment(value: float | None, tiers: list[tuple[float, float]]) -> float:
    if value is None:
        return 0.0
    for lower_bound, increment in tiers:
        if value > lower_bound:
            return increment
    return 0.0


def classify_risk_level(risk_factor: float) -> RiskLevel:
    if risk_factor > HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if risk_factor > MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def weather_risk_factor(observation: WeatherObservation) -> float:
    """Sum the condition, precipitation, wind, and alert increments."""
    factor = 0.0

    if observation.condition is WeatherCondition.RAIN:
        factor += RAIN_BASE
        factor += _tier_increment(observation.precipitation_mm_per_hour, PRECIPITATION_TIERS)
    elif observation.condition is WeatherCondition.THUNDERSTORM:
        factor += THUNDERSTORM_BASE

    factor += _tier_increment(observation.wind_speed_mps, WIND_TIERS)

    for alert in observation.alerts:
        for category in alert.categories:
            factor += ALERT_INCREMENTS.get(category, 0.0)

    return round(factor, _FACTOR_PRECISION)


def score_weather_risk(
    observation: WeatherObservation,
    property_value: float,
    *,
    clamp: bool = False,
) -> RiskAssessment:
    """Score one property against the current weather for its region.

    Args:
        observation: Current conditions for the property's region.
        property_value: Property value in USD; must be finite and >= 0.
        clamp: Cap the risk factor at 1.0 so expected loss never exceeds value.

    Returns:
        RiskAssessment with ``expected_loss == risk_factor * property_value``.
    """
    if not math.isfinite(property_value) or property_value < 0:
        raise InvalidInputError(f"property_value must be a finite value >= 0, got {property_value!r}")

    risk_factor = weather_risk_factor(observation)
    if clamp:
        risk_factor = min(max(risk_factor, 0.0), 1.0)

    return RiskAssessment(
        risk_factor=risk_factor,
        expected_loss=risk_factor * property_value,
        risk_level=classify_risk_level(risk_factor),
    )
