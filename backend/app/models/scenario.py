"""
Scenario parameters and results.

A scenario fixes a hazard, a return period, an intensity on the 0-5 slider
scale, and a projection horizon. Timeframes are a closed set: present day
(2023), mid-century (2050), and end-century (2100).
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from app.exceptions import InvalidInputError
from app.models.hazard import HazardType, RiskZone, parse_hazard_type

RETURN_PERIODS: tuple[int, ...] = (10, 20, 50, 100, 500)

MIN_INTENSITY = 0.0
MAX_INTENSITY = 5.0


class Timeframe(int, Enum):
    PRESENT = 2023
    MID_CENTURY = 2050
    END_CENTURY = 2100

    @classmethod
    def parse(cls, value: "int | str | Timeframe") -> "Timeframe":
        """Accept a member, a year (int or numeric string), or "present"."""
        if isinstance(value, Timeframe):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text == "present":
                return cls.PRESENT
            if not text.isdigit():
                raise InvalidInputError(f"Unknown timeframe: {value!r}")
            value = int(text)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"Unknown timeframe: {value!r}")
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(str(t.value) for t in cls)
            raise InvalidInputError(f"Unknown timeframe: {value} (expected present or one of {valid})") from None

    @property
    def label(self) -> str:
        return {
            Timeframe.PRESENT: "Present day",
            Timeframe.MID_CENTURY: "Mid-century (2050)",
            Timeframe.END_CENTURY: "End of century (2100)",
        }[self]


def intensity_label(intensity: float) -> str:
    """Severity label for the 0-5 intensity scale."""
    if intensity <= 1:
        return "Minor"
    if intensity <= 2:
        return "Moderate"
    if intensity <= 3:
        return "Significant"
    if intensity <= 4:
        return "Severe"
    return "Extreme"


@dataclass(frozen=True)
class ScenarioParameters:
    hazard_type: HazardType
    return_period_years: int = 100
    intensity: float = 3.0
    timeframe: Timeframe = Timeframe.PRESENT
    region: str | None = None
    portfolio_id: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "hazard_type", parse_hazard_type(self.hazard_type))
        object.__setattr__(self, "timeframe", Timeframe.parse(self.timeframe))
        if self.return_period_years not in RETURN_PERIODS:
            raise InvalidInputError(
                f"Unsupported return period: {self.return_period_years!r} "
                f"(expected one of {', '.join(map(str, RETURN_PERIODS))})"
            )
        if not math.isfinite(self.intensity) or not MIN_INTENSITY <= self.intensity <= MAX_INTENSITY:
            raise InvalidInputError(
                f"intensity must be within [{MIN_INTENSITY}, {MAX_INTENSITY}], got {self.intensity!r}"
            )


@dataclass(frozen=True)
class ProjectedZone:
    """A risk zone scaled to a projection horizon. The base zone is untouched."""

    zone: RiskZone
    timeframe: Timeframe
    radius_meters: float
    expected_loss: float
    affected_properties: int


@dataclass(frozen=True)
class RegionImpact:
    region: str
    expected_loss: float
    affected_properties: int


@dataclass(frozen=True)
class ScenarioResult:
    parameters: ScenarioParameters
    total_expected_loss: float
    percentage_of_portfolio: float | None
    affected_properties: int
    per_region_impact: tuple[RegionImpact, ...]
    ltv_impact: float | None
    zones: tuple[ProjectedZone, ...] = ()


@dataclass(frozen=True)
class AnalysisRun:
    id: str
    timestamp: datetime
    parameters: ScenarioParameters
    result: ScenarioResult
    seed: int | None = None


@dataclass(frozen=True)
class StressTestResult:
    hazard_type: HazardType
    intensity: float
    property_value: float
    damage_ratio: float
    expected_loss_value: float
    confidence_interval: tuple[float, float]
