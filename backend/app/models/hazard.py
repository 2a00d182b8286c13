import math
from dataclasses import dataclass
from enum import Enum

from app.exceptions import InvalidInputError


class HazardType(str, Enum):
    FLOOD = "flood"
    FIRE = "fire"
    WIND = "wind"
    HEAT = "heat"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def parse_hazard_type(value: str | HazardType) -> HazardType:
    """Resolve a hazard id (case-insensitive) or raise InvalidInputError."""
    if isinstance(value, HazardType):
        return value
    try:
        return HazardType(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(h.value for h in HazardType)
        raise InvalidInputError(f"Unknown hazard type: {value!r} (expected one of {valid})") from None


def parse_risk_level(value: str | RiskLevel) -> RiskLevel:
    if isinstance(value, RiskLevel):
        return value
    try:
        return RiskLevel(str(value).strip().lower())
    except ValueError:
        raise InvalidInputError(f"Unknown risk level: {value!r}") from None


@dataclass(frozen=True)
class HazardInfo:
    """Display metadata for a hazard type."""

    hazard_type: HazardType
    name: str
    description: str


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class HistoricalEvent:
    year: int
    severity: float
    damage: float


@dataclass(frozen=True)
class RiskZone:
    """A geographic area exposed to one hazard. Reference data, never mutated."""

    id: int
    region: str
    hazard_type: HazardType
    base_risk_level: RiskLevel
    base_radius_meters: float
    base_expected_loss: float
    base_affected_properties: int
    latitude: float | None = None
    longitude: float | None = None

    def __post_init__(self):
        object.__setattr__(self, "hazard_type", parse_hazard_type(self.hazard_type))
        object.__setattr__(self, "base_risk_level", parse_risk_level(self.base_risk_level))
        for name in ("base_radius_meters", "base_expected_loss"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInputError(f"RiskZone {self.id}: {name} must be a finite value >= 0")
        if self.base_affected_properties < 0:
            raise InvalidInputError(
                f"RiskZone {self.id}: base_affected_properties must be >= 0"
            )
