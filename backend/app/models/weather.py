"""
Weather observation types.

Observations arrive from a weather provider keyed by region. Alert event
names are free text ("Flash Flood Warning", "Severe Thunderstorm"), so they
are classified into ``AlertCategory`` tags once, when the alert is built, and
scoring only ever looks at the tags.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum

from app.exceptions import InvalidInputError


class WeatherCondition(str, Enum):
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    DRIZZLE = "Drizzle"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"
    MIST = "Mist"
    FOG = "Fog"
    HAZE = "Haze"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: str | None) -> "WeatherCondition":
        """Map a provider condition label to a member; unknown labels become OTHER."""
        if not label:
            return cls.OTHER
        normalized = label.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return cls.OTHER


class AlertCategory(str, Enum):
    FLOOD = "flood"
    HURRICANE = "hurricane"
    TORNADO = "tornado"
    STORM = "storm"


# Whole-word keywords per category. "Thunderstorm" and "Windstorm" are
# separate words and do not tag STORM.
ALERT_KEYWORDS: dict[str, AlertCategory] = {
    "flood": AlertCategory.FLOOD,
    "flooding": AlertCategory.FLOOD,
    "hurricane": AlertCategory.HURRICANE,
    "tornado": AlertCategory.TORNADO,
    "storm": AlertCategory.STORM,
}

_WORD_RE = re.compile(r"[a-z]+")


def classify_alert_event(event: str) -> frozenset[AlertCategory]:
    """Tag an alert event name with every category whose keyword it contains.

    Examples:
        "Flood" -> {FLOOD}
        "Severe Storm Flood Warning" -> {STORM, FLOOD}
        "Severe Thunderstorm" -> {}
    """
    words = _WORD_RE.findall(event.lower())
    return frozenset(ALERT_KEYWORDS[w] for w in words if w in ALERT_KEYWORDS)


@dataclass(frozen=True)
class WeatherAlert:
    event: str
    description: str = ""
    categories: frozenset[AlertCategory] | None = None

    def __post_init__(self):
        if self.categories is None:
            object.__setattr__(self, "categories", classify_alert_event(self.event))
        else:
            object.__setattr__(self, "categories", frozenset(self.categories))


def _require_non_negative(name: str, value: float | None) -> None:
    if value is None:
        return
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(f"{name} must be a finite value >= 0, got {value!r}")


@dataclass(frozen=True)
class WeatherObservation:
    """Snapshot of current conditions for one region. Immutable once built."""

    condition: WeatherCondition
    temperature_c: float
    humidity_pct: float
    wind_speed_mps: float
    precipitation_mm_per_hour: float | None = None
    alerts: tuple[WeatherAlert, ...] = ()
    region: str | None = None
    description: str = ""

    def __post_init__(self):
        if not isinstance(self.condition, WeatherCondition):
            object.__setattr__(self, "condition", WeatherCondition.from_label(self.condition))
        if not math.isfinite(self.temperature_c):
            raise InvalidInputError(f"temperature_c must be finite, got {self.temperature_c!r}")
        _require_non_negative("humidity_pct", self.humidity_pct)
        _require_non_negative("wind_speed_mps", self.wind_speed_mps)
        _require_non_negative("precipitation_mm_per_hour", self.precipitation_mm_per_hour)
        object.__setattr__(self, "alerts", tuple(self.alerts))
