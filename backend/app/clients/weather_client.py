"""
Weather observation providers.

Providers return current conditions for a region id, or ``None`` when they
have nothing for it. Callers decide what "no data" means; there is no
fallback to another region's weather.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any

import structlog

from app.models.weather import WeatherAlert, WeatherObservation

logger = structlog.get_logger()


def parse_owm_payload(region: str, payload: dict[str, Any]) -> WeatherObservation:
    """Build an observation from an OpenWeatherMap-style current-weather payload.

    ``weather`` may be a single object or the list OpenWeatherMap returns;
    the first entry wins. ``rain.1h`` is the precipitation rate in mm/h.
    """
    weather = payload.get("weather") or {}
    if isinstance(weather, list):
        weather = weather[0] if weather else {}
    main = payload.get("main") or {}
    wind = payload.get("wind") or {}
    rain = payload.get("rain") or {}

    alerts = tuple(
        WeatherAlert(event=a.get("event") or "", description=a.get("description") or "")
        for a in payload.get("alerts") or []
    )

    return WeatherObservation(
        region=region,
        condition=weather.get("main"),
        description=weather.get("description", ""),
        temperature_c=float(main.get("temp", 0.0)),
        humidity_pct=float(main.get("humidity", 0.0)),
        wind_speed_mps=float(wind.get("speed", 0.0)),
        precipitation_mm_per_hour=float(rain["1h"]) if rain.get("1h") is not None else None,
        alerts=alerts,
    )


class WeatherProvider(ABC):
    """Source of current weather observations keyed by region id."""

    @abstractmethod
    async def get_observation(self, region: str) -> WeatherObservation | None:
        """Return current conditions for the region, or None when unavailable."""

    @abstractmethod
    def regions(self) -> list[str]:
        """Region ids this provider has observations for."""


class MockWeatherProvider(WeatherProvider):
    """Serves static regional snapshots, optionally after a simulated delay."""

    def __init__(
        self,
        snapshots: dict[str, dict[str, Any]] | None = None,
        latency_seconds: float = 0.0,
    ):
        if snapshots is None:
            from app.seed.weather import WEATHER_SNAPSHOTS

            snapshots = WEATHER_SNAPSHOTS
        self._snapshots = snapshots
        self._latency = latency_seconds

    async def get_observation(self, region: str) -> WeatherObservation | None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

        payload = self._snapshots.get(region)
        if payload is None:
            logger.warning("No weather snapshot for region", region=region)
            return None

        return parse_owm_payload(region, payload)

    def regions(self) -> list[str]:
        return list(self._snapshots.keys())
