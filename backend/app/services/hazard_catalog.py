"""Registry of hazard types, reference regions, and historical hazard events."""

from app.models.hazard import (
    HazardInfo,
    HazardType,
    HistoricalEvent,
    Region,
    parse_hazard_type,
)


class HazardCatalog:
    """Immutable lookup over hazard and region reference data."""

    def __init__(
        self,
        hazards: list[HazardInfo],
        regions: list[Region],
        historical_events: dict[HazardType, list[HistoricalEvent]] | None = None,
    ):
        self._hazards = {h.hazard_type: h for h in hazards}
        self._regions = {r.id: r for r in regions}
        self._historical = historical_events or {}

    @classmethod
    def default(cls) -> "HazardCatalog":
        """Build the catalog from the bundled seed data."""
        from app.seed.hazards import HAZARD_TYPES, HISTORICAL_EVENTS, REGIONS

        hazards = [
            HazardInfo(
                hazard_type=parse_hazard_type(h["id"]),
                name=h["name"],
                description=h["description"],
            )
            for h in HAZARD_TYPES
        ]
        regions = [Region(**r) for r in REGIONS]
        events = [HistoricalEvent(**e) for e in HISTORICAL_EVENTS]
        return cls(hazards, regions, {h.hazard_type: list(events) for h in hazards})

    def hazard_types(self) -> list[HazardInfo]:
        return list(self._hazards.values())

    def get_hazard(self, hazard_type: str | HazardType) -> HazardInfo:
        """Raises InvalidInputError for ids outside the hazard enumeration."""
        return self._hazards[parse_hazard_type(hazard_type)]

    def regions(self) -> list[Region]:
        return list(self._regions.values())

    def get_region(self, region_id: str) -> Region | None:
        """Look up a region by id. Unknown ids return None, never a default region."""
        return self._regions.get(region_id)

    def historical_events(self, hazard_type: str | HazardType) -> list[HistoricalEvent]:
        return list(self._historical.get(parse_hazard_type(hazard_type), []))
