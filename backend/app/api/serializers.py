"""Plain-dict renderings of domain records for JSON responses."""

from app.models.hazard import HazardInfo, HistoricalEvent, Region
from app.models.portfolio import (
    Loan,
    LoanBookSummary,
    PortfolioBook,
    PortfolioRiskSummary,
    RegionExposure,
)
from app.models.scenario import (
    AnalysisRun,
    ProjectedZone,
    ScenarioParameters,
    ScenarioResult,
    StressTestResult,
    intensity_label,
)
from app.models.weather import WeatherObservation


def hazard_to_dict(h: HazardInfo) -> dict:
    return {"id": h.hazard_type.value, "name": h.name, "description": h.description}


def region_to_dict(r: Region) -> dict:
    return {"id": r.id, "name": r.name, "lat": r.latitude, "lng": r.longitude}


def event_to_dict(e: HistoricalEvent) -> dict:
    return {"year": e.year, "severity": e.severity, "damage": e.damage}


def projected_zone_to_dict(pz: ProjectedZone) -> dict:
    zone = pz.zone
    return {
        "id": zone.id,
        "region": zone.region,
        "hazard": zone.hazard_type.value,
        "risk": zone.base_risk_level.value,
        "lat": zone.latitude,
        "lng": zone.longitude,
        "timeframe": pz.timeframe.value,
        "radius": pz.radius_meters,
        "expected_loss": pz.expected_loss,
        "affected_properties": pz.affected_properties,
        "base_radius": zone.base_radius_meters,
        "base_expected_loss": zone.base_expected_loss,
        "base_affected_properties": zone.base_affected_properties,
    }


def loan_to_dict(loan: Loan) -> dict:
    return {
        "id": loan.id,
        "address": loan.address,
        "value": loan.value,
        "balance": loan.balance,
        "ltv": loan.ltv,
        "risk": loan.base_risk_level.value,
        "region": loan.region,
        "lat": loan.latitude,
        "lng": loan.longitude,
        "year_built": loan.year_built,
        "loan_type": loan.loan_type,
        "interest_rate": loan.interest_rate,
        "monthly_payment": loan.monthly_payment,
        "insurance_coverage": loan.insurance_coverage,
    }


def _exposure_to_dict(r: RegionExposure) -> dict:
    return {"name": r.name, "count": r.count, "value": r.value}


def book_to_dict(book: PortfolioBook) -> dict:
    return {
        "portfolio_id": book.portfolio_id,
        "total_loans": book.total_loans,
        "total_value": book.total_value,
        "average_ltv": book.average_ltv,
        "risk_categories": dict(book.risk_categories),
        "regions": [_exposure_to_dict(r) for r in book.regions],
    }


def loan_summary_to_dict(summary: LoanBookSummary) -> dict:
    return {
        "total_loans": summary.total_loans,
        "total_value": summary.total_value,
        "total_balance": summary.total_balance,
        "average_ltv": summary.average_ltv,
        "risk_categories": dict(summary.risk_categories),
        "regions": [_exposure_to_dict(r) for r in summary.regions],
    }


def observation_to_dict(obs: WeatherObservation) -> dict:
    return {
        "region": obs.region,
        "condition": obs.condition.value,
        "description": obs.description,
        "temperature_c": obs.temperature_c,
        "humidity_pct": obs.humidity_pct,
        "wind_speed_mps": obs.wind_speed_mps,
        "precipitation_mm_per_hour": obs.precipitation_mm_per_hour,
        "alerts": [
            {
                "event": a.event,
                "description": a.description,
                "categories": sorted(c.value for c in a.categories),
            }
            for a in obs.alerts
        ],
    }


def risk_summary_to_dict(summary: PortfolioRiskSummary) -> dict:
    return {
        "region": summary.region,
        "total_value": summary.total_value,
        "total_expected_loss": summary.total_expected_loss,
        "percentage_at_risk": summary.percentage_at_risk,
        "has_data": summary.has_data,
        "high_risk_loans": summary.high_risk_count,
        "loans": [
            {
                **loan_to_dict(item.loan),
                "weather_risk": {
                    "risk_factor": item.assessment.risk_factor,
                    "expected_loss": item.assessment.expected_loss,
                    "risk_level": item.assessment.risk_level.value,
                },
            }
            for item in summary.assessments
        ],
    }


def parameters_to_dict(params: ScenarioParameters) -> dict:
    return {
        "hazard_type": params.hazard_type.value,
        "return_period": params.return_period_years,
        "intensity": params.intensity,
        "intensity_label": intensity_label(params.intensity),
        "timeframe": params.timeframe.value,
        "region": params.region,
        "portfolio_id": params.portfolio_id,
    }


def result_to_dict(result: ScenarioResult) -> dict:
    return {
        "total_expected_loss": result.total_expected_loss,
        "percentage_of_portfolio": result.percentage_of_portfolio,
        "affected_properties": result.affected_properties,
        "risk_hotspots": [
            {
                "region": impact.region,
                "expected_loss": impact.expected_loss,
                "affected_properties": impact.affected_properties,
            }
            for impact in result.per_region_impact
        ],
        "ltv_impact": result.ltv_impact,
        "zones": [projected_zone_to_dict(pz) for pz in result.zones],
    }


def run_to_dict(run: AnalysisRun) -> dict:
    return {
        "id": run.id,
        "timestamp": run.timestamp.isoformat(),
        "seed": run.seed,
        "parameters": parameters_to_dict(run.parameters),
        "results": result_to_dict(run.result),
    }


def run_to_history_dict(run: AnalysisRun) -> dict:
    return {
        "id": run.id,
        "timestamp": run.timestamp.isoformat(),
        "hazard_type": run.parameters.hazard_type.value,
        "return_period": run.parameters.return_period_years,
        "timeframe": run.parameters.timeframe.value,
        "total_expected_loss": run.result.total_expected_loss,
    }


def stress_to_dict(result: StressTestResult) -> dict:
    low, high = result.confidence_interval
    return {
        "hazard_type": result.hazard_type.value,
        "intensity": result.intensity,
        "property_value": result.property_value,
        "damage_ratio": result.damage_ratio,
        "expected_loss_value": result.expected_loss_value,
        "confidence_interval": [low, high],
    }
