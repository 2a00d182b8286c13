from app.models.hazard import (
    HazardInfo,
    HazardType,
    HistoricalEvent,
    Region,
    RiskLevel,
    RiskZone,
    parse_hazard_type,
    parse_risk_level,
)
from app.models.weather import AlertCategory, WeatherAlert, WeatherCondition, WeatherObservation
from app.models.portfolio import (
    Loan,
    LoanBookSummary,
    LoanRiskAssessment,
    PortfolioBook,
    PortfolioRiskSummary,
    RegionExposure,
    RiskAssessment,
)
from app.models.scenario import (
    AnalysisRun,
    ProjectedZone,
    RegionImpact,
    ScenarioParameters,
    ScenarioResult,
    StressTestResult,
    Timeframe,
)

__all__ = [
    "HazardInfo",
    "HazardType",
    "HistoricalEvent",
    "Region",
    "RiskLevel",
    "RiskZone",
    "parse_hazard_type",
    "parse_risk_level",
    "AlertCategory",
    "WeatherAlert",
    "WeatherCondition",
    "WeatherObservation",
    "Loan",
    "LoanBookSummary",
    "LoanRiskAssessment",
    "PortfolioBook",
    "PortfolioRiskSummary",
    "RegionExposure",
    "RiskAssessment",
    "AnalysisRun",
    "ProjectedZone",
    "RegionImpact",
    "ScenarioParameters",
    "ScenarioResult",
    "StressTestResult",
    "Timeframe",
]
