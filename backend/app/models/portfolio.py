import math
from dataclasses import dataclass, field

from app.exceptions import InvalidInputError
from app.models.hazard import RiskLevel, parse_risk_level


@dataclass(frozen=True)
class Loan:
    """A mortgage loan and the property securing it. Read-only reference data."""

    id: str
    address: str
    value: float
    balance: float
    ltv: float
    region: str
    base_risk_level: RiskLevel
    latitude: float | None = None
    longitude: float | None = None
    year_built: int | None = None
    loan_type: str | None = None
    interest_rate: float | None = None
    monthly_payment: float | None = None
    insurance_coverage: float | None = None

    def __post_init__(self):
        object.__setattr__(self, "base_risk_level", parse_risk_level(self.base_risk_level))
        for name in ("value", "balance", "ltv"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInputError(f"Loan {self.id}: {name} must be a finite value >= 0")


@dataclass(frozen=True)
class RiskAssessment:
    """Weather-driven risk for one property. A value, recomputed on every call."""

    risk_factor: float
    expected_loss: float
    risk_level: RiskLevel


@dataclass(frozen=True)
class LoanRiskAssessment:
    loan: Loan
    assessment: RiskAssessment


@dataclass(frozen=True)
class PortfolioRiskSummary:
    """Weather risk folded over a region's loans.

    ``percentage_at_risk`` is ``None`` when the loan set is empty or carries
    no value; that is "no data", not 0%.
    """

    region: str | None
    total_value: float
    total_expected_loss: float
    percentage_at_risk: float | None
    high_risk_count: int
    assessments: tuple[LoanRiskAssessment, ...] = ()

    @property
    def has_data(self) -> bool:
        return self.percentage_at_risk is not None


@dataclass(frozen=True)
class RegionExposure:
    name: str
    count: int
    value: float


@dataclass(frozen=True)
class PortfolioBook:
    """Book-level overview of the whole mortgage portfolio."""

    portfolio_id: str
    total_loans: int
    total_value: float
    average_ltv: float
    risk_categories: dict[str, int] = field(default_factory=dict)
    regions: tuple[RegionExposure, ...] = ()


@dataclass(frozen=True)
class LoanBookSummary:
    """Overview computed from individual loan records."""

    total_loans: int
    total_value: float
    total_balance: float
    average_ltv: float | None
    risk_categories: dict[str, int] = field(default_factory=dict)
    regions: tuple[RegionExposure, ...] = ()
