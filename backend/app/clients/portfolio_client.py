"""Loan, risk-zone, and book-overview providers."""

from abc import ABC, abstractmethod
from typing import Any

from app.models.hazard import HazardType, RiskZone, parse_hazard_type
from app.models.portfolio import Loan, PortfolioBook, RegionExposure


class PortfolioProvider(ABC):
    """Source of mortgage portfolio reference data."""

    @abstractmethod
    def get_book(self) -> PortfolioBook:
        """Book-level overview of the whole portfolio."""

    @abstractmethod
    def get_loans(self, region: str | None = None) -> list[Loan]:
        """Loans, optionally restricted to one region."""

    @abstractmethod
    def get_loan(self, loan_id: str) -> Loan | None:
        """A single loan, or None when the id is unknown."""

    @abstractmethod
    def get_zones(
        self,
        hazard_type: HazardType | str | None = None,
        region: str | None = None,
    ) -> list[RiskZone]:
        """Risk zones, optionally filtered by hazard type and region."""


class StaticPortfolioProvider(PortfolioProvider):
    """In-memory provider over bundled (or supplied) reference records."""

    def __init__(
        self,
        book: dict[str, Any] | None = None,
        loans: list[dict[str, Any]] | None = None,
        zones: list[dict[str, Any]] | None = None,
    ):
        from app.seed.portfolio import LOANS, PORTFOLIO_BOOK, RISK_ZONES

        book = PORTFOLIO_BOOK if book is None else book
        self._book = PortfolioBook(
            portfolio_id=book["portfolio_id"],
            total_loans=book["total_loans"],
            total_value=book["total_value"],
            average_ltv=book["average_ltv"],
            risk_categories=dict(book.get("risk_categories", {})),
            regions=tuple(RegionExposure(**r) for r in book.get("regions", [])),
        )
        self._loans = [Loan(**data) for data in (LOANS if loans is None else loans)]
        self._zones = [RiskZone(**data) for data in (RISK_ZONES if zones is None else zones)]

    def get_book(self) -> PortfolioBook:
        return self._book

    def get_loans(self, region: str | None = None) -> list[Loan]:
        if region is None:
            return list(self._loans)
        return [loan for loan in self._loans if loan.region == region]

    def get_loan(self, loan_id: str) -> Loan | None:
        for loan in self._loans:
            if loan.id == loan_id:
                return loan
        return None

    def get_zones(
        self,
        hazard_type: HazardType | str | None = None,
        region: str | None = None,
    ) -> list[RiskZone]:
        zones = self._zones
        if hazard_type is not None:
            hazard = parse_hazard_type(hazard_type)
            zones = [z for z in zones if z.hazard_type == hazard]
        if region is not None:
            zones = [z for z in zones if z.region == region]
        return list(zones)
