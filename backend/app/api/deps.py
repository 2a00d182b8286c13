from fastapi import Request

from app.clients.portfolio_client import PortfolioProvider
from app.services.analysis_service import RiskAnalysisService
from app.services.hazard_catalog import HazardCatalog


def get_analysis_service(request: Request) -> RiskAnalysisService:
    return request.app.state.analysis_service


def get_catalog(request: Request) -> HazardCatalog:
    return request.app.state.analysis_service.catalog


def get_portfolio_provider(request: Request) -> PortfolioProvider:
    return request.app.state.analysis_service.portfolio
