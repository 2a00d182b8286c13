from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_analysis_service, get_portfolio_provider
from app.api.serializers import book_to_dict, loan_summary_to_dict, loan_to_dict, region_to_dict
from app.clients.portfolio_client import PortfolioProvider
from app.services.analysis_service import RiskAnalysisService
from app.services.portfolio_aggregator import summarize_loans

router = APIRouter()


@router.get("")
async def get_portfolio(portfolio: PortfolioProvider = Depends(get_portfolio_provider)):
    """Book-level overview of the mortgage portfolio."""
    return book_to_dict(portfolio.get_book())


@router.get("/summary")
async def get_loan_summary(portfolio: PortfolioProvider = Depends(get_portfolio_provider)):
    """Overview computed from the individual loan records."""
    return loan_summary_to_dict(summarize_loans(portfolio.get_loans()))


@router.get("/region/{region_id}")
async def get_region_portfolio(
    region_id: str,
    service: RiskAnalysisService = Depends(get_analysis_service),
):
    region = service.require_region(region_id)
    loans = service.portfolio.get_loans(region=region_id)
    return {
        "region": region_to_dict(region),
        "loans": [loan_to_dict(loan) for loan in loans],
        "summary": loan_summary_to_dict(summarize_loans(loans)),
    }


@router.get("/loan/{loan_id}")
async def get_loan(loan_id: str, portfolio: PortfolioProvider = Depends(get_portfolio_provider)):
    loan = portfolio.get_loan(loan_id)
    if loan is None:
        raise HTTPException(status_code=404, detail=f"Loan not found: {loan_id}")
    return loan_to_dict(loan)
