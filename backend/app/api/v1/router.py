from fastapi import APIRouter

from app.api.v1 import analysis, hazards, portfolio, weather

api_router = APIRouter()

api_router.include_router(hazards.router, prefix="/hazard", tags=["hazard"])
api_router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
api_router.include_router(weather.router, prefix="/weather", tags=["weather"])
api_router.include_router(analysis.router, prefix="/analysis", tags=["analysis"])
