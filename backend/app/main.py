from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings
from app.exceptions import DataUnavailableError, InvalidInputError

logger = structlog.get_logger()

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    logger.info("Starting Climate Risk API", env=app_settings.app_env)
    for warning in app_settings.validate_production():
        logger.warning("Configuration warning", detail=warning)

    service = app.state.analysis_service
    logger.info(
        "Reference data loaded",
        regions=len(service.catalog.regions()),
        loans=len(service.portfolio.get_loans()),
        zones=len(service.portfolio.get_zones()),
    )

    yield

    logger.info("Shutting down Climate Risk API")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(
        title="Climate Risk API",
        description="Climate physical-risk scoring and scenario analysis for a mortgage portfolio.",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from app.clients.portfolio_client import StaticPortfolioProvider
    from app.clients.weather_client import MockWeatherProvider
    from app.services.analysis_service import AnalysisHistory, RiskAnalysisService
    from app.services.hazard_catalog import HazardCatalog

    app.state.settings = app_settings
    app.state.analysis_service = RiskAnalysisService(
        catalog=HazardCatalog.default(),
        weather=MockWeatherProvider(latency_seconds=app_settings.mock_weather_latency_seconds),
        portfolio=StaticPortfolioProvider(),
        history=AnalysisHistory(limit=app_settings.analysis_history_limit),
        clamp=app_settings.risk_factor_clamp,
        seed=app_settings.scenario_seed,
    )

    # --- Error mapping ---
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        logger.info("Rejected invalid input", path=request.url.path, detail=str(exc))
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(DataUnavailableError)
    async def data_unavailable_handler(request: Request, exc: DataUnavailableError):
        logger.warning("Data unavailable", path=request.url.path, detail=str(exc))
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    from app.api.v1.router import api_router

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        service = app.state.analysis_service
        return {
            "status": "healthy",
            "version": VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "env": app_settings.app_env,
            "regions": len(service.catalog.regions()),
            "weather_regions": sorted(service.weather.regions()),
            "loans": len(service.portfolio.get_loans()),
            "analysis_runs": len(service.history),
            "risk_factor_clamp": app_settings.risk_factor_clamp,
            "seeded_scenarios": app_settings.scenario_seed is not None,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_debug,
    )
