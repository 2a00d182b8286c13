from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_env: str = "development"
    app_debug: bool = True
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # CORS: allowed origins (comma-separated, or "*" for dev only)
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Weather provider
    mock_weather_latency_seconds: float = 0.0

    # Risk engine
    risk_factor_clamp: bool = False  # cap weather risk factor at 1.0
    scenario_seed: int | None = None  # set to replay runs with a seeded perturbation

    # Analysis history (in-memory, per process)
    analysis_history_limit: int = 50

    default_portfolio_id: str = "portfolio-main"

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def validate_production(self) -> list[str]:
        """Check critical env vars for production. Returns list of warnings."""
        warnings = []
        if self.app_env == "production":
            if "*" in self.cors_origin_list:
                warnings.append("CORS_ORIGINS must not contain '*' in production")
            if self.app_debug:
                warnings.append("APP_DEBUG should be false in production")
            if self.mock_weather_latency_seconds > 0:
                warnings.append("MOCK_WEATHER_LATENCY_SECONDS adds artificial delay in production")
        return warnings


settings = Settings()
