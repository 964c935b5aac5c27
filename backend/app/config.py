from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "GridOps"
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    log_json: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./gridops.db"

    # Simulation
    seed_sample_data: bool = True
    profile_seed: int | None = None
    forecast_hours: int = 6

    # Engines
    fuel_price_per_liter: float = 1.5
    # New engines start online unless configured otherwise.
    engine_default_running: bool = True


settings = Settings()
