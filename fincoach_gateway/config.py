"""Configuration management using Pydantic Settings"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FINCOACH_",
        extra="ignore",
    )

    # Service
    service_name: str = "fincoach-gateway"
    log_level: str = "INFO"

    # Savings simulator
    default_annual_rate: float = 0.10  # Assumed 10% annual return
    projection_horizons: List[int] = [5, 10, 15, 20, 30]

    # Health
    emergency_fund_months: int = 6

    # CSV import
    csv_max_rows: int = 5000


settings = Settings()
