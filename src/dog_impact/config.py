"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    foods_csv_path: Path = _DATA_DIR / "calories.csv"
    breeds_csv_path: Path = _DATA_DIR / "breeds.csv"
    human_daily_kcal: float = 2200.0
    dog_kcal_per_lb_per_day: float = 30.0
    max_references: int = 3
    suggestion_min_length: int = 2
    suggestion_limit: int = 20
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="DOG_IMPACT_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
