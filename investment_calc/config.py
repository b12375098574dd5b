"""Application configuration loaded from environment variables."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from ``INVESTMENT_CALC_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="INVESTMENT_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"

    # CORS origins of the frontend
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )

    # Upper bound the API clamps the horizon to
    max_horizon_years: int = Field(default=30, ge=1)


settings = Settings()
