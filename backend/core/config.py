"""
Application configuration.

Settings come from environment variables (or a local .env file) with
defaults that match the Vite dev server setup.
"""

from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "finance-projection"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(default="INFO", description="Root logging level name.")

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Upper bound on goal simulations; 600 months is 50 years, 1200 at most.
    GOAL_MAX_MONTHS: int = Field(default=600, ge=1, le=1200)


def get_settings() -> Settings:
    return Settings()
