"""
Configuration for the n8n monitor backend.

Settings are loaded from environment variables or a `.env` file in the
project root. The defaults are suitable for local development against a
SQLite database; point `DATABASE_URL` at PostgreSQL for anything shared.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathlib import Path
from dotenv import load_dotenv
import logging
import os

ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_PATH, override=False)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Database connection string (DATABASE_URL). SQLite by default.
    database_url: str = Field(default="sqlite+pysqlite:///./n8n_monitor.db")
    # Outbound call timeouts in seconds
    n8n_request_timeout_sec: float = Field(default=30.0, gt=0)
    webhook_test_timeout_sec: float = Field(default=30.0, gt=0)
    # Header the n8n public API expects the key in
    n8n_api_key_header: str = Field(default="X-N8N-API-KEY")
    log_level: str = Field(default="INFO")
    cors_allowed_origins: str = Field(default="*")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()


def get_app_env() -> str:
    raw = os.getenv("APP_ENV") or "dev"
    env = raw.strip().lower()
    if env not in {"dev", "prod"}:
        logging.getLogger("config").warning("Unknown APP_ENV=%s; defaulting to dev", raw)
        env = "dev"
    return env


def env_true(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def validate_runtime_settings() -> None:
    if get_app_env() != "prod":
        return
    logger = logging.getLogger("config")
    if env_true("AUTO_CREATE_DB", "true"):
        logger.warning("AUTO_CREATE_DB is enabled in prod. Consider running migrations instead.")
    if settings.database_url.startswith("sqlite"):
        logger.warning("DATABASE_URL points at SQLite in prod. Use PostgreSQL for shared deployments.")
    if "*" in settings.cors_origins:
        logger.warning("CORS_ALLOWED_ORIGINS allows every origin in prod.")


validate_runtime_settings()
