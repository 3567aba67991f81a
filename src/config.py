"""
Configuration Settings
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> list[str]:
    value = os.getenv(name, default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """
    Application settings

    Built once at startup and handed to create_app(); components receive
    the values they need through their constructors.
    """

    # Environment
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Service metadata
    SERVICE_NAME: str = "transaction-ledger-api"
    SERVICE_VERSION: str = "1.0.0"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 9000
    CORS_ALLOW_ORIGINS: list[str] = field(default_factory=lambda: ["*"])

    # PostgreSQL Database Configuration (empty = in-memory store)
    DATABASE_URL: str = ""
    DATABASE_MIN_SIZE: int = 1
    DATABASE_MAX_SIZE: int = 10

    # Ingestion
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024
    BATCH_SIZE: int = 100

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Read settings from environment variables (and .env if present)"""
        if dotenv:
            load_dotenv()

        return cls(
            ENV=os.getenv("ENV", "development"),
            DEBUG=_env_bool("DEBUG", False),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
            SERVICE_NAME=os.getenv("SERVICE_NAME", "transaction-ledger-api"),
            SERVICE_VERSION=os.getenv("SERVICE_VERSION", "1.0.0"),
            API_HOST=os.getenv("API_HOST", "0.0.0.0"),
            API_PORT=int(os.getenv("API_PORT", os.getenv("PORT", "9000"))),
            CORS_ALLOW_ORIGINS=_env_list("CORS_ALLOW_ORIGINS", "*"),
            DATABASE_URL=os.getenv("DATABASE_URL", ""),
            DATABASE_MIN_SIZE=int(os.getenv("DATABASE_MIN_SIZE", "1")),
            DATABASE_MAX_SIZE=int(os.getenv("DATABASE_MAX_SIZE", "10")),
            MAX_UPLOAD_SIZE=int(os.getenv("MAX_UPLOAD_SIZE", str(10 * 1024 * 1024))),
            BATCH_SIZE=int(os.getenv("BATCH_SIZE", "100")),
        )
