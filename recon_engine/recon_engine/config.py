"""Reconciliation engine configuration loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

from recon_engine.type_toolkit import Dialect

logger = logging.getLogger(__name__)


class PlatformEnv(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with RECON_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="RECON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    env: PlatformEnv = PlatformEnv.DEV
    debug: bool = False

    # Dialect used when the database-derived source does not declare one
    default_dialect: Dialect = Dialect.DATABRICKS

    # Logging
    structured_logging: bool = False


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info("Loaded settings for environment: %s", settings.env.value)

    return settings
