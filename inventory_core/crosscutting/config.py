"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - crosscutting/logger.py: reads log level and format
  - identity/access_control.py: decides which authorization observer to use
  - application/usecases/stock: reads stock availability enforcement

Constraints:
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/production/test)
        log_level: Logging level name (default: INFO)
        log_json: Emit JSON log lines (default: True)
        authz_decision_logging: Report authorization decisions to the logger
            instead of the no-op observer (default: False)
        enforce_stock_availability: Reject outgoing movements larger than the
            available stock (default: True)
    """

    # Environment
    app_env: str = "development"

    # Observability
    log_level: str = "INFO"
    log_json: bool = True
    authz_decision_logging: bool = False

    # Inventory rules
    enforce_stock_availability: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
