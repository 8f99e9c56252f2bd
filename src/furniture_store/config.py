"""
Configuration management for Furniture Store
"""

import os
from pathlib import Path
from typing import Any, Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .variants import FurnitureVariant


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Factory selection for the configured store (unset runs every store)
    furniture_variant: Optional[FurnitureVariant] = None

    log_level: Literal["debug", "info", "warning", "error"] = "info"

    # Development Settings (forces debug logging)
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("furniture_variant", mode="before")
    @classmethod
    def _normalize_variant(cls, value: Any) -> Any:
        """Accept variant names in any case; treat blank as unset"""
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def effective_log_level(self) -> str:
        """Log level to run with; debug mode always logs at debug"""
        return "debug" if self.debug else self.log_level


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings singleton"""
    global _settings
    if _settings is None:
        load_dotenv_if_exists()

        import structlog
        logger = structlog.get_logger(__name__)
        logger.debug("Environment variables",
                     furniture_variant=os.getenv('FURNITURE_VARIANT'),
                     cwd=os.getcwd())

        try:
            _settings = Settings()
            logger.debug("Settings loaded", furniture_variant=_settings.furniture_variant)
        except Exception as e:
            raise ValueError(f"Invalid furniture store configuration. Check your .env file: {e}") from e
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None


def load_dotenv_if_exists() -> None:
    """Load .env file if it exists"""
    from dotenv import load_dotenv

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)
    else:
        # Try to load from parent directories
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            env_path = parent / ".env"
            if env_path.exists():
                load_dotenv(env_path)
                break
