"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

This module implements the Singleton pattern to ensure a single global
configuration instance throughout the application lifecycle.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values
- Cached singleton accessor

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_SEED_CATEGORIES_JSON = '["Eletrônicos", "Celulares", "Periféricos"]'


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        seed_on_startup: Populate the catalog with synthetic products at startup
        seed_categories: Categories to seed (JSON array string)
        seed_count_per_category: Synthetic products generated per category
        strict_index_consistency: Raise when a postings id has no catalog entry
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings()
        >>> print(settings.app_name)
        'Product Index API'
        >>> print(settings.seed_categories_list)
        ['Eletrônicos', 'Celulares', 'Periféricos']
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Index API",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    seed_on_startup: bool = Field(
        default=True,
        description="Populate the catalog with synthetic products at startup"
    )

    seed_categories: str = Field(
        default=DEFAULT_SEED_CATEGORIES_JSON,
        description="Categories to seed as JSON array string"
    )

    seed_count_per_category: int = Field(
        default=5,
        ge=0,
        le=1000,
        description="Synthetic products generated per seeded category"
    )

    strict_index_consistency: bool = Field(
        default=True,
        description="Raise INDEX_INCONSISTENT instead of skipping dangling ids"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Args:
            value: Raw environment value

        Returns:
            Lowercase normalized environment name
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("seed_categories")
    @classmethod
    def validate_seed_categories(cls, value: str) -> str:
        """
        Ensure seed categories parse as a JSON array of strings.

        Raises:
            ValueError: If the value is not a JSON array of strings
        """
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"seed_categories is not valid JSON: {e}") from e

        if not isinstance(parsed, list) or not all(isinstance(c, str) for c in parsed):
            raise ValueError("seed_categories must be a JSON array of strings")

        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def seed_categories_list(self) -> List[str]:
        """Parsed list of categories to seed."""
        return json.loads(self.seed_categories)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug}, "
            f"seed_on_startup={self.seed_on_startup})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
