"""
Configuration management using Pydantic settings.
Handles database URL, connection pool sizing, search defaults and logging level.
"""

from pydantic import Field, field_validator, ValidationInfo
from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Data access settings with environment variable support."""

    # Application configuration
    app_name: str = "LightBnB"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Individual database components, used when DATABASE_URL is not set
    postgres_db: str = "lightbnb"
    postgres_user: str = "labber"
    postgres_password: str = "labber"
    postgres_host: str = "localhost"
    postgres_port: int = 5432

    database_url: Optional[str] = Field(None, validate_default=True)

    # Connection pool settings
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600

    # Search defaults
    default_search_limit: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v, info: ValidationInfo):
        """Build database URL from components if not provided directly."""
        if not v:
            values = info.data
            user = values.get("postgres_user", "labber")
            password = values.get("postgres_password", "labber")
            host = values.get("postgres_host", "localhost")
            port = values.get("postgres_port", 5432)
            db = values.get("postgres_db", "lightbnb")
            return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db}"

        # Ensure async driver is used
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_search_limit")
    @classmethod
    def validate_search_limit(cls, v):
        """The default search limit must be positive."""
        if v < 1:
            raise ValueError("Default search limit must be at least 1")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()
