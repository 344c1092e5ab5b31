"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class PlanStoreBackend(str, Enum):
    """Where day plans are persisted"""

    MEMORY = "memory"
    MONGO = "mongo"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="MealPrep", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Pantry database (any SQLAlchemy URL)
    database_url: str = Field(
        default="sqlite:///./mealprep.db",
        description="SQLAlchemy connection URL for the pantry",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")

    # Plan store
    plan_store_backend: PlanStoreBackend = Field(
        default=PlanStoreBackend.MEMORY, description="Day plan storage backend"
    )
    mongo_uri: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection URI"
    )
    mongo_db_name: str = Field(default="mealprep", description="MongoDB database name")

    # Planning defaults
    week_starts_on: int = Field(
        default=0, ge=0, le=1, description="First day of a week view (0=Sunday, 1=Monday)"
    )
    default_grocery_days: int = Field(
        default=7, ge=1, le=31, description="Days covered by a grocery list"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(default="MealPrep API", description="API documentation title")
    api_description: str = Field(
        default="Weekly meal plans, grocery lists and pantry reconciliation",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", "plan_store_backend", mode="before")
    @classmethod
    def lowercase_enum(cls, v):
        """Accept enum values in any case"""
        if isinstance(v, str):
            return v.lower()
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
