"""Application configuration using Pydantic Settings."""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    # Database Configuration
    database_url_override: Optional[str] = Field(
        default=None,
        alias="database_url",
        description="Full SQLAlchemy async URL, takes precedence over db_* fields"
    )
    db_user: Optional[str] = Field(default=None, description="Database user")
    db_password: str = Field(default="", description="Database password")
    db_host: Optional[str] = Field(default=None, description="Database host")
    db_port: int = Field(default=5432, description="Database port")
    db_name: Optional[str] = Field(default=None, description="Database name")
    sqlite_path: str = Field(
        default="./plays.db",
        description="SQLite file used when no Postgres host is configured"
    )

    # Bet Catalog
    bet_catalog_url: str = Field(
        default="http://localhost:8081/api",
        description="Base URL of the bet catalog service"
    )
    bet_catalog_timeout_seconds: float = Field(
        default=10.0,
        description="Request timeout for bet catalog calls"
    )
    bet_catalog_max_retries: int = Field(
        default=3,
        description="Attempts per bet catalog request"
    )

    # Localization
    default_locale: str = Field(
        default="en",
        description="Locale used for error messages when none is requested"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(
        default="",
        description="Logfire observability token"
    )

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("bet_catalog_max_retries")
    @classmethod
    def validate_retries(cls, v: int) -> int:
        """At least one attempt is always made."""
        if v < 1:
            raise ValueError("bet_catalog_max_retries must be at least 1")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"

    @property
    def database_url(self) -> str:
        """
        Construct the SQLAlchemy async database URL.

        An explicit DATABASE_URL wins. Otherwise a Postgres URL (asyncpg
        driver) is composed when host, user and name are all set, falling
        back to a local SQLite file for development.
        """
        if self.database_url_override:
            return self.database_url_override

        if self.db_host and self.db_user and self.db_name:
            auth = (
                f"{self.db_user}:{self.db_password}"
                if self.db_password
                else self.db_user
            )
            return (
                f"postgresql+asyncpg://{auth}@"
                f"{self.db_host}:{self.db_port}/{self.db_name}"
            )

        return f"sqlite+aiosqlite:///{self.sqlite_path}"


# Create a singleton instance
settings = Settings()


def get_settings() -> "Settings":
    """Return the singleton settings instance."""
    return settings
