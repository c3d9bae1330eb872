"""
Application settings loaded from the environment and an optional .env file.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = Field(default="sqlite+aiosqlite:///./jobly.db")
    database_echo: bool = Field(default=False)


class SecuritySettings(BaseSettings):
    """Security configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JWT Configuration
    secret_key: str = Field(default="dev-secret-key-change-in-production")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60)

    # CORS (comma-separated)
    allowed_origins: str = Field(default="http://localhost:3000")
    allowed_methods: str = Field(default="GET,POST,PATCH,DELETE")
    allowed_headers: str = Field(default="*")

    @property
    def allowed_origins_list(self) -> List[str]:
        """Get allowed origins as a list."""
        return _split_csv(self.allowed_origins)

    @property
    def allowed_methods_list(self) -> List[str]:
        return _split_csv(self.allowed_methods)

    @property
    def allowed_headers_list(self) -> List[str]:
        return _split_csv(self.allowed_headers)


class MonitoringSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or console
    log_file_path: Optional[str] = Field(default=None)


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Jobly")
    app_version: str = Field(default="1.0.0")
    app_environment: str = Field(default="development")
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=8000)
    app_debug: bool = Field(default=False)

    # Configuration sections
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    @field_validator("app_environment")
    @classmethod
    def validate_environment(cls, v):
        valid_environments = {"development", "staging", "production", "testing"}
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
