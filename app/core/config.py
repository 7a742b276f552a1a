"""
Configuration management for ResourceFlow Capacity Service
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    APP_ENV: str = Field(default="local", description="Application environment: local, staging, prod")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level: DEBUG, INFO, WARNING, ERROR")

    # CORS settings
    ALLOWED_ORIGINS: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins. Use '*' for local only."
    )

    # Timezone (documentation only; calendar math works on plain dates)
    TZ: str = Field(default="America/Sao_Paulo", description="Timezone for display")

    # Version (can be git SHA or semver)
    VERSION: Optional[str] = Field(default=None, description="Application version (git SHA or semver)")

    # Capacity rules
    DEFAULT_DAILY_HOURS: int = Field(
        default=8,
        description="Working hours per day used when an employee has no daily_hours set"
    )
    VACATION_MONTH_THRESHOLD: float = Field(
        default=0.5,
        description="Share of monthly capacity consumed by vacation that marks the whole month as vacation"
    )

    # External calendar events service (custom holidays, bridge days, recesses)
    CALENDAR_API_BASE_URL: Optional[str] = Field(
        default=None,
        description="Base URL of the calendar events API. When unset only national holidays are used."
    )
    CALENDAR_API_TOKEN: Optional[str] = Field(default=None, description="Bearer token for the calendar events API")
    CALENDAR_API_TIMEOUT_SECS: float = Field(default=10.0, description="Timeout for calendar events API calls")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate APP_ENV"""
        allowed = ["local", "staging", "prod"]
        if v not in allowed:
            raise ValueError(f"APP_ENV must be one of {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate LOG_LEVEL"""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v.upper()

    @field_validator("DEFAULT_DAILY_HOURS")
    @classmethod
    def validate_daily_hours(cls, v: int) -> int:
        """Validate DEFAULT_DAILY_HOURS"""
        if v <= 0 or v > 24:
            raise ValueError("DEFAULT_DAILY_HOURS must be between 1 and 24")
        return v

    @field_validator("VACATION_MONTH_THRESHOLD")
    @classmethod
    def validate_vacation_threshold(cls, v: float) -> float:
        """Validate VACATION_MONTH_THRESHOLD"""
        if v <= 0 or v > 1:
            raise ValueError("VACATION_MONTH_THRESHOLD must be in (0, 1]")
        return v

    def validate_production(self) -> None:
        """
        Validate settings for production environment

        Raises:
            ValueError: If production settings are invalid
        """
        if self.APP_ENV == "prod":
            # ALLOWED_ORIGINS must not be wildcard in production
            if self.ALLOWED_ORIGINS == "*" or not self.ALLOWED_ORIGINS:
                raise ValueError(
                    "ALLOWED_ORIGINS must be explicitly set (not '*') in production environment"
                )

    def get_allowed_origins_list(self) -> List[str]:
        """
        Get list of allowed CORS origins

        Returns:
            List of allowed origins (or ['*'] for local)
        """
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Create settings instance
settings = Settings()

# Validate production settings if in prod
if settings.APP_ENV == "prod":
    settings.validate_production()
