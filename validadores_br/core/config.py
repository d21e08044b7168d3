"""
Configuration module for Validadores BR
Centralized settings management
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Application Configuration
    APP_NAME: str = "Validadores BR"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(
        default="local",
        description="Current environment (local, development, production)"
    )
    DEBUG: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CEP lookup (ViaCEP)
    CEP_API_URL: str = Field(
        default="https://viacep.com.br/ws",
        description="Base URL of the ViaCEP web service"
    )
    CEP_TIMEOUT: int = Field(
        default=10,
        ge=1,
        description="Timeout in seconds for CEP lookups"
    )
    CEP_RAISE_EXCEPTIONS: bool = Field(
        default=False,
        description="Strict mode: raise typed errors instead of returning None"
    )

    # Legal process reference table (orgão -> tribunais/foros)
    LEGAL_PROCESS_TABLE_PATH: Optional[Path] = Field(
        default=None,
        description="Override for the bundled legal_process_ids.json"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v

    @field_validator("CEP_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    def is_production(self) -> bool:
        """Check if running in production"""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development"""
        return self.ENVIRONMENT.lower() in ["local", "development", "dev"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings instance (cached; call get_settings.cache_clear() to reload)"""
    return Settings()


# Global settings instance
settings = get_settings()
