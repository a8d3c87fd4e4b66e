"""
Configuration Management
Environment-based configuration for the backend gateway
"""

from typing import List, Optional
from urllib.parse import urlsplit

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sigo_gateway.utils.logger import get_logger
from sigo_gateway.utils.tls_policy import is_production_environment

logger = get_logger(__name__)

DEFAULT_BACKEND_URL = "https://localhost:7241/api"


class Settings(BaseSettings):
    """Gateway settings, resolved once at process start"""

    # Service info
    service_name: str = "sigo-gateway"
    service_version: str = "1.0.0"
    port: int = 3000

    # Backend
    backend_url: str = Field(
        default=DEFAULT_BACKEND_URL,
        validation_alias=AliasChoices("backend_url", "SIGO_BACKEND_URL", "NEXT_PUBLIC_BACKEND_URL"),
    )
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = "default"
    logging_config_path: Optional[str] = None

    # CORS
    cors_allowed_origins: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("backend_url")
    @classmethod
    def strip_trailing_slashes(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        parsed = urlsplit(v) if "://" in v else None
        if parsed is None or not parsed.netloc:
            # Kept as-is; URL building falls back to string handling
            logger.warning("Backend URL is not an absolute URL", backend_url=v)
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in ("default", "detailed", "json"):
            raise ValueError("LOG_FORMAT must be one of: default, detailed, json")
        return v

    @property
    def is_production(self) -> bool:
        return is_production_environment(self.environment)

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    def log_config(self):
        """Log configuration"""
        logger.info(
            "Configuration loaded",
            backend_url=self.backend_url,
            environment=self.environment,
            cors_origins=self.cors_origins,
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
