"""
Service configuration from GOEXAMPLES_* environment variables.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GOEXAMPLES_", env_file=".env", extra="ignore")

    # JSON file of provider.go.* settings
    settings: str | None = None
    log_level: str = "INFO"


@lru_cache
def get_service_config() -> ServiceConfig:
    return ServiceConfig()
