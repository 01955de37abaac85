"""Application settings using Pydantic."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from funfood.domain.value_objects.fee_schedule import DeliveryFeeSchedule


class ApiSettings(BaseSettings):
    """Backend API settings."""
    model_config = SettingsConfigDict(env_prefix="API_")

    base_url: str = "http://localhost:3000/api"
    timeout: float = 10.0
    retry_attempts: int = 3


class StorageSettings(BaseSettings):
    """Session storage settings."""
    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    type: Literal["memory", "file"] = "file"
    path: Path = Path("./data/session.json")


class PaginationSettings(BaseSettings):
    """List query settings."""
    model_config = SettingsConfigDict(env_prefix="PAGINATION_")

    default_limit: int = Field(default=10, gt=0)


class DeliverySettings(BaseSettings):
    """Delivery fee schedule, amounts in VND."""
    model_config = SettingsConfigDict(env_prefix="DELIVERY_")

    base_fee: int = 15000
    per_km_fee: int = 5000
    extra_per_km_fee: int = 7000
    max_free_distance: float = 2.0
    standard_distance: float = 5.0

    def to_schedule(self) -> DeliveryFeeSchedule:
        """Build the domain fee schedule."""
        return DeliveryFeeSchedule(
            base_fee=self.base_fee,
            per_km_fee=self.per_km_fee,
            extra_per_km_fee=self.extra_per_km_fee,
            free_distance=self.max_free_distance,
            standard_distance=self.standard_distance,
        )


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_enabled: bool = True
    console_colored: bool = True


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application info
    app_name: str = "FunFood"
    app_version: str = "1.0.0"
    debug: bool = False

    # Sub-settings
    api: ApiSettings = Field(default_factory=ApiSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    delivery: DeliverySettings = Field(default_factory=DeliverySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def get_api_config(self) -> dict[str, Any]:
        """Get API client configuration as dictionary."""
        return {
            "base_url": self.api.base_url,
            "timeout": self.api.timeout,
            "retry_attempts": self.api.retry_attempts,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
