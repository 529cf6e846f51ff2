"""
Settings - Feed, Display and Logging Options

One pydantic-settings model for the feed location, the base currency, the
display precision, the default chart currency and the LOG_* options.
Values come from environment variables or an optional .env file.

Files that USE this module:
- eurofx.app (loads settings for logging and the feed provider)
- eurofx.adapters.providers.ecb (feed URL and HTTP timeout)
- eurofx.application.exchange_app (base currency, display precision, alert text)

Files that this module USES:
- eurofx.shared.validators (validation functions for settings)
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from eurofx.shared.validators import normalize_currency_code

ECB_90D_FEED_URL = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-hist-90d.xml"


class Settings(BaseSettings):
    """EuroFX options; field aliases are the environment variable names."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # --- Feed ---
    feed_url: str = Field(default=ECB_90D_FEED_URL, alias="FEED_URL")
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    
    # --- Rates ---
    base_currency: str = Field(default="EUR", alias="BASE_CURRENCY")
    display_decimals: int = Field(default=3, alias="DISPLAY_DECIMALS", ge=0, le=10)
    default_chart_currency: str = Field(default="USD", alias="DEFAULT_CHART_CURRENCY")
    
    # --- Views ---
    alert_text: str = Field(default="Successful data refresh!", alias="ALERT_TEXT")
    
    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="EUROFX_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    @field_validator("base_currency", "default_chart_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Normalise and validate currency codes."""
        return normalize_currency_code(v)
    
    @field_validator("feed_url")
    @classmethod
    def validate_feed_url(cls, v: str) -> str:
        """Only http(s) feeds are supported."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("FEED_URL must be an http(s) URL")
        return v


# Global settings instance
settings = Settings()
