# src/swapwatch/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Every option has a default, so importing the package never requires an
environment; values can be overridden with environment variables or a .env
file.

Files that USE this module:
- swapwatch.app (loads settings for logging and the refresh)
- swapwatch.adapters.providers.thornode (endpoint URLs and HTTP timeout)
- swapwatch.adapters.formatting.formatter (explorer URL for tx links)
- swapwatch.adapters.formatting.style (WidgetStyle.from_settings)

Files that this module USES:
- swapwatch.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from swapwatch.shared.validators import (
    validate_base_url,  # Validate http/https URLs
    validate_color,  # Validate style colours
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Indexing node ---
    thornode_url: str = Field(
        default="https://thornode.ninerealms.com/thorchain", alias="THORNODE_URL"
    )
    explorer_tx_url: str = Field(default="https://thorchain.net/tx/", alias="EXPLORER_TX_URL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Scheduling (read by the host; the core is called on demand) ---
    refresh_interval_seconds: int = Field(default=10, alias="REFRESH_INTERVAL_SECONDS", ge=1)

    # --- Projection ---
    block_time_seconds: int = Field(default=6, alias="BLOCK_TIME_SECONDS", ge=1)

    # --- Widget style ---
    style_title_font: str = Field(default="inherit", alias="STYLE_TITLE_FONT")
    style_body_font: str = Field(default="inherit", alias="STYLE_BODY_FONT")
    style_detail_font: str = Field(default="inherit", alias="STYLE_DETAIL_FONT")
    style_primary_text: str = Field(default="inherit", alias="STYLE_PRIMARY_TEXT")
    style_secondary_text: str = Field(default="#666", alias="STYLE_SECONDARY_TEXT")
    style_corner_radius: str = Field(default="8px", alias="STYLE_CORNER_RADIUS")
    style_percent_decimals: int = Field(default=1, alias="STYLE_PERCENT_DECIMALS", ge=0, le=8)
    style_amount_decimals: int = Field(default=4, alias="STYLE_AMOUNT_DECIMALS", ge=0, le=8)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="SWAPWATCH_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def POOLS_URL(self) -> str:
        """Pool snapshot endpoint."""
        return f"{self.thornode_url.rstrip('/')}/pools"

    @property
    def STREAMING_SWAPS_URL(self) -> str:
        """Streaming swap snapshot endpoint."""
        return f"{self.thornode_url.rstrip('/')}/swaps/streaming"

    @property
    def TX_STATUS_URL(self) -> str:
        """Per-transaction status endpoint prefix (append the tx id)."""
        return f"{self.thornode_url.rstrip('/')}/tx/status/"

    @field_validator("thornode_url", "explorer_tx_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        if not validate_base_url(v):
            raise ValueError(f"Invalid URL: {v!r}")
        return v

    @field_validator("style_primary_text", "style_secondary_text")
    @classmethod
    def validate_style_color(cls, v: str) -> str:
        """Validate style colour format."""
        if not validate_color(v):
            raise ValueError(f"Invalid colour: {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level


# Global settings instance
settings = Settings()
