"""Centralized configuration for fingerprint-index using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from FINGERPRINT_INDEX_* environment variables.

    None of these settings change what the index stores or returns. They only
    control input checks and the logging, metrics and tracing around it.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINGERPRINT_INDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON log lines")

    # Input checks
    validate_inputs: bool = Field(
        default=True,
        description="Reject fingerprints outside [0, 2**64) and negative document identifiers",
    )

    # Instrumentation
    metrics_enabled: bool = Field(default=True, description="Record Prometheus counters for index operations")
    tracing_enabled: bool = Field(default=False, description="Wrap ingestion in an OpenTelemetry span")
    log_progress_every: int = Field(
        default=0,
        ge=0,
        description="Log ingestion progress every N documents (0 disables progress lines)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
