"""Configuration models for avilist.

This module contains the configuration-related Pydantic models used by the CLI
and by callers that want the library to resolve its dataset directory from config.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from avilist.datasets.schema import VALID_VERSIONS


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool = False  # AVILIST_JSON_LOGS=true also enables JSON output
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "avilist"})


class AviListConfig(BaseModel):
    """Configuration settings for the avilist package."""

    config_version: str = "1.0.0"

    # Dataset
    data_dir: Path | None = None  # None = bundled package data
    default_version: str = "full"  # Table used when no --version is given

    # CLI output
    preview_rows: int = 10  # Rows printed by `avilist load`

    # Logging settings
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("default_version")
    @classmethod
    def validate_default_version(cls, v: str) -> str:
        """Validate the default dataset version."""
        if v not in VALID_VERSIONS:
            raise ValueError(
                f"Invalid default_version '{v}'. Must be one of: {', '.join(VALID_VERSIONS)}."
            )
        return v

    @field_validator("preview_rows")
    @classmethod
    def validate_preview_rows(cls, v: int) -> int:
        """Validate preview row count."""
        if v < 0:
            raise ValueError("preview_rows must be zero or positive.")
        return v
