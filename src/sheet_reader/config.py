"""Configuration management for sheet_reader.

This module provides centralized configuration using pydantic-settings.
All configuration options can be set via environment variables with the
SHEET_READER_ prefix, or via a .env file in the working directory.

Environment Variables:
    SHEET_READER_HEADER_LINE: Default header line for new workbooks (default: 1)
    SHEET_READER_FILE_WARNING: File-type mismatch severity: error, warning
        or ignore (default: error)
    SHEET_READER_HEADER_SEARCH_LIMIT: Rows scanned before a header search
        gives up (default: 100)
    SHEET_READER_CSV_SEPARATOR: Default separator for CSV export (default: ,)
    SHEET_READER_LOG_LEVEL: Logging level (default: INFO)
    SHEET_READER_DEBUG: Enable debug mode (default: false)
"""

import logging
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FileWarning(str, Enum):
    """Severity applied when a file's extension does not match its loader."""

    ERROR = "error"
    WARNING = "warning"
    IGNORE = "ignore"


class Settings(BaseSettings):
    """Package settings loaded from environment variables.

    Example .env file:
        SHEET_READER_FILE_WARNING=warning
        SHEET_READER_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="SHEET_READER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Workbook Defaults
    # =========================================================================

    header_line: int = 1
    """Row treated as the header line until a header search moves it."""

    file_warning: FileWarning = FileWarning.ERROR
    """How a file-type mismatch at load time is reported."""

    header_search_limit: int = 100
    """Rows scanned without a qualifying header before giving up."""

    # =========================================================================
    # Export Settings
    # =========================================================================

    csv_separator: str = ","
    """Field separator used by CSV export when none is given."""

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL."""

    debug: bool = False

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return upper_v

    @field_validator("header_line", "header_search_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"value must be at least 1, got {v}")
        return v

    @field_validator("csv_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Validate the separator is a single character."""
        if len(v) != 1:
            raise ValueError(f"csv_separator must be a single character, got {v!r}")
        return v

    @property
    def log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level: int = getattr(logging, self.log_level)
        return level


class WorkbookOptions(BaseModel):
    """Options recognised when opening a workbook."""

    file_warning: FileWarning = Field(
        default=FileWarning.ERROR,
        description="Severity of a file-type mismatch",
    )
    header_line: int = Field(default=1, ge=1, description="Initial header line")

    @classmethod
    def from_settings(cls, s: Settings, **overrides: object) -> "WorkbookOptions":
        """Build options from settings, letting non-None overrides win."""
        values: dict[str, object] = {
            "file_warning": s.file_warning,
            "header_line": s.header_line,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)


# Create the global settings instance
settings = Settings()
