"""Application configuration management using Pydantic Settings.

This module defines the `Settings` class, which loads configuration parameters
from environment variables and a `.env` file. It centralizes the tunable
parameters of the command-line converter: logging level, JSON output layout and
batch failure behavior.

The transformers themselves take no configuration; vocabulary identifiers are
fixed interchange constants (see `transformers.vocabularies`).

The `get_settings` function provides a cached, singleton instance of the
configuration, ensuring consistent settings throughout the application.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict


class Settings(BaseSettings):
    """Defines all application configuration parameters.

    This class uses `pydantic-settings` to automatically load values from
    environment variables or a `.env` file.
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # ---------------- Output -----------------
    OUTPUT_INDENT: int = Field(
        default=2,
        description="Indentation for JSON output (0 = compact single line)",
    )
    OUTPUT_EXCLUDE_NONE: bool = Field(
        default=True,
        description="Omit unset optional FHIR elements from JSON output",
    )

    # ---------------- Batch behavior -----------------
    FAIL_FAST: bool = Field(
        default=True,
        description=(
            "If true, abort on the first item that fails validation or conversion. "
            "If false, log the failure, skip the item and continue."
        ),
    )
    # Use Any type to prevent Pydantic Settings JSON decoding; validator converts to list[str]
    THING_TYPES: Any = Field(
        default_factory=list,
        description=(
            "Optional comma-separated list of item type names (or type ids) the "
            "converter accepts, e.g. THING_TYPES=exercise. Empty list (default) "
            "means every registered type is accepted."
        ),
    )

    @field_validator("THING_TYPES", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: str | list[str]) -> list[str]:
        """Parse comma-separated string into list of stripped, lowercased strings.

        Supports both direct list input (from code/tests) and comma-separated
        string input (from environment variables). Empty strings result in
        empty list.
        """
        if isinstance(v, list):
            return [s.strip().lower() for s in v if s.strip()]
        if isinstance(v, str):
            if not v.strip():
                return []
            return [s.strip().lower() for s in v.split(",") if s.strip()]
        return []

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "INFO"

    @field_validator("OUTPUT_INDENT")
    @classmethod
    def non_negative_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("OUTPUT_INDENT must be >= 0")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover - trivial
    """Return a cached, singleton instance of the application settings."""
    return Settings()
