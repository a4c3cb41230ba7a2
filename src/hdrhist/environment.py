# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for hdrhist.

Settings are grouped by concern and read from ``HDRHIST_<GROUP>_<FIELD>``
environment variables (or a local ``.env`` file)::

    from hdrhist.environment import Environment

    Environment.HISTOGRAM.PRECISION_BITS  # HDRHIST_HISTOGRAM_PRECISION_BITS
    Environment.LOGGING.LEVEL             # HDRHIST_LOGGING_LEVEL
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hdrhist.constants import (
    DEFAULT_PRECISION_BITS,
    LOG_LEVELS,
    MAX_PRECISION_BITS,
    MIN_PRECISION_BITS,
)


class _HistogramSettings(BaseSettings):
    """Defaults used when constructing histograms from the command line."""

    model_config = SettingsConfigDict(
        env_prefix="HDRHIST_HISTOGRAM_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    PRECISION_BITS: int = Field(
        default=DEFAULT_PRECISION_BITS,
        ge=MIN_PRECISION_BITS,
        le=MAX_PRECISION_BITS,
        description="Number of sub-bucket precision bits (P) for new histograms",
    )


class _LoggingSettings(BaseSettings):
    """Logging configuration for the command line."""

    model_config = SettingsConfigDict(
        env_prefix="HDRHIST_LOGGING_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LEVEL: str = Field(
        default="WARNING",
        description="Root log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    RICH_TRACEBACKS: bool = Field(
        default=True,
        description="Render exception tracebacks with Rich",
    )

    @field_validator("LEVEL")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return value


class _Environment(BaseModel):
    """Root settings object exposing each settings group as an attribute."""

    HISTOGRAM: _HistogramSettings = Field(default_factory=_HistogramSettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)


def load_environment() -> _Environment:
    """Build a fresh settings object from the current process environment."""
    return _Environment()


Environment = load_environment()
