# src/pg_replicate/config/settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Codec Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the column codec. The decode path itself
    is pure and takes no configuration; settings only govern the ambient
    concerns around it (log level, metrics recording).

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown keys.
    - Explicit field declarations with validation aliases per env var.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed codec configuration.

    Infrastructure reads the process environment through this object; the
    domain layer never does.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level applied by configure_root_logging().",
        validation_alias="LOG_LEVEL",
    )

    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus counters for every NUMERIC conversion.",
        validation_alias="METRICS_ENABLED",
    )

    metrics_namespace: str = Field(
        default="pg_replicate",
        pattern=r"^[a-z_][a-z0-9_]*$",
        description="Prefix for all collector names.",
        validation_alias="METRICS_NAMESPACE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        """Upper-case and validate the log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("settings.invalid")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    logger.info(
        "settings.initialized",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "log_level": settings.log_level,
                "metrics_enabled": settings.metrics_enabled,
                "metrics_namespace": settings.metrics_namespace,
            }
        },
    )
    return settings
