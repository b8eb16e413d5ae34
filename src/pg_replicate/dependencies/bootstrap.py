# src/pg_replicate/dependencies/bootstrap.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Codec bootstrap for the replication worker.

Configuration is read from Settings, logging is configured once, and the
worker receives a ready converter registry. Sibling converters for other
column types are registered by the caller on the returned registry.
"""

from __future__ import annotations

from pg_replicate.application.services.cell_converter_registry import (
    CellConverterRegistry,
    default_registry,
)
from pg_replicate.config.settings import Settings, get_settings
from pg_replicate.infrastructure.logging.logger import configure_root_logging, get_json_logger

logger = get_json_logger(__name__)


def bootstrap(settings: Settings | None = None) -> CellConverterRegistry:
    """Configure logging and build the default converter registry.

    Args:
        settings: Explicit settings; resolved via :func:`get_settings` when omitted.

    Returns:
        Registry with the NUMERIC converter installed.
    """
    settings = settings or get_settings()
    configure_root_logging(settings.log_level)
    registry = default_registry(settings)
    logger.info(
        "bootstrap.ready",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "metrics_enabled": settings.metrics_enabled,
            }
        },
    )
    return registry
