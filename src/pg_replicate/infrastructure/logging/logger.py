# src/pg_replicate/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory that produce JSON logs suitable for ingestion by log pipelines.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Enrichment with ``pipeline_id`` and ``table`` via contextvars, so every
      conversion failure can be traced back to the relation that produced it.
    * Fallback enrichment via record attributes.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_pipeline_id",
    "get_table",
    "set_pipeline_context",
]

# Per-worker correlation context (task-local via contextvars).
_PIPELINE_ID_CTX: ContextVar[str | None] = ContextVar("pg_replicate_pipeline_id", default=None)
_TABLE_CTX: ContextVar[str | None] = ContextVar("pg_replicate_table", default=None)


def set_pipeline_context(*, pipeline_id: str | None = None, table: str | None = None) -> None:
    """Set correlation identifiers on the current context.

    Args:
        pipeline_id: Identifier of the replication pipeline being served.
        table: Qualified name of the relation whose rows are being converted.

    Notes:
        Additive: passing only one argument updates that value and leaves the
        other unchanged.
    """
    if pipeline_id is not None:
        _PIPELINE_ID_CTX.set(pipeline_id)
    if table is not None:
        _TABLE_CTX.set(table)


def get_pipeline_id() -> str | None:
    """Return the current pipeline id from contextvars, if any."""
    return _PIPELINE_ID_CTX.get(None)


def get_table() -> str | None:
    """Return the current table name from contextvars, if any."""
    return _TABLE_CTX.get(None)


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        ts = datetime.now(tz=UTC).isoformat()
        payload: dict[str, Any] = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Record attribute wins over the contextvar.
        pid: str | None = getattr(record, "pipeline_id", None) or _PIPELINE_ID_CTX.get(None)
        if pid:
            payload["pipeline_id"] = pid
        table: str | None = getattr(record, "table", None) or _TABLE_CTX.get(None)
        if table:
            payload["table"] = table

        # Exceptions: guard against None in exc_info tuple.
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    root.setLevel(resolved)

    if root.handlers:
        # Already configured; avoid duplicate handlers.
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup for global defaults.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
