# src/pg_replicate/infrastructure/observability/metrics.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Prometheus metrics for column conversions (registry-aware).

Collectors are returned by accessor functions that bind to the **current**
``prometheus_client.REGISTRY``:

- Safe under tests that swap the default registry.
- No duplicate-registration errors when accessors are called repeatedly.
- Cache automatically resets when the active registry changes.

Example:
    get_numeric_conversions_total().labels(result="success").inc()
    get_numeric_digit_groups().observe(3)
"""

from __future__ import annotations

import logging
import threading
from contextlib import suppress
from typing import Final

import prometheus_client as prom
from prometheus_client import Counter, Histogram

_log = logging.getLogger(__name__)

DEFAULT_NAMESPACE: Final[str] = "pg_replicate"

# Digit-group counts; a NUMERIC may carry up to 16383 groups after the point.
_DIGIT_GROUP_BUCKETS: Final[tuple[float, ...]] = (0, 1, 2, 4, 8, 16, 32, 64, 256, 1024, 16384)

# Cache keyed by metric name within the currently-active registry.
_registry_id: int | None = None
_hist_cache: dict[str, Histogram] = {}
_counter_cache: dict[str, Counter] = {}
_lock = threading.RLock()


def _ensure_registry() -> None:
    """Reset caches if the active registry changed."""
    global _registry_id
    with _lock:
        rid = id(prom.REGISTRY)
        if _registry_id != rid:
            _hist_cache.clear()
            _counter_cache.clear()
            _registry_id = rid


def _lookup_existing(name: str, kind: type[Counter] | type[Histogram]) -> Counter | Histogram | None:
    """Return a collector of ``kind`` already registered under ``name``."""
    with _lock, suppress(Exception):
        mapping = getattr(prom.REGISTRY, "_names_to_collectors", None)
        if isinstance(mapping, dict):
            col = mapping.get(name)
            if isinstance(col, kind):
                return col
    return None


def _get_or_create_hist(
    name: str,
    help_text: str,
    *,
    buckets: tuple[float, ...],
    labelnames: tuple[str, ...] = (),
) -> Histogram:
    """Get or create a registry-bound ``Histogram`` with stable identity.

    Strategy:
    1. Return from module cache if present for the active registry.
    2. If the registry already has a collector by this name, reuse it.
    3. Otherwise, register a new collector on the active registry.

    Args:
        name: Metric name (snake_case).
        help_text: Human-readable description.
        buckets: Histogram buckets.
        labelnames: Optional label names tuple.

    Returns:
        Histogram: Bound to ``prom.REGISTRY``.
    """
    _ensure_registry()
    with _lock:
        cached = _hist_cache.get(name)
        if cached is not None:
            return cached

        existing = _lookup_existing(name, Histogram)
        if isinstance(existing, Histogram):
            _hist_cache[name] = existing
            return existing

        try:
            h = Histogram(name, help_text, labelnames, buckets=buckets, registry=prom.REGISTRY)
        except ValueError:
            _log.exception("metrics.register_failed", extra={"extra": {"metric": name}})
            raise
        _hist_cache[name] = h
        return h


def _get_or_create_counter(
    name: str,
    help_text: str,
    *,
    labelnames: tuple[str, ...] = (),
) -> Counter:
    """Get or create a registry-bound ``Counter`` with stable identity.

    Args:
        name: Metric name (snake_case, without the ``_total`` suffix).
        help_text: Human-readable description.
        labelnames: Optional label names tuple.

    Returns:
        Counter: Bound to ``prom.REGISTRY``.
    """
    _ensure_registry()
    with _lock:
        cached = _counter_cache.get(name)
        if cached is not None:
            return cached

        existing = _lookup_existing(name, Counter)
        if isinstance(existing, Counter):
            _counter_cache[name] = existing
            return existing

        try:
            c = Counter(name, help_text, labelnames, registry=prom.REGISTRY)
        except ValueError:
            _log.exception("metrics.register_failed", extra={"extra": {"metric": name}})
            raise
        _counter_cache[name] = c
        return c


def get_numeric_conversions_total(namespace: str = DEFAULT_NAMESPACE) -> Counter:
    """Return counter for NUMERIC conversions.

    Labels:
        result: One of ``success|error``.

    Returns:
        Counter: Labelled collector.
    """
    return _get_or_create_counter(
        f"{namespace}_numeric_conversions",
        "NUMERIC column values converted, by outcome",
        labelnames=("result",),
    )


def get_numeric_conversion_errors_total(namespace: str = DEFAULT_NAMESPACE) -> Counter:
    """Return counter for NUMERIC conversion failures.

    Labels:
        reason: Error ``code`` (e.g. ``BUFFER_TOO_SHORT``).

    Returns:
        Counter: Labelled collector.
    """
    return _get_or_create_counter(
        f"{namespace}_numeric_conversion_errors",
        "NUMERIC conversion failures, by error code",
        labelnames=("reason",),
    )


def get_numeric_digit_groups(namespace: str = DEFAULT_NAMESPACE) -> Histogram:
    """Return histogram of base-10000 digit groups per decoded value."""
    return _get_or_create_hist(
        f"{namespace}_numeric_digit_groups",
        "Base-10000 digit groups per decoded NUMERIC value",
        buckets=_DIGIT_GROUP_BUCKETS,
    )
