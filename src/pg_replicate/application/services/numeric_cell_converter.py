# src/pg_replicate/application/services/numeric_cell_converter.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""NUMERIC column converter.

Purpose:
    Route NUMERIC columns through the wire decoder and decimal converter and
    report each outcome to logs and metrics.

Layer:
    application/services

Notes:
    - Failures are re-raised unchanged after being counted. Whether a failed
      value skips the row, becomes a sentinel or aborts the stream is the
      caller's decision.
"""

from __future__ import annotations

from pg_replicate.config.settings import Settings, get_settings
from pg_replicate.domain.entities.pg_numeric import NumericValue, PgNumeric, PgNumericNaN
from pg_replicate.domain.enums.pg_type import PgType
from pg_replicate.domain.exceptions.conversions import (
    NumericConversionError,
    UnsupportedColumnType,
)
from pg_replicate.domain.services.numeric_converter import numeric_to_decimal
from pg_replicate.domain.services.numeric_decoder import decode_numeric
from pg_replicate.infrastructure.logging.logger import get_json_logger
from pg_replicate.infrastructure.observability.metrics import (
    get_numeric_conversion_errors_total,
    get_numeric_conversions_total,
    get_numeric_digit_groups,
)

__all__ = ["NumericCellConverter"]

logger = get_json_logger(__name__)


class NumericCellConverter:
    """Converter for columns declared as NUMERIC."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def accepts(self, pg_type: PgType | int) -> bool:
        """Return True only for the NUMERIC type."""
        return pg_type == PgType.NUMERIC

    def from_sql(self, pg_type: PgType | int, raw: bytes) -> PgNumeric:
        """Decode ``raw`` into its wire representation.

        Raises:
            UnsupportedColumnType: If ``pg_type`` is not NUMERIC.
            NumericConversionError: If the bytes are malformed.
        """
        if not self.accepts(pg_type):
            raise UnsupportedColumnType(pg_type)
        return decode_numeric(raw)

    def convert(self, pg_type: PgType | int, raw: bytes) -> NumericValue:
        """Decode ``raw`` and convert it to an exact decimal.

        Raises:
            UnsupportedColumnType: If ``pg_type`` is not NUMERIC.
            NumericConversionError: If the bytes are malformed or encode NaN.
        """
        try:
            numeric = self.from_sql(pg_type, raw)
            value = numeric_to_decimal(numeric)
        except NumericConversionError as exc:
            logger.warning(
                "numeric.convert.failed",
                extra={"extra": {"code": exc.code, "details": exc.details, "size": len(raw)}},
            )
            self._record_error(exc.code)
            raise

        self._record_success(0 if isinstance(numeric, PgNumericNaN) else len(numeric.digits))
        logger.debug(
            "numeric.convert.success",
            extra={"extra": {"scale": value.scale, "size": len(raw)}},
        )
        return value

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _record_success(self, digit_groups: int) -> None:
        if not self._settings.metrics_enabled:
            return
        ns = self._settings.metrics_namespace
        get_numeric_conversions_total(ns).labels(result="success").inc()
        get_numeric_digit_groups(ns).observe(digit_groups)

    def _record_error(self, code: str) -> None:
        if not self._settings.metrics_enabled:
            return
        ns = self._settings.metrics_namespace
        get_numeric_conversions_total(ns).labels(result="error").inc()
        get_numeric_conversion_errors_total(ns).labels(reason=code).inc()
