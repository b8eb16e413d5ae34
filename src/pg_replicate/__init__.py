# Copyright (c)
# SPDX-License-Identifier: MIT
"""PostgreSQL NUMERIC binary codec for the replication pipeline.

Typical usage:
    registry = default_registry()
    value = registry.convert(PgType.NUMERIC, raw_bytes)
"""

from __future__ import annotations

from pg_replicate.application.services.cell_converter_registry import (
    CellConverterRegistry,
    default_registry,
)
from pg_replicate.application.services.numeric_cell_converter import NumericCellConverter
from pg_replicate.domain.entities.pg_numeric import (
    NumericValue,
    PgNumeric,
    PgNumericNaN,
    PgNumericNegative,
    PgNumericPositive,
)
from pg_replicate.domain.enums.pg_type import PgType
from pg_replicate.domain.services.numeric_converter import numeric_to_decimal
from pg_replicate.domain.services.numeric_decoder import decode_numeric

__version__ = "0.1.0"

__all__ = [
    "CellConverterRegistry",
    "NumericCellConverter",
    "NumericValue",
    "PgNumeric",
    "PgNumericNaN",
    "PgNumericNegative",
    "PgNumericPositive",
    "PgType",
    "decode_numeric",
    "default_registry",
    "numeric_to_decimal",
]
