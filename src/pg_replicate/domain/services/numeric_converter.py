# Copyright (c)
# SPDX-License-Identifier: MIT
"""
NUMERIC to Decimal conversion.

Purpose:
    Turn a decoded :data:`PgNumeric` into an exact :class:`NumericValue`.

Algorithm:
    The digit groups are folded into one unbounded ``int`` as big-endian
    base-10000 digits. That integer gives the last group weight 0, while the
    first group actually sits at ``weight``, so the true value is the
    integer times ``10 ** (4 * (weight - ndigits + 1))``.

    The result is assembled from ``(sign, coefficient, exponent)`` directly.
    No ``decimal`` context arithmetic is involved, so the value is never
    rounded, however many digits it has.

Layer:
    domain/services
"""

from __future__ import annotations

from decimal import Decimal
from typing import assert_never

from pg_replicate.domain.entities.pg_numeric import (
    NBASE,
    NumericValue,
    PgNumeric,
    PgNumericNaN,
    PgNumericNegative,
    PgNumericPositive,
)
from pg_replicate.domain.exceptions.conversions import UnsupportedNumericValue

__all__ = ["accumulate_digits", "numeric_to_decimal"]

# Decimal digits per base-10000 group.
_DEC_DIGITS = 4


def accumulate_digits(digits: tuple[int, ...]) -> int:
    """Fold base-10000 groups, most significant first, into one integer."""
    total = 0
    for group in digits:
        total = total * NBASE + group
    return total


def numeric_to_decimal(numeric: PgNumeric) -> NumericValue:
    """Convert a decoded NUMERIC into an exact decimal.

    Args:
        numeric: Decoded wire value.

    Returns:
        The exact value with the declared scale attached as metadata.

    Raises:
        UnsupportedNumericValue: For ``NaN``, which has no exact decimal form.
    """
    if isinstance(numeric, PgNumericPositive):
        sign = 0
    elif isinstance(numeric, PgNumericNegative):
        sign = 1
    elif isinstance(numeric, PgNumericNaN):
        raise UnsupportedNumericValue("NaN")
    else:
        assert_never(numeric)

    magnitude = accumulate_digits(numeric.digits)
    if magnitude == 0:
        return NumericValue(value=Decimal(0), scale=numeric.scale)

    exponent = _DEC_DIGITS * (numeric.weight - len(numeric.digits) + 1)
    coefficient = Decimal(magnitude).as_tuple().digits
    return NumericValue(value=Decimal((sign, coefficient, exponent)), scale=numeric.scale)
