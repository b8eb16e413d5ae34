# Copyright (c)
# SPDX-License-Identifier: MIT
"""
NUMERIC wire decoder.

Purpose:
    Parse one binary-format NUMERIC column value, as sent by the COPY/binary
    replication protocol, into a :data:`PgNumeric`.

Wire layout (all network order):
    ndigits  u16   number of base-10000 digit groups that follow
    weight   i16   weight of the first group, in base-10000 positions
    sign     u16   0x0000 positive, 0x4000 negative, 0xC000 NaN
    dscale   u16   declared digits after the decimal point
    digits   u16 * ndigits

Layer:
    domain/services

Notes:
    - The whole value, digit groups included, is read before the sign is
      inspected, so a truncated buffer is reported as such for every sign.
    - Bytes after the last digit group are not inspected.
    - ``dscale`` is not cross-checked against the digit groups; the producing
      server is trusted on that point.
"""

from __future__ import annotations

from typing import Final

from pg_replicate.domain.entities.pg_numeric import (
    PgNumeric,
    PgNumericNaN,
    PgNumericNegative,
    PgNumericPositive,
)
from pg_replicate.domain.exceptions.conversions import InvalidNumericSign
from pg_replicate.domain.services.byte_reader import ByteReader

__all__ = ["NUMERIC_NAN", "NUMERIC_NEG", "NUMERIC_POS", "decode_numeric"]

NUMERIC_POS: Final[int] = 0x0000
NUMERIC_NEG: Final[int] = 0x4000
NUMERIC_NAN: Final[int] = 0xC000


def decode_numeric(raw: bytes | bytearray | memoryview) -> PgNumeric:
    """Decode a binary NUMERIC value.

    Args:
        raw: Exactly one framed column value.

    Returns:
        The positive, negative or NaN variant.

    Raises:
        BufferTooShort: If the header or any declared digit group is missing.
        InvalidNumericSign: If the sign field is not a recognised marker.
        InvalidDigitGroup: If a digit group is 10000 or more.
    """
    reader = ByteReader(raw)
    ndigits = reader.read_u16()
    weight = reader.read_i16()
    sign = reader.read_u16()
    scale = reader.read_u16()
    digits = tuple(reader.read_u16() for _ in range(ndigits))

    if sign == NUMERIC_POS:
        return PgNumericPositive(weight=weight, scale=scale, digits=digits)
    if sign == NUMERIC_NEG:
        return PgNumericNegative(weight=weight, scale=scale, digits=digits)
    if sign == NUMERIC_NAN:
        return PgNumericNaN()
    raise InvalidNumericSign(sign)
