# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Column Conversion Domain Exceptions

Purpose:
    Failure kinds raised while decoding a binary column value or converting
    the decoded form into a Python value. Every failure is a deterministic
    function of the input bytes and is never retried by the codec.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class NumericConversionError(DomainError):
    """Base class for NUMERIC decode/convert failures."""

    code = "NUMERIC_CONVERSION_ERROR"


class BufferTooShort(NumericConversionError):
    """Fewer bytes remain in the buffer than the next field requires."""

    code = "BUFFER_TOO_SHORT"

    def __init__(self, *, needed: int, remaining: int, offset: int) -> None:
        super().__init__(
            f"buffer too short: needed {needed} byte(s) at offset {offset}, "
            f"{remaining} remaining",
            details={"needed": needed, "remaining": remaining, "offset": offset},
        )
        self.needed = needed
        self.remaining = remaining
        self.offset = offset


class InvalidNumericSign(NumericConversionError):
    """Sign field was not one of 0x0000, 0x4000, 0xC000."""

    code = "INVALID_NUMERIC_SIGN"

    def __init__(self, raw_value: int) -> None:
        super().__init__(
            f"sign for numeric field was not one of 0, 0x4000, 0xC000 (got {raw_value:#06x})",
            details={"raw_value": raw_value},
        )
        self.raw_value = raw_value


class InvalidDigitGroup(NumericConversionError):
    """A base-10000 digit group fell outside [0, 9999]."""

    code = "INVALID_DIGIT_GROUP"

    def __init__(self, *, index: int, raw_value: int) -> None:
        super().__init__(
            f"numeric digit group {index} out of range [0, 9999] (got {raw_value})",
            details={"index": index, "raw_value": raw_value},
        )
        self.index = index
        self.raw_value = raw_value


class UnsupportedNumericValue(NumericConversionError):
    """A valid wire value with no lossless ``Decimal`` equivalent (NaN)."""

    code = "UNSUPPORTED_NUMERIC_VALUE"

    def __init__(self, value: str = "NaN") -> None:
        super().__init__(
            f"{value} has no exact decimal representation",
            details={"value": value},
        )
        self.value = value


class UnsupportedColumnType(DomainError):
    """No registered converter accepts the declared column type."""

    code = "UNSUPPORTED_COLUMN_TYPE"

    def __init__(self, pg_type: int) -> None:
        super().__init__(
            f"no converter accepts column type {int(pg_type)}",
            details={"pg_type": int(pg_type)},
        )
        self.pg_type = int(pg_type)
