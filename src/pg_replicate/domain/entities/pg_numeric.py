# Copyright (c)
# SPDX-License-Identifier: MIT
"""PostgreSQL NUMERIC entities.

Purpose:
    In-memory form of one decoded NUMERIC column value, plus the exact decimal
    produced from it.

    ``PgNumeric`` is a closed union of three variants. Consumers dispatch over
    all three explicitly and close the dispatch with ``assert_never`` so a new
    or forgotten case is a type error rather than a silent fallthrough.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TypeAlias

from pg_replicate.domain.entities.base import BaseEntity
from pg_replicate.domain.exceptions.conversions import InvalidDigitGroup

__all__ = [
    "NBASE",
    "NumericValue",
    "PgNumeric",
    "PgNumericNaN",
    "PgNumericNegative",
    "PgNumericPositive",
]

# Radix of a single digit group.
NBASE = 10_000


def _validate_digits(digits: tuple[int, ...]) -> None:
    for index, group in enumerate(digits):
        if not 0 <= group < NBASE:
            raise InvalidDigitGroup(index=index, raw_value=group)


@dataclass(frozen=True, slots=True)
class PgNumericPositive(BaseEntity):
    """A non-negative NUMERIC value.

    Attributes:
        weight:
            Position of the first digit group relative to the decimal point,
            in base-10000 groups. Negative for magnitudes below 1.
        scale:
            Declared count of decimal digits after the point (metadata).
        digits:
            Base-10000 digit groups, most significant first.
    """

    weight: int
    scale: int
    digits: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _validate_digits(self.digits)


@dataclass(frozen=True, slots=True)
class PgNumericNegative(BaseEntity):
    """A negative NUMERIC value. Fields mirror :class:`PgNumericPositive`."""

    weight: int
    scale: int
    digits: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _validate_digits(self.digits)


@dataclass(frozen=True, slots=True)
class PgNumericNaN(BaseEntity):
    """The NUMERIC ``NaN`` marker. Carries no payload."""


PgNumeric: TypeAlias = PgNumericPositive | PgNumericNegative | PgNumericNaN


@dataclass(frozen=True, slots=True)
class NumericValue(BaseEntity):
    """Exact decimal converted from a finite NUMERIC.

    Attributes:
        value:
            The exact value. Never rounded to ``scale``.
        scale:
            Declared fractional-digit count carried through for sinks that
            need it.
    """

    value: Decimal
    scale: int

    def __str__(self) -> str:
        return str(self.value)
