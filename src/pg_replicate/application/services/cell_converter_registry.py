# src/pg_replicate/application/services/cell_converter_registry.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Column converter registry.

Maps the declared type of a replicated column to the converter that handles
it. Converters are consulted in registration order; the first one whose
``accepts`` returns True wins.
"""

from __future__ import annotations

from typing import Any

from pg_replicate.application.interfaces.cell_converter import CellConverter
from pg_replicate.application.services.numeric_cell_converter import NumericCellConverter
from pg_replicate.config.settings import Settings
from pg_replicate.domain.enums.pg_type import PgType
from pg_replicate.domain.exceptions.conversions import UnsupportedColumnType

__all__ = ["CellConverterRegistry", "default_registry"]


class CellConverterRegistry:
    """Ordered collection of column converters."""

    def __init__(self, converters: list[CellConverter] | None = None) -> None:
        self._converters: list[CellConverter] = list(converters or [])

    def register(self, converter: CellConverter) -> None:
        """Append ``converter``; earlier registrations take precedence."""
        if not isinstance(converter, CellConverter):
            raise TypeError(f"{type(converter).__name__} does not implement CellConverter")
        self._converters.append(converter)

    def accepts(self, pg_type: PgType | int) -> bool:
        return any(c.accepts(pg_type) for c in self._converters)

    def converter_for(self, pg_type: PgType | int) -> CellConverter:
        """Return the first converter that accepts ``pg_type``.

        Raises:
            UnsupportedColumnType: If none does.
        """
        for converter in self._converters:
            if converter.accepts(pg_type):
                return converter
        raise UnsupportedColumnType(pg_type)

    def convert(self, pg_type: PgType | int, raw: bytes) -> Any:
        return self.converter_for(pg_type).convert(pg_type, raw)


def default_registry(settings: Settings | None = None) -> CellConverterRegistry:
    """Build a registry with the NUMERIC converter installed."""
    return CellConverterRegistry([NumericCellConverter(settings)])
