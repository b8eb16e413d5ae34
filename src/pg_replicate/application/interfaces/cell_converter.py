# src/pg_replicate/application/interfaces/cell_converter.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application-level column converter interface.

Synopsis:
    Uniform surface through which the replication engine turns the raw bytes
    of one column value into a Python value. Each implementation handles a
    narrow set of declared column types and says so through :meth:`accepts`.

Layer:
    application/interfaces
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pg_replicate.domain.enums.pg_type import PgType


@runtime_checkable
class CellConverter(Protocol):
    """Converter for the binary form of one or more column types."""

    def accepts(self, pg_type: PgType | int) -> bool:
        """Return True if this converter handles ``pg_type``."""
        ...

    def convert(self, pg_type: PgType | int, raw: bytes) -> Any:
        """Convert one framed column value.

        Raises:
            UnsupportedColumnType: If ``pg_type`` is not accepted.
        """
        ...
