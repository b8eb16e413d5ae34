# Copyright (c)
# SPDX-License-Identifier: MIT
"""
PostgreSQL column type identifiers.

Purpose:
    Name the built-in type OIDs that the replication stream declares for each
    column. Converters decide whether they apply by comparing against these.

Layer:
    domain

Notes:
    - Raw integer OIDs compare equal to the members, so callers holding the
      OID straight off the wire can pass it unchanged.
"""

from __future__ import annotations

from enum import IntEnum


class PgType(IntEnum):
    """Built-in PostgreSQL type OIDs seen in replicated relations."""

    BOOL = 16
    INT8 = 20
    INT2 = 21
    INT4 = 23
    TEXT = 25
    FLOAT4 = 700
    FLOAT8 = 701
    VARCHAR = 1043
    DATE = 1082
    TIMESTAMP = 1114
    TIMESTAMPTZ = 1184
    NUMERIC = 1700
    UUID = 2950
    JSONB = 3802
