# Copyright (c)
# SPDX-License-Identifier: MIT
"""Sequential big-endian reader over a byte buffer.

Layer:
    domain/services
"""

from __future__ import annotations

import struct
from typing import Final

from pg_replicate.domain.exceptions.conversions import BufferTooShort

__all__ = ["ByteReader"]

_U16: Final = struct.Struct(">H")
_I16: Final = struct.Struct(">h")


class ByteReader:
    """Read fixed-width network-order integers, advancing a cursor.

    A reader walks one buffer once. A failed read raises
    :class:`BufferTooShort` and leaves the cursor where it was.
    """

    __slots__ = ("_buf", "_offset")

    def __init__(self, buffer: bytes | bytearray | memoryview) -> None:
        self._buf = memoryview(buffer).cast("B")
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._buf) - self._offset

    def read_u16(self) -> int:
        """Consume two bytes as an unsigned 16-bit integer."""
        return self._unpack(_U16)

    def read_i16(self) -> int:
        """Consume two bytes as a signed 16-bit integer."""
        return self._unpack(_I16)

    def _unpack(self, fmt: struct.Struct) -> int:
        if self.remaining < fmt.size:
            raise BufferTooShort(needed=fmt.size, remaining=self.remaining, offset=self._offset)
        (value,) = fmt.unpack_from(self._buf, self._offset)
        self._offset += fmt.size
        return int(value)
