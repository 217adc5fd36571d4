"""Sequential reading of fixed-size integers from a byte buffer."""

from __future__ import annotations

import enum
import struct
import sys


class ByteOrder(enum.Enum):
    """Byte order of the integers in a stream."""

    BIG_ENDIAN = ">"
    LITTLE_ENDIAN = "<"


class ReadPastEndError(EOFError):
    """Raised when a read needs more bytes than remain, and on every read after that."""


class DataStream:
    """Reads integers one after another from a byte buffer."""

    def __init__(self, data: bytes, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN) -> None:
        self._data = bytes(data)
        self._pos = 0
        self._failed = False
        self.byte_order = byte_order

    @staticmethod
    def system_byte_order() -> ByteOrder:
        return ByteOrder.LITTLE_ENDIAN if sys.byteorder == "little" else ByteOrder.BIG_ENDIAN

    @property
    def position(self) -> int:
        return self._pos

    @property
    def ok(self) -> bool:
        """False once a read has gone past the end."""
        return not self._failed

    def has(self, count: int) -> bool:
        return self._pos + count <= len(self._data)

    def at_end(self) -> bool:
        return self._pos == len(self._data)

    def _read(self, code: str) -> int:
        fmt = self.byte_order.value + code
        size = struct.calcsize(fmt)
        if self._failed or not self.has(size):
            self._failed = True
            raise ReadPastEndError(
                f"cannot read {size} bytes at offset {self._pos} of {len(self._data)}"
            )
        (value,) = struct.unpack_from(fmt, self._data, self._pos)
        self._pos += size
        return value

    def read_int8(self) -> int:
        return self._read("b")

    def read_int16(self) -> int:
        return self._read("h")

    def read_int32(self) -> int:
        return self._read("i")

    def read_uint8(self) -> int:
        return self._read("B")

    def read_uint16(self) -> int:
        return self._read("H")

    def read_uint32(self) -> int:
        return self._read("I")