"""
Byte cursor over an immutable SMAF buffer.

Provides the two primitives every chunk decoder is built on:

- fixed-field reads (big-endian unsigned integers and verbatim spans)
- signature scanning (linear search for the next occurrence of a tag)

A cursor is just a position index into a shared ``bytes`` object, so
"rewinding" is done by creating a fresh cursor rather than by seeking.
"""

import struct

from smafkit.utils.validation import FieldReadError


class ByteCursor:
    """
    Forward-only reader over an in-memory byte buffer.

    Example:
        cursor = ByteCursor(b"MMMD\\x00\\x00\\x00\\x08")
        cursor.scan(b"MMMD")     # True, position is now 4
        cursor.read_u32()        # 8
    """

    def __init__(self, data: bytes, position: int = 0):
        if not isinstance(data, bytes):
            data = bytes(data)
        if not 0 <= position <= len(data):
            raise ValueError(f"Position {position} outside buffer of {len(data)} bytes")

        self._data = data
        self._position = position

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._position}, size={len(self._data)})"

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._data) - self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._data)

    def fork(self) -> "ByteCursor":
        """Return an independent cursor at the same position."""
        return ByteCursor(self._data, self._position)

    def rewound(self) -> "ByteCursor":
        """Return a fresh cursor at offset 0 over the same buffer."""
        return ByteCursor(self._data, 0)

    # ------------------------------------------------------------------
    # Fixed-field reads
    # ------------------------------------------------------------------

    def read_bytes(self, length: int) -> bytes:
        """
        Read exactly ``length`` bytes and advance.

        Raises:
            FieldReadError: If fewer than ``length`` bytes remain. The
                cursor does not move in that case.
        """
        if length < 0:
            raise ValueError(f"Negative read length: {length}")
        if length > self.remaining:
            raise FieldReadError(self._position, length, self.remaining)

        start = self._position
        self._position += length
        return self._data[start : self._position]

    def _read_struct(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        return struct.unpack(fmt, self.read_bytes(size))[0]

    def read_u8(self) -> int:
        return self._read_struct(">B")

    def read_u16(self) -> int:
        """Read a big-endian 16-bit unsigned integer."""
        return self._read_struct(">H")

    def read_u32(self) -> int:
        """Read a big-endian 32-bit unsigned integer."""
        return self._read_struct(">I")

    # ------------------------------------------------------------------
    # Signature scanning
    # ------------------------------------------------------------------

    def scan(self, tag: bytes) -> bool:
        """
        Advance past the next occurrence of ``tag`` at or after the
        current position.

        Args:
            tag: Signature to look for (e.g. b"CNTI", b"MTR", b"ST")

        Returns:
            True with the cursor just past the tag, or False with the
            cursor at end of buffer.
        """
        if not tag:
            raise ValueError("Cannot scan for an empty tag")

        index = self._data.find(tag, self._position)
        if index == -1:
            self._position = len(self._data)
            return False

        self._position = index + len(tag)
        return True
