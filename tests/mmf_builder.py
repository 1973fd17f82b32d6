"""Helpers that assemble SMAF byte buffers for tests."""

import struct


def u16(value: int) -> bytes:
    return struct.pack(">H", value)


def u32(value: int) -> bytes:
    return struct.pack(">I", value)


def payload(size: int, fill: int = 0x55) -> bytes:
    """Filler payload that never contains a chunk tag."""
    return bytes([fill]) * size


def cnti(class_=0, file_type=0, code_type=0, status=0, counts=1, size=6) -> bytes:
    return b"CNTI" + u32(size) + bytes([class_, file_type, code_type, status, counts])


def opda_field(tag: bytes, text) -> bytes:
    raw = text.encode("utf-8") if isinstance(text, str) else text
    return tag + u16(len(raw)) + raw


def opda(*fields: bytes) -> bytes:
    body = b"".join(fields)
    return b"OPDA" + u32(len(body)) + body


def mtr(number: int, data: bytes) -> bytes:
    return b"MTR" + bytes([number]) + u32(len(data)) + data


def atr(number: int, data: bytes) -> bytes:
    return b"ATR" + bytes([number]) + u32(len(data)) + data


def build_mmf(*chunks: bytes, total_size=None) -> bytes:
    """Header followed by chunks; total size defaults to the chunk bytes."""
    body = b"".join(chunks)
    if total_size is None:
        total_size = len(body)
    return b"MMMD" + u32(total_size) + body
