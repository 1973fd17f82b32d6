"""
Error types and header validation for SMAF container data.
"""


class MMFDecodeError(Exception):
    """Raised when a SMAF container cannot be decoded."""

    pass


class HeaderNotFoundError(MMFDecodeError):
    """Raised when the buffer does not start with the "MMMD" magic."""

    pass


class FieldReadError(MMFDecodeError):
    """
    Raised when a fixed-size field runs past the end of the buffer.

    Attributes:
        offset: Cursor position where the read was attempted
        requested: Number of bytes the read needed
        available: Number of bytes left in the buffer
    """

    def __init__(self, offset: int, requested: int, available: int):
        super().__init__(
            f"Cannot read {requested} bytes at offset 0x{offset:X} "
            f"({available} remaining)"
        )
        self.offset = offset
        self.requested = requested
        self.available = available


MMF_MAGIC = b"MMMD"


def validate_mmf_header(data: bytes) -> bool:
    """
    Validate SMAF file header.

    Args:
        data: File data (at least 4 bytes)

    Returns:
        True if data starts with the "MMMD" magic
    """
    if len(data) < len(MMF_MAGIC):
        return False

    return data[: len(MMF_MAGIC)] == MMF_MAGIC
