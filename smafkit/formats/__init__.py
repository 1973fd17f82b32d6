"""Format handlers for SMAF containers."""

from smafkit.formats.mmf import MMFParser, MMFReader, decode

__all__ = ["MMFParser", "MMFReader", "decode"]
