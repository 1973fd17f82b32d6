"""SMAF (.mmf) format handlers."""

from smafkit.formats.mmf.binary_parser import MMFParser, decode
from smafkit.formats.mmf.cursor import ByteCursor
from smafkit.formats.mmf.reader import MMFReader

__all__ = ["ByteCursor", "MMFParser", "MMFReader", "decode"]
