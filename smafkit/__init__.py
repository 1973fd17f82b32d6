"""
smafkit - Decoder for Yamaha SMAF (.mmf) ring-tone containers.

This library provides tools to:
- Decode the SMAF header, content info (CNTI) and optional data (OPDA)
- Collect MIDI (MTR) and audio (ATR) track chunks with their raw payloads
- Inspect and extract track payloads from the command line

Example usage:
    from smafkit import MMFReader, decode

    # Decode from disk
    container = MMFReader.read("MachineWoman.mmf")

    # Or from bytes already in memory
    container = decode(data)
    for track in container.midi_tracks:
        print(track.track_number, track.size)
"""

__version__ = "0.1.0"
__author__ = "smafkit Contributors"

from smafkit.formats.mmf.binary_parser import MMFParser, decode
from smafkit.formats.mmf.reader import MMFReader
from smafkit.models.container import Container, ContentInfo, Metadata
from smafkit.models.track import TrackChunk, TrackKind
from smafkit.utils.validation import FieldReadError, HeaderNotFoundError, MMFDecodeError

__all__ = [
    "decode",
    "MMFParser",
    "MMFReader",
    "Container",
    "ContentInfo",
    "Metadata",
    "TrackChunk",
    "TrackKind",
    "MMFDecodeError",
    "HeaderNotFoundError",
    "FieldReadError",
]
