"""
Track chunk model for SMAF containers.
"""

from dataclasses import dataclass, field
from enum import Enum


class TrackKind(Enum):
    """
    Track chunk kinds.

    SMAF stores score (MIDI-like sequence) tracks and audio sample
    tracks in separately tagged chunks.
    """

    MIDI = "midi"
    AUDIO = "audio"

    @property
    def tag(self) -> bytes:
        """Chunk signature that introduces tracks of this kind."""
        return TRACK_TAGS[self]

    @property
    def display_name(self) -> str:
        return "MIDI" if self is TrackKind.MIDI else "Audio"


TRACK_TAGS = {
    TrackKind.MIDI: b"MTR",
    TrackKind.AUDIO: b"ATR",
}


@dataclass(frozen=True)
class TrackChunk:
    """
    A single MIDI or audio track chunk.

    The payload is kept verbatim; smafkit does not interpret it.

    Attributes:
        track_number: Track number byte following the tag
        kind: MIDI or audio
        payload: Exactly the declared number of payload bytes
        offset: Buffer offset where the payload starts
    """

    track_number: int
    kind: TrackKind
    payload: bytes = field(repr=False)
    offset: int = 0

    @property
    def size(self) -> int:
        """Declared payload size (always equal to the payload length)."""
        return len(self.payload)

    @property
    def end_offset(self) -> int:
        return self.offset + self.size

    def __str__(self) -> str:
        return f"{self.kind.display_name} track {self.track_number} ({self.size} bytes)"
