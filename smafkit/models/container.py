"""
Container data model for decoded SMAF files.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from smafkit.models.track import TrackChunk, TrackKind


@dataclass(frozen=True)
class ContentInfo:
    """
    Content info ("CNTI") chunk.

    Every field is read independently; a field that could not be read
    from the buffer is left as None.

    Attributes:
        signature: Chunk tag this block was found under
        declared_size: Chunk length as stored (not checked against the data)
        class_: Content class byte
        file_type: File type byte
        code_type: Character code type byte
        status: Copy status byte
        track_count: Counts byte
    """

    signature: str = "CNTI"
    declared_size: Optional[int] = None
    class_: Optional[int] = None
    file_type: Optional[int] = None
    code_type: Optional[int] = None
    status: Optional[int] = None
    track_count: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        """True when every field was read from the buffer."""
        return None not in (
            self.declared_size,
            self.class_,
            self.file_type,
            self.code_type,
            self.status,
            self.track_count,
        )


@dataclass(frozen=True)
class Metadata:
    """
    Optional data ("OPDA") block with human-readable song information.

    Attributes:
        song_title: Text under the "ST" sub-tag
        author: Text under the "CA" sub-tag
        copyright: Text under the "CR" sub-tag
        raw: The whole OPDA sub-buffer as stored
    """

    song_title: Optional[str] = None
    author: Optional[str] = None
    copyright: Optional[str] = None

    raw: bytes = field(default=b"", repr=False)

    @property
    def is_empty(self) -> bool:
        return self.song_title is None and self.author is None and self.copyright is None


@dataclass(frozen=True)
class Container:
    """
    Fully decoded SMAF container.

    Attributes:
        total_size: Size field from the file header (informational only)
        content_info: CNTI chunk, if present
        metadata: OPDA block, if present
        midi_tracks: MIDI track chunks in scan order
        audio_tracks: Audio track chunks in scan order
    """

    total_size: int
    content_info: Optional[ContentInfo] = None
    metadata: Optional[Metadata] = None
    midi_tracks: Tuple[TrackChunk, ...] = ()
    audio_tracks: Tuple[TrackChunk, ...] = ()

    @property
    def tracks(self) -> Tuple[TrackChunk, ...]:
        """All track chunks, MIDI first."""
        return self.midi_tracks + self.audio_tracks

    @property
    def is_sparse(self) -> bool:
        """True when the file carries nothing beyond its header."""
        return self.content_info is None and self.metadata is None and not self.tracks

    def get_tracks(self, kind: TrackKind) -> Tuple[TrackChunk, ...]:
        if kind is TrackKind.MIDI:
            return self.midi_tracks
        return self.audio_tracks

    @property
    def song_title(self) -> Optional[str]:
        return self.metadata.song_title if self.metadata else None
