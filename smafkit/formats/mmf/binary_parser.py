"""
SMAF (.mmf) container binary parser.

Decodes a complete SMAF file held in memory into a Container.

SMAF file layout (big-endian throughout):
    Offset  Size    Description
    0x000   4       Magic "MMMD"
    0x004   4       Total size (informational)
    [scan]  "CNTI"  4 bytes chunk length, then class, file type,
                    code type, status, counts (1 byte each)
    [scan]  "OPDA"  4 bytes block size, then a sub-buffer holding any of
                    "ST" / "CA" / "CR" + 2 bytes length + UTF-8 text
    [scan]  "MTR"   1 byte track number, 4 bytes size, payload (repeated)
    (rewind to 0x000)
    [scan]  "ATR"   1 byte track number, 4 bytes size, payload (repeated)

There is no chunk directory, so every block after the header is located
by signature scanning. Content info and metadata are best-effort: a
field that cannot be read is left empty instead of failing the decode.
"""

import logging
from typing import Callable, List, Optional, TypeVar

from smafkit.formats.mmf.cursor import ByteCursor
from smafkit.models.container import Container, ContentInfo, Metadata
from smafkit.models.track import TrackChunk, TrackKind
from smafkit.utils.validation import FieldReadError, HeaderNotFoundError, MMFDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_optional(cursor: ByteCursor, read: Callable[[ByteCursor], T], name: str) -> Optional[T]:
    """Run one field read, returning None if the buffer runs out."""
    try:
        return read(cursor)
    except FieldReadError as exc:
        logger.warning("Could not read %s: %s", name, exc)
        return None


class MMFParser:
    """
    Parser for SMAF container files.

    Example:
        parser = MMFParser()
        container = parser.parse_bytes(data)
        print(container.metadata.song_title)
    """

    HEADER_MAGIC = b"MMMD"
    CONTENT_INFO_TAG = b"CNTI"
    OPTIONAL_DATA_TAG = b"OPDA"

    # OPDA sub-tags; "A0" is reserved and not decoded
    METADATA_TAGS = {
        "song_title": b"ST",
        "author": b"CA",
        "copyright": b"CR",
    }

    def __init__(self):
        self.data: bytes = b""
        self.container: Optional[Container] = None
        # Offset the MIDI pass started from, after the optional blocks
        self.midi_start: int = 0

    def parse_file(self, filepath: str) -> Container:
        """
        Parse a SMAF file.

        Args:
            filepath: Path to .mmf file

        Returns:
            Decoded Container
        """
        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Container:
        """
        Parse SMAF data from bytes.

        Args:
            data: Complete file contents

        Returns:
            Decoded Container

        Raises:
            HeaderNotFoundError: If the buffer does not start with "MMMD"
            MMFDecodeError: If the total size field cannot be read
        """
        self.data = bytes(data)
        self.container = None
        self.midi_start = 0

        cursor = ByteCursor(self.data)
        total_size = self._read_header(cursor)

        content_info = None
        lookahead = cursor.fork()
        if lookahead.scan(self.CONTENT_INFO_TAG):
            cursor = lookahead
            content_info = self._read_content_info(cursor)
        else:
            logger.debug("No CNTI chunk found")

        metadata = None
        lookahead = cursor.fork()
        if lookahead.scan(self.OPTIONAL_DATA_TAG):
            cursor = lookahead
            metadata = self._read_metadata(cursor)
        else:
            logger.debug("No OPDA block found")

        self.midi_start = cursor.position
        midi_tracks = self._collect_tracks(cursor, TrackKind.MIDI)
        audio_tracks = self._collect_tracks(cursor.rewound(), TrackKind.AUDIO)

        self.container = Container(
            total_size=total_size,
            content_info=content_info,
            metadata=metadata,
            midi_tracks=tuple(midi_tracks),
            audio_tracks=tuple(audio_tracks),
        )
        return self.container

    def _read_header(self, cursor: ByteCursor) -> int:
        """Verify the magic and return the declared total size."""
        try:
            magic = cursor.read_bytes(len(self.HEADER_MAGIC))
        except FieldReadError:
            raise HeaderNotFoundError(
                f"SMAF header not found: only {len(self.data)} bytes of data"
            ) from None

        if magic != self.HEADER_MAGIC:
            raise HeaderNotFoundError(f"SMAF header not found: got {magic!r}")

        try:
            total_size = cursor.read_u32()
        except FieldReadError as exc:
            raise MMFDecodeError(f"Cannot read SMAF total size: {exc}") from exc

        logger.debug("SMAF header OK, total size %d (buffer %d)", total_size, len(self.data))
        return total_size

    def _read_content_info(self, cursor: ByteCursor) -> ContentInfo:
        """Decode the fixed CNTI fields that follow the tag."""
        declared_size = _read_optional(cursor, ByteCursor.read_u32, "CNTI size")
        class_ = _read_optional(cursor, ByteCursor.read_u8, "CNTI class")
        file_type = _read_optional(cursor, ByteCursor.read_u8, "CNTI file type")
        code_type = _read_optional(cursor, ByteCursor.read_u8, "CNTI code type")
        status = _read_optional(cursor, ByteCursor.read_u8, "CNTI status")
        track_count = _read_optional(cursor, ByteCursor.read_u8, "CNTI counts")

        info = ContentInfo(
            signature=self.CONTENT_INFO_TAG.decode("ascii"),
            declared_size=declared_size,
            class_=class_,
            file_type=file_type,
            code_type=code_type,
            status=status,
            track_count=track_count,
        )

        logger.debug("CNTI chunk: %s", info)
        return info

    def _read_metadata(self, cursor: ByteCursor) -> Optional[Metadata]:
        """
        Decode the OPDA block.

        The block's sub-buffer is cut out of the stream first; each sub-tag
        is then searched for from the start of that sub-buffer.
        """
        try:
            block_size = cursor.read_u32()
            block = cursor.read_bytes(block_size)
        except FieldReadError as exc:
            logger.warning("Unreadable OPDA block: %s", exc)
            return None

        fields = {name: self._read_metadata_text(block, tag) for name, tag in self.METADATA_TAGS.items()}
        metadata = Metadata(raw=block, **fields)

        logger.debug("OPDA block (%d bytes): %s", block_size, metadata)
        return metadata

    def _read_metadata_text(self, block: bytes, tag: bytes) -> Optional[str]:
        sub_cursor = ByteCursor(block)
        if not sub_cursor.scan(tag):
            return None

        try:
            length = sub_cursor.read_u16()
            raw = sub_cursor.read_bytes(length)
        except FieldReadError as exc:
            logger.warning("Truncated OPDA %s field: %s", tag.decode("ascii"), exc)
            return None

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("OPDA %s field is not valid UTF-8", tag.decode("ascii"))
            return None

    def _collect_tracks(self, cursor: ByteCursor, kind: TrackKind) -> List[TrackChunk]:
        """
        Collect every track chunk of one kind from the cursor to the end.

        Collection ends when the tag is no longer found, or when a track's
        header or payload runs past the end of the buffer.
        """
        tracks: List[TrackChunk] = []

        while cursor.scan(kind.tag):
            try:
                track_number = cursor.read_u8()
                size = cursor.read_u32()
                offset = cursor.position
                payload = cursor.read_bytes(size)
            except FieldReadError as exc:
                logger.warning(
                    "Truncated %s track after %d tracks: %s", kind.display_name, len(tracks), exc
                )
                break

            tracks.append(
                TrackChunk(track_number=track_number, kind=kind, payload=payload, offset=offset)
            )

        logger.debug("Collected %d %s tracks", len(tracks), kind.display_name)
        return tracks


def decode(data: bytes) -> Container:
    """
    Decode a complete SMAF container held in memory.

    Args:
        data: Raw file contents

    Returns:
        Decoded Container

    Raises:
        HeaderNotFoundError: If the "MMMD" magic is missing
        MMFDecodeError: If the header's size field cannot be read
    """
    return MMFParser().parse_bytes(data)
