"""Tests for the byte cursor (fixed-field reads and signature scanning)."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from smafkit.formats.mmf.cursor import ByteCursor
from smafkit.utils.validation import FieldReadError, MMFDecodeError


class TestFixedFieldReads:
    """Test cases for big-endian field reads."""

    def test_read_integers_big_endian(self):
        """Test u8, u16 and u32 reads in sequence."""
        cursor = ByteCursor(bytes([0x7F, 0x12, 0x34, 0x00, 0x00, 0x1C, 0xF0]))

        assert cursor.read_u8() == 0x7F
        assert cursor.read_u16() == 0x1234
        assert cursor.read_u32() == 7408
        assert cursor.at_end

    def test_read_bytes_advances(self):
        """Test verbatim span reads."""
        cursor = ByteCursor(b"abcdef")

        assert cursor.read_bytes(2) == b"ab"
        assert cursor.position == 2
        assert cursor.read_bytes(0) == b""
        assert cursor.remaining == 4

    def test_short_read_raises_without_moving(self):
        """Test that a read past the end fails and leaves the cursor alone."""
        cursor = ByteCursor(b"\x00\x01\x02")
        cursor.read_u8()

        with pytest.raises(FieldReadError) as excinfo:
            cursor.read_u32()

        assert excinfo.value.offset == 1
        assert excinfo.value.requested == 4
        assert excinfo.value.available == 2
        assert cursor.position == 1
        assert cursor.read_u16() == 0x0102

    def test_field_read_error_is_decode_error(self):
        """Test that short reads belong to the decode error family."""
        with pytest.raises(MMFDecodeError):
            ByteCursor(b"").read_u8()

    def test_invalid_position_rejected(self):
        """Test constructing a cursor beyond the buffer."""
        with pytest.raises(ValueError):
            ByteCursor(b"abc", position=4)


class TestSignatureScan:
    """Test cases for tag scanning."""

    def test_scan_positions_after_tag(self):
        """Test that a match leaves the cursor just past the tag."""
        cursor = ByteCursor(b"\x00\x00CNTI\x01")

        assert cursor.scan(b"CNTI") is True
        assert cursor.position == 6
        assert cursor.read_u8() == 1

    def test_scan_miss_exhausts_stream(self):
        """Test that a miss consumes the stream to its end."""
        cursor = ByteCursor(b"no tags here")

        assert cursor.scan(b"OPDA") is False
        assert cursor.at_end

    def test_scan_finds_first_occurrence(self):
        """Test repeated scans walk forward through occurrences."""
        cursor = ByteCursor(b"ST1-ST2")

        assert cursor.scan(b"ST")
        assert cursor.read_bytes(1) == b"1"
        assert cursor.scan(b"ST")
        assert cursor.read_bytes(1) == b"2"
        assert cursor.scan(b"ST") is False

    def test_scan_with_overlapping_prefix(self):
        """Test that a partial match does not hide the real tag."""
        cursor = ByteCursor(b"MMMMD")

        assert cursor.scan(b"MMMD")
        assert cursor.position == 5

    def test_scan_does_not_backtrack(self):
        """Test that scanning starts at the current position."""
        cursor = ByteCursor(b"MTR\x00MTR", position=1)

        assert cursor.scan(b"MTR")
        assert cursor.position == 7

    def test_scan_large_buffer(self):
        """Test a tag at the end of a multi-megabyte buffer."""
        data = bytes(4_000_000) + b"MTR" + b"\x05"
        cursor = ByteCursor(data)

        assert cursor.scan(b"MTR")
        assert cursor.position == 4_000_003
        assert cursor.read_u8() == 5
        assert cursor.scan(b"MTR") is False
        assert cursor.at_end

    def test_scan_empty_tag_rejected(self):
        """Test that an empty tag is an error."""
        with pytest.raises(ValueError):
            ByteCursor(b"abc").scan(b"")


class TestCursorCopies:
    """Test cases for forked and rewound cursors."""

    def test_fork_is_independent(self):
        """Test that a fork does not move the original."""
        cursor = ByteCursor(b"abcdef", position=2)
        fork = cursor.fork()

        assert fork.scan(b"zz") is False
        assert cursor.position == 2
        assert fork.data is cursor.data

    def test_rewound_starts_at_zero(self):
        """Test that rewinding gives a fresh cursor at the origin."""
        cursor = ByteCursor(b"abcdef")
        cursor.read_bytes(5)
        rewound = cursor.rewound()

        assert rewound.position == 0
        assert cursor.position == 5
        assert rewound.read_bytes(3) == b"abc"

    def test_accepts_bytearray(self):
        """Test that mutable input is copied to an immutable buffer."""
        source = bytearray(b"MMMD")
        cursor = ByteCursor(source)
        source[0] = 0

        assert cursor.read_bytes(4) == b"MMMD"
