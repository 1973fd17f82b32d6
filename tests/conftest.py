"""Test configuration and fixtures."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from mmf_builder import build_mmf, cnti, mtr, atr, opda, opda_field, payload

SONG_TITLE = "Machine Woman"
AUTHOR = "SMAF MA-3 Sample Data"
COPYRIGHT = "Copyright(c) 2002-2004 YAMAHA CORPORATION"


@pytest.fixture
def header_only_data():
    """Return a container holding only the magic and total size."""
    return build_mmf(total_size=0)


@pytest.fixture
def single_track_data():
    """Return the single-MIDI-track container with content info."""
    return build_mmf(cnti(counts=1), mtr(0, payload(7242)), total_size=7408)


@pytest.fixture
def full_data():
    """Return a container with every block type."""
    return build_mmf(
        cnti(class_=0x00, file_type=0x01, code_type=0x02, status=0x03, counts=3),
        opda(
            opda_field(b"ST", SONG_TITLE),
            opda_field(b"CA", AUTHOR),
            opda_field(b"CR", COPYRIGHT),
        ),
        mtr(0, payload(636)),
        mtr(1, payload(443, fill=0x66)),
        atr(0, payload(128, fill=0x77)),
    )


@pytest.fixture
def mmf_file(tmp_path, full_data):
    """Return path to a complete .mmf file."""
    path = tmp_path / "MachineWoman.mmf"
    path.write_bytes(full_data)
    return path


@pytest.fixture
def not_mmf_file(tmp_path):
    """Return path to a file without the SMAF header."""
    path = tmp_path / "song.mid"
    path.write_bytes(b"MThd" + bytes(10))
    return path
