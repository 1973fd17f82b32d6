"""Tests for the smafkit command-line interface."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from typer.testing import CliRunner

from cli.app import app
from cli.commands.extract import payload_filename
from cli.commands.validate import MMFValidator
from mmf_builder import atr, build_mmf, cnti, mtr, opda, opda_field, payload, u32
from smafkit import decode

runner = CliRunner()


class TestInfoCommand:
    """Test cases for `smafkit info`."""

    def test_info(self, mmf_file):
        """Test table output."""
        result = runner.invoke(app, ["info", str(mmf_file)])

        assert result.exit_code == 0
        assert "Machine Woman" in result.output
        assert "SMAF Container Info" in result.output

    def test_info_json(self, mmf_file, full_data):
        """Test JSON output."""
        result = runner.invoke(app, ["info", str(mmf_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["file_size"] == len(full_data)
        assert data["metadata"]["author"] == "SMAF MA-3 Sample Data"
        assert data["content_info"]["track_count"] == 3
        assert [t["size"] for t in data["midi_tracks"]] == [636, 443]
        assert data["audio_tracks"][0]["kind"] == "audio"

    def test_info_missing_file(self, tmp_path):
        """Test a missing file exits with status 1."""
        result = runner.invoke(app, ["info", str(tmp_path / "missing.mmf")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_info_not_smaf(self, not_mmf_file):
        """Test a non-SMAF file exits with status 1."""
        result = runner.invoke(app, ["info", str(not_mmf_file)])

        assert result.exit_code == 1
        assert "Not a SMAF file" in result.output


class TestTrackCommands:
    """Test cases for `smafkit tracks`, `dump` and `extract`."""

    def test_tracks(self, mmf_file):
        """Test listing all tracks."""
        result = runner.invoke(app, ["tracks", str(mmf_file)])

        assert result.exit_code == 0
        assert "MIDI" in result.output
        assert "Audio" in result.output

    def test_tracks_bad_kind(self, mmf_file):
        """Test an unknown --kind value."""
        result = runner.invoke(app, ["tracks", str(mmf_file), "--kind", "video"])

        assert result.exit_code == 1
        assert "Unknown track kind" in result.output

    def test_dump(self, mmf_file):
        """Test hex dump of an audio payload."""
        result = runner.invoke(
            app, ["dump", str(mmf_file), "--kind", "audio", "--length", "16"]
        )

        assert result.exit_code == 0
        assert "77 77 77 77" in result.output

    def test_dump_bad_index(self, mmf_file):
        """Test asking for a track that does not exist."""
        result = runner.invoke(app, ["dump", str(mmf_file), "--index", "5"])

        assert result.exit_code == 1
        assert "No MIDI track at index 5" in result.output

    def test_dump_zero_width_rejected(self, mmf_file):
        """Test --width 0 is a usage error rather than a crash."""
        result = runner.invoke(app, ["dump", str(mmf_file), "--width", "0"])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ZeroDivisionError)

    def test_extract(self, mmf_file, tmp_path, full_data):
        """Test writing every payload to disk."""
        out_dir = tmp_path / "out"
        result = runner.invoke(app, ["extract", str(mmf_file), "-o", str(out_dir)])

        assert result.exit_code == 0
        written = sorted(p.name for p in out_dir.iterdir())
        assert written == [
            "MachineWoman_audio_00_trk0.bin",
            "MachineWoman_midi_00_trk0.bin",
            "MachineWoman_midi_01_trk1.bin",
        ]
        container = decode(full_data)
        assert (out_dir / "MachineWoman_midi_01_trk1.bin").read_bytes() == container.midi_tracks[
            1
        ].payload

    def test_extract_kind_filter(self, mmf_file, tmp_path):
        """Test extracting only audio payloads."""
        out_dir = tmp_path / "audio"
        result = runner.invoke(
            app, ["extract", str(mmf_file), "-o", str(out_dir), "--kind", "audio"]
        )

        assert result.exit_code == 0
        assert [p.name for p in out_dir.iterdir()] == ["MachineWoman_audio_00_trk0.bin"]

    def test_payload_filename(self, full_data):
        """Test the naming scheme for extracted payloads."""
        track = decode(full_data).midi_tracks[1]

        assert payload_filename("song", track, 1) == "song_midi_01_trk1.bin"


class TestValidateCommand:
    """Test cases for `smafkit validate`."""

    def test_valid_file(self, mmf_file):
        """Test a consistent file passes strict validation."""
        result = runner.invoke(app, ["validate", str(mmf_file), "--strict"])

        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_not_smaf(self, not_mmf_file):
        """Test a file without the header is invalid."""
        result = runner.invoke(app, ["validate", str(not_mmf_file)])

        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_size_and_count_warnings(self, single_track_data):
        """Test declared size and CNTI counts are checked."""
        data = single_track_data[:-100]
        validator = MMFValidator(data, "cut.mmf")
        result = validator.validate()

        assert result.valid
        areas = [issue.area for issue in result.warnings]
        assert "Total Size" in areas
        assert "Tracks" in areas
        assert "MIDI" in areas

    def test_midi_tag_before_metadata_not_flagged(self):
        """Test an MTR chunk ahead of OPDA is outside the MIDI pass and not reported."""
        data = build_mmf(mtr(0, payload(8)), opda(opda_field(b"ST", "Song")))
        result = MMFValidator(data, "early.mmf").validate()

        assert decode(data).midi_tracks == ()
        assert "MIDI" not in [issue.area for issue in result.warnings]

    def test_cross_kind_warning(self):
        """Test tracks found inside the other kind's payload are flagged."""
        fake_header = b"MTR" + bytes([5]) + u32(2) + b"zz"
        data = build_mmf(cnti(counts=2), mtr(0, payload(4)), atr(0, fake_header))
        result = MMFValidator(data, "ambiguous.mmf").validate()

        messages = [issue.message for issue in result.warnings]
        assert any("MIDI track 5" in m and "Audio track 0" in m for m in messages)


class TestAppCommands:
    """Test cases for top-level options."""

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "smafkit" in result.output

    def test_debug_flag(self, mmf_file):
        """Test that --debug does not change command results."""
        result = runner.invoke(app, ["--debug", "tracks", str(mmf_file)])

        assert result.exit_code == 0
