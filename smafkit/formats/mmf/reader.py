"""
SMAF .mmf file reader.

Loads .mmf files from disk and hands their bytes to the container parser.
"""

from pathlib import Path
from typing import Union

from smafkit.formats.mmf.binary_parser import MMFParser
from smafkit.models.container import Container
from smafkit.utils.validation import HeaderNotFoundError, MMFDecodeError, validate_mmf_header


class MMFReader:
    """
    Reader for SMAF container files.

    Example:
        container = MMFReader.read("MachineWoman.mmf")
        print(f"Title: {container.song_title}, MIDI tracks: {len(container.midi_tracks)}")
    """

    def __init__(self):
        self.parser = MMFParser()
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Container:
        """
        Read a .mmf file and return its Container.

        Args:
            filepath: Path to .mmf file

        Returns:
            Decoded Container
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Container:
        """
        Parse a .mmf file.

        Args:
            filepath: Path to .mmf file

        Returns:
            Decoded Container
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            self._raw_data = f.read()

        return self.parse_bytes(self._raw_data)

    def parse_bytes(self, data: bytes) -> Container:
        self._raw_data = data
        return self.parser.parse_bytes(data)

    @property
    def raw_data(self) -> bytes:
        return self._raw_data

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a SMAF container.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with the "MMMD" magic
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(len(MMFParser.HEADER_MAGIC))
        except OSError:
            return False

        return validate_mmf_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a .mmf file.

        Args:
            filepath: Path to .mmf file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": validate_mmf_header(data),
            "size": len(data),
        }

        if len(data) >= 4:
            info["header"] = data[:4].decode("ascii", errors="replace")

        try:
            container = MMFParser().parse_bytes(data)
        except HeaderNotFoundError:
            return info
        except MMFDecodeError as exc:
            info["error"] = str(exc)
            return info

        info["total_size"] = container.total_size
        info["song_title"] = container.song_title
        info["midi_tracks"] = len(container.midi_tracks)
        info["audio_tracks"] = len(container.audio_tracks)

        return info
