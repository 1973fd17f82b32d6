"""
Info command - display decoded container information.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_container
from cli.loader import load_container
from smafkit.models.container import Container

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="SMAF file to analyze (.mmf)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Display SMAF container information.

    Shows the decoded header and blocks:

    - Declared total size vs actual file size
    - Content info (CNTI) fields
    - Song title, author and copyright (OPDA)
    - MIDI and audio track chunks

    Examples:

        smafkit info song.mmf           # Tables
        smafkit info song.mmf --json    # JSON output
    """
    data, container = load_container(file)

    if json_output:
        _output_json(container, len(data))
    else:
        display_container(str(file), data, container)


def container_to_dict(container: Container, file_size: int) -> dict:
    """Convert a container to JSON-friendly data, payloads summarized."""
    content_info = None
    if container.content_info is not None:
        ci = container.content_info
        content_info = {
            "signature": ci.signature,
            "declared_size": ci.declared_size,
            "class": ci.class_,
            "file_type": ci.file_type,
            "code_type": ci.code_type,
            "status": ci.status,
            "track_count": ci.track_count,
        }

    metadata = None
    if container.metadata is not None:
        metadata = {
            "song_title": container.metadata.song_title,
            "author": container.metadata.author,
            "copyright": container.metadata.copyright,
        }

    def track_dict(track):
        return {
            "track_number": track.track_number,
            "kind": track.kind.value,
            "offset": track.offset,
            "size": track.size,
        }

    return {
        "file_size": file_size,
        "total_size": container.total_size,
        "content_info": content_info,
        "metadata": metadata,
        "midi_tracks": [track_dict(t) for t in container.midi_tracks],
        "audio_tracks": [track_dict(t) for t in container.audio_tracks],
    }


def _output_json(container: Container, file_size: int) -> None:
    """Output container as JSON."""
    console.print_json(data=container_to_dict(container, file_size))


if __name__ == "__main__":
    app()
