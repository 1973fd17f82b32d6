"""
Tracks command - list MIDI and audio track chunks.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.hex_view import display_hex_dump
from cli.display.tables import display_tracks_table
from cli.loader import load_container
from smafkit.models.track import TrackKind

console = Console()
app = typer.Typer()

PREVIEW_BYTES = 32


def parse_kind(kind: Optional[str]) -> Optional[TrackKind]:
    """Map a --kind option value to a TrackKind, exiting on bad input."""
    if kind is None:
        return None
    try:
        return TrackKind(kind.lower())
    except ValueError:
        console.print(f"[red]Unknown track kind: {kind}[/red]")
        console.print("Available kinds: " + ", ".join(k.value for k in TrackKind))
        raise typer.Exit(1)


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="SMAF file to inspect"),
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="Only show midi or audio"),
    preview: bool = typer.Option(
        False, "--preview", "-p", help="Show the first bytes of each payload"
    ),
) -> None:
    """
    List the track chunks of a SMAF file.

    MIDI tracks (MTR) are listed first, then audio tracks (ATR), each in
    the order they appear in the file.

    Examples:

        smafkit tracks song.mmf

        smafkit tracks song.mmf --kind audio --preview
    """
    track_kind = parse_kind(kind)
    data, container = load_container(file)

    selected = container.tracks if track_kind is None else container.get_tracks(track_kind)
    display_tracks_table(selected, len(data))

    if preview:
        for track in selected:
            display_hex_dump(
                track.payload[:PREVIEW_BYTES],
                title=str(track),
                start_offset=track.offset,
            )


if __name__ == "__main__":
    app()
