"""
Extract command - write track payloads to separate files.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from cli.commands.tracks import parse_kind
from cli.display.formatters import format_size
from cli.loader import load_container
from smafkit.models.track import TrackChunk, TrackKind

console = Console()
app = typer.Typer()


def payload_filename(stem: str, track: TrackChunk, index: int) -> str:
    """Name like "song_midi_00_trk1.bin" for the index-th track of its kind."""
    return f"{stem}_{track.kind.value}_{index:02d}_trk{track.track_number}.bin"


@app.command()
def extract(
    source: Path = typer.Argument(..., help="SMAF file to extract from"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory (default: next to source)"
    ),
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="Only extract midi or audio"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List every written file"),
) -> None:
    """
    Extract raw MIDI and audio track payloads.

    Each payload is written verbatim to its own .bin file.

    Examples:

        smafkit extract song.mmf

        smafkit extract song.mmf -o payloads/ --kind audio
    """
    track_kind = parse_kind(kind)
    _, container = load_container(source)

    output_dir = output or source.parent
    kinds = [track_kind] if track_kind else list(TrackKind)
    selected = [
        (track, index) for k in kinds for index, track in enumerate(container.get_tracks(k))
    ]

    if not selected:
        console.print(f"[yellow]No track chunks to extract in {source}[/yellow]")
        return

    written = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Extracting payloads...", total=len(selected))

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for track, index in selected:
                path = output_dir / payload_filename(source.stem, track, index)
                with open(path, "wb") as f:
                    f.write(track.payload)
                written.append((path, track))
                progress.advance(task)
        except OSError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    if verbose:
        for path, track in written:
            console.print(f"  {path}  [dim]{format_size(track.size)}[/dim]")

    console.print(f"[green]Extracted:[/green] {len(written)} payloads -> {output_dir}")


if __name__ == "__main__":
    app()
