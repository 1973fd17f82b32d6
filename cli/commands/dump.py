"""
Dump command - hex dump of a single track payload.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from cli.commands.tracks import parse_kind
from cli.display.hex_view import display_hex_dump
from cli.loader import load_container

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="SMAF file to dump"),
    kind: str = typer.Option("midi", "--kind", "-k", help="Track kind: midi or audio"),
    index: int = typer.Option(0, "--index", "-i", help="Track index within that kind"),
    length: int = typer.Option(0, "--length", "-l", help="Number of bytes (0=all)"),
    width: int = typer.Option(16, "--width", "-w", min=1, help="Bytes per line"),
) -> None:
    """
    Hex dump of one track payload.

    Examples:

        smafkit dump song.mmf

        smafkit dump song.mmf --kind audio --index 1 --length 256
    """
    track_kind = parse_kind(kind)
    _, container = load_container(file)

    selected = container.get_tracks(track_kind)
    if not 0 <= index < len(selected):
        console.print(
            f"[red]Error: No {track_kind.display_name} track at index {index} "
            f"({len(selected)} available)[/red]"
        )
        raise typer.Exit(1)

    track = selected[index]
    payload = track.payload if length <= 0 else track.payload[:length]

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Track:[/bold] {track}\n"
            f"[bold]Payload:[/bold] 0x{track.offset:06X} - 0x{track.end_offset:06X}",
            title="[bold]Track Dump[/bold]",
            border_style="blue",
        )
    )

    max_lines = (len(payload) + width - 1) // width
    display_hex_dump(
        payload,
        title=f"{track.kind.display_name} #{index}",
        start_offset=track.offset,
        bytes_per_line=width,
        max_lines=max(max_lines, 1),
    )


if __name__ == "__main__":
    app()
