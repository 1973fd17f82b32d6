"""
Rich table displays for SMAF container information.
"""

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from smafkit.models.container import Container, ContentInfo, Metadata
from smafkit.models.track import TrackChunk
from cli.display.formatters import (
    format_byte_field,
    format_size,
    format_text_field,
    value_bar,
)

console = Console()


def display_file_info(filepath: str, data: bytes, container: Container) -> None:
    """Display the header overview panel."""
    status = "[green]Sparse[/green]" if container.is_sparse else "[green]Valid[/green]"

    header_content = f"""[bold]File:[/bold] {filepath}
[bold]Format:[/bold] SMAF (MMMD)
[bold]Status:[/bold] {status}
[bold]File Size:[/bold] {format_size(len(data))}
[bold]Declared Size:[/bold] {format_size(container.total_size)}
[bold]MIDI Tracks:[/bold] {len(container.midi_tracks)}
[bold]Audio Tracks:[/bold] {len(container.audio_tracks)}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]SMAF Container Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_content_info(info: ContentInfo) -> None:
    """Display the CNTI chunk fields."""
    table = Table(title="Content Info (CNTI)", box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan", width=16)
    table.add_column("Value", width=24)

    table.add_row("Chunk Size", "-" if info.declared_size is None else str(info.declared_size))
    table.add_row("Class", format_byte_field(info.class_))
    table.add_row("File Type", format_byte_field(info.file_type))
    table.add_row("Code Type", format_byte_field(info.code_type))
    table.add_row("Status", format_byte_field(info.status))
    table.add_row("Counts", format_byte_field(info.track_count))

    console.print(table)


def display_metadata(metadata: Metadata) -> None:
    """Display the OPDA song information."""
    table = Table(title="Optional Data (OPDA)", box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan", width=16)
    table.add_column("Value", width=50)

    table.add_row("Song Title", format_text_field(metadata.song_title))
    table.add_row("Author", format_text_field(metadata.author))
    table.add_row("Copyright", format_text_field(metadata.copyright))
    table.add_row("Block Size", f"{len(metadata.raw)} bytes")

    console.print(table)


def display_tracks_table(tracks: Sequence[TrackChunk], file_size: int, title: str = "Tracks") -> None:
    """Display a summary row per track chunk."""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold green")
    table.add_column("#", style="dim", width=3)
    table.add_column("Kind", style="cyan", width=6)
    table.add_column("Track", width=6)
    table.add_column("Offset", style="dim", width=10)
    table.add_column("Size", width=10)
    table.add_column("Share of File", width=20)

    for index, track in enumerate(tracks):
        table.add_row(
            str(index),
            track.kind.display_name,
            str(track.track_number),
            f"0x{track.offset:06X}",
            str(track.size),
            value_bar(track.size, max_value=file_size, width=12),
        )

    if not tracks:
        table.add_row("-", "[dim]none[/dim]", "", "", "", "")

    console.print(table)


def display_container(filepath: str, data: bytes, container: Container) -> None:
    """Display every decoded block of a container."""
    display_file_info(filepath, data, container)

    if container.content_info is not None:
        display_content_info(container.content_info)
    else:
        console.print("[dim]No CNTI chunk[/dim]")

    if container.metadata is not None:
        display_metadata(container.metadata)
    else:
        console.print("[dim]No OPDA block[/dim]")

    display_tracks_table(container.tracks, len(data))
