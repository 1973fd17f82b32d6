"""
Shared file loading for CLI commands.
"""

from pathlib import Path
from typing import Tuple

import typer
from rich.console import Console

from smafkit.formats.mmf.binary_parser import MMFParser
from smafkit.models.container import Container
from smafkit.utils.validation import HeaderNotFoundError, MMFDecodeError

console = Console()


def load_container(file: Path) -> Tuple[bytes, Container]:
    """
    Read and decode a .mmf file, exiting with status 1 on failure.

    Returns:
        Tuple of (raw file bytes, decoded container)
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    try:
        container = MMFParser().parse_bytes(data)
    except HeaderNotFoundError:
        console.print(f"[red]Error: Not a SMAF file (no MMMD header): {file}[/red]")
        raise typer.Exit(1)
    except MMFDecodeError as exc:
        console.print(f"[red]Error: Cannot decode {file}: {exc}[/red]")
        raise typer.Exit(1)

    return data, container
