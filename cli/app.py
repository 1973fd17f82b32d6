"""
smafkit - Inspect Yamaha SMAF (.mmf) ring-tone containers.

A modern CLI tool for decoding SMAF headers, song information and track chunks.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.dump import dump
from cli.commands.extract import extract
from cli.commands.validate import validate
from smafkit import __version__

console = Console()

# Main app
app = typer.Typer(
    name="smafkit",
    help="Decode and inspect Yamaha SMAF (.mmf) files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="dump")(dump)
app.command(name="extract")(extract)
app.command(name="validate")(validate)


def configure_logging(debug: bool) -> None:
    """Route library log records through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]smafkit[/bold] version {__version__}")
    console.print("[dim]Decoder for Yamaha SMAF (.mmf) containers[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Log decoder progress"),
) -> None:
    """
    smafkit - Decode and inspect SMAF ring-tone containers.

    [bold]Quick Start:[/bold]

        smafkit info song.mmf           # Header, content info, song info
        smafkit info song.mmf --json    # Same as JSON

    [bold]Track Commands:[/bold]

        smafkit tracks song.mmf         # List MIDI and audio tracks
        smafkit dump song.mmf -k midi   # Hex dump of one payload
        smafkit extract song.mmf -o out # Write payloads to .bin files

    [bold]Utility Commands:[/bold]

        smafkit validate song.mmf       # Check declared sizes and counts

    Use --help with any command for more details.
    """
    configure_logging(debug)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
