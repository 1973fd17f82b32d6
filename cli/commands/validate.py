"""
Validate command - check SMAF container consistency.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from smafkit.formats.mmf.binary_parser import MMFParser
from smafkit.models.container import Container
from smafkit.models.track import TrackKind
from smafkit.utils.validation import HeaderNotFoundError, MMFDecodeError

console = Console()
app = typer.Typer()

# Magic + total size field
HEADER_SIZE = 8
# Tag + track number + payload size
TRACK_HEADER_SIZE = 3 + 1 + 4


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a SMAF file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class MMFValidator:
    """Validate SMAF container structure against its declared fields."""

    def __init__(self, data: bytes, filepath: str):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []
        self.parser = MMFParser()
        self.container: Optional[Container] = None

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        try:
            self.container = self.parser.parse_bytes(self.data)
        except HeaderNotFoundError as exc:
            self._add_issue("error", "Header", 0, str(exc))
        except MMFDecodeError as exc:
            self._add_issue("error", "Header", 4, str(exc))
        else:
            self._add_issue("info", "Header", 0, "MMMD magic present")
            self._validate_total_size()
            self._validate_content_info()
            self._validate_metadata()
            self._validate_tracks()
            self._validate_truncation()
            self._validate_cross_kind_tags()

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        """Add a validation issue."""
        self.issues.append(
            ValidationIssue(severity=severity, area=area, offset=offset, message=message)
        )

    def _validate_total_size(self) -> None:
        """Declared size should cover everything after the 8-byte header."""
        actual = len(self.data) - HEADER_SIZE
        declared = self.container.total_size
        if declared != actual:
            self._add_issue(
                "warning",
                "Total Size",
                4,
                f"Header declares {declared} bytes, file holds {actual} after the header",
            )
        else:
            self._add_issue("info", "Total Size", 4, f"Matches file ({declared} bytes)")

    def _validate_content_info(self) -> None:
        info = self.container.content_info
        if info is None:
            self._add_issue("warning", "CNTI", 0, "No content info chunk")
        elif not info.is_complete:
            self._add_issue("warning", "CNTI", 0, "Content info chunk is truncated")
        else:
            self._add_issue("info", "CNTI", 0, "Content info chunk complete")

    def _validate_metadata(self) -> None:
        metadata = self.container.metadata
        if metadata is None:
            self._add_issue("info", "OPDA", 0, "No optional data block")
        elif metadata.is_empty:
            self._add_issue("warning", "OPDA", 0, "Optional data block has no readable text")
        else:
            self._add_issue("info", "OPDA", 0, "Song information present")

    def _validate_tracks(self) -> None:
        container = self.container
        if not container.tracks:
            self._add_issue("warning", "Tracks", 0, "No MIDI or audio track chunks")
            return

        self._add_issue(
            "info",
            "Tracks",
            0,
            f"{len(container.midi_tracks)} MIDI, {len(container.audio_tracks)} audio",
        )

        info = container.content_info
        if info is not None and info.track_count is not None:
            if info.track_count != len(container.tracks):
                self._add_issue(
                    "warning",
                    "Tracks",
                    0,
                    f"CNTI counts {info.track_count}, found {len(container.tracks)} tracks",
                )

    def _validate_truncation(self) -> None:
        """
        A tag inside a pass's range, past its last decoded track, means
        collection stopped early.

        The audio pass scans from the header on; the MIDI pass only from
        where the optional blocks left the cursor.
        """
        pass_start = {TrackKind.MIDI: self.parser.midi_start, TrackKind.AUDIO: HEADER_SIZE}
        for kind in TrackKind:
            tracks = self.container.get_tracks(kind)
            search_from = tracks[-1].end_offset if tracks else pass_start[kind]
            position = self.data.find(kind.tag, search_from)
            if position != -1:
                self._add_issue(
                    "warning",
                    kind.display_name,
                    position,
                    f"Undecoded {kind.tag.decode('ascii')} tag, track collection stopped early (truncated chunk?)",
                )

    def _validate_cross_kind_tags(self) -> None:
        """Flag tracks whose header sits inside another track's payload."""
        container = self.container
        for track in container.tracks:
            header_start = track.offset - TRACK_HEADER_SIZE
            for other in container.tracks:
                if other.kind is track.kind:
                    continue
                if other.offset <= header_start < other.end_offset:
                    self._add_issue(
                        "warning",
                        track.kind.display_name,
                        header_start,
                        f"{track} found inside {other} payload",
                    )


def display_validation(result: ValidationResult, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[green]VALID[/green]"
        border = "green"
    else:
        status = "[red]INVALID[/red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {result.filepath}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=12)
        table.add_column("Offset", style="dim", width=10)
        table.add_column("Message", width=60)

        for issue in result.errors:
            table.add_row("[red]ERROR[/red]", issue.area, f"0x{issue.offset:06X}", issue.message)

        for issue in result.warnings:
            table.add_row("[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:06X}", issue.message)

        console.print(table)

    if result.info and (verbose or not (result.errors or result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {issue.message}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="SMAF file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a SMAF container against its own declared fields.

    Checks for:

    - MMMD header magic
    - Declared total size vs actual file size
    - Content info completeness and track counts
    - Track chunks cut short by the end of the file
    - Tracks found inside the payload of the other track kind

    Examples:

        smafkit validate song.mmf

        smafkit validate song.mmf --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    validator = MMFValidator(data, str(file))
    result = validator.validate()

    # In strict mode, treat warnings as errors
    if strict and result.warnings:
        result.valid = False

    display_validation(result, verbose=verbose)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
