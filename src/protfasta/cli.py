"""Command-line interface for protfasta."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    BarColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.style import Style

from protfasta import __version__
from protfasta.core.errors import FastaError
from protfasta.core.parameters import FastaParameters
from protfasta.io.output import OutputFormat, format_headers, format_result

# Console that writes to stderr (so progress doesn't mix with data output)
stderr_console = Console(stderr=True)


class FileProgressColumn(BarColumn):
    """A progress bar that shifts from red to green as the file is read."""

    SHADES = ["#D7263D", "#F46036", "#F4A259", "#C5D86D", "#5BBA6F"]

    def __init__(self) -> None:
        super().__init__(bar_width=40, finished_style=Style(color="#2E933C"))

    def shade_for(self, fraction: float) -> str:
        """Colour of the bar for the fraction of bytes read (0-1)."""
        fraction = min(max(fraction, 0.0), 1.0)
        return self.SHADES[min(int(fraction * len(self.SHADES)), len(self.SHADES) - 1)]

    def render(self, task):  # type: ignore[no-untyped-def]
        fraction = task.completed / task.total if task.total else 0.0
        self.complete_style = Style(color=self.shade_for(fraction))
        return super().render(task)


def create_file_progress() -> Progress:
    """Create a progress display on stderr for the percentage of a file read."""
    return Progress(
        TextColumn("[bold blue]{task.description}"),
        FileProgressColumn(),
        TextColumn("{task.percentage:>5.1f}%"),
        TimeElapsedColumn(),
        console=stderr_console,
        transient=True,
    )


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=stderr_console, show_path=False)],
        force=True,
    )


def parse_format(output_format: str) -> OutputFormat:
    """Validate the --format option."""
    if output_format not in ("pretty", "tsv", "json"):
        typer.echo(f"Error: Invalid format '{output_format}'.", err=True)
        raise typer.Exit(1)
    return OutputFormat(output_format)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"protfasta {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="protfasta",
    help="protfasta: streaming reader for protein FASTA databases.\n\n"
    "Reads FASTA files of any size one protein at a time, with optional "
    "sequence sanitization and byte-accurate progress.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug messages"),
    ] = False,
) -> None:
    """protfasta: streaming reader for protein FASTA databases."""
    configure_logging(verbose)


@app.command()
def summary(
    fasta: Annotated[Path, typer.Argument(help="FASTA file")],
    decoy_tag: Annotated[
        str,
        typer.Option("--decoy-tag", help="Tag marking decoy accessions"),
    ] = "_REVERSED",
    decoy_prefix: Annotated[
        bool,
        typer.Option("--decoy-prefix", help="The decoy tag is a prefix, not a suffix"),
    ] = False,
    encoding: Annotated[
        str,
        typer.Option("--encoding", "-e", help="Text encoding of the file"),
    ] = "utf-8",
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: pretty, tsv, json"),
    ] = "pretty",
) -> None:
    """Count sequences, species and database types from the headers.

    EXAMPLES:

        protfasta summary uniprot_human.fasta
        protfasta summary concatenated.fasta --decoy-tag REV_ --decoy-prefix -f json
    """
    from protfasta.analysis.summary import summarize_fasta

    fmt = parse_format(output_format)
    parameters = FastaParameters(
        encoding=encoding,
        decoy_tag=decoy_tag,
        decoy_tag_is_suffix=not decoy_prefix,
    )

    try:
        with create_file_progress() as progress:
            task_id = progress.add_task(f"Reading {fasta.name}", total=100)
            result = summarize_fasta(
                fasta,
                parameters,
                on_progress=lambda percent: progress.update(task_id, completed=percent),
            )
    except (FastaError, LookupError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if result is not None:
        typer.echo(format_result(result, fmt))


@app.command()
def scan(
    fasta: Annotated[Path, typer.Argument(help="FASTA file")],
    workers: Annotated[
        int,
        typer.Option("--workers", "-w", help="Threads sharing the reader (0 = all CPUs)"),
    ] = 1,
    sanitize: Annotated[
        bool,
        typer.Option(
            "--sanitize/--no-sanitize",
            help="Drop '*' markers, upper-case and validate residues",
        ),
    ] = False,
    keep_going: Annotated[
        bool,
        typer.Option("--keep-going", "-k", help="Report bad records instead of stopping"),
    ] = False,
    encoding: Annotated[
        str,
        typer.Option("--encoding", "-e", help="Text encoding of the file"),
    ] = "utf-8",
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: pretty, tsv, json"),
    ] = "pretty",
) -> None:
    """Read every protein and report length statistics and composition.

    EXAMPLES:

        protfasta scan uniprot_human.fasta
        protfasta scan uniprot_human.fasta -w 8 --sanitize --keep-going
    """
    from protfasta.analysis.scan import get_worker_count, scan_records

    fmt = parse_format(output_format)
    parameters = FastaParameters(encoding=encoding, sanitize=sanitize)
    num_workers = get_worker_count(workers)

    try:
        result = scan_records(fasta, parameters, workers=num_workers, keep_going=keep_going)
    except (FastaError, LookupError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for error in result.errors:
        typer.echo(f"Warning: {error}", err=True)
    typer.echo(format_result(result, fmt))


@app.command()
def headers(
    fasta: Annotated[Path, typer.Argument(help="FASTA file")],
    encoding: Annotated[
        str,
        typer.Option("--encoding", "-e", help="Text encoding of the file"),
    ] = "utf-8",
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: pretty, tsv, json"),
    ] = "pretty",
) -> None:
    """List the accession and description of every protein.

    EXAMPLES:

        protfasta headers uniprot_human.fasta -f tsv > accessions.tsv
    """
    from protfasta.io.fasta import read_headers

    fmt = parse_format(output_format)

    try:
        parsed = list(read_headers(fasta, encoding=encoding))
    except (FastaError, LookupError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if parsed or fmt == OutputFormat.JSON:
        typer.echo(format_headers(parsed, fmt))


if __name__ == "__main__":
    app()
