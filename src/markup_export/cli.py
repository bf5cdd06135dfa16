"""Command-line interface for Markup Export."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from markup_export import __version__
from markup_export.config import Settings, get_settings
from markup_export.core.exporter import (
    DocumentExporter,
    ExportError,
    ExportWriteError,
    suggest_export_name,
)
from markup_export.formats import SUPPORTED_FORMATS
from markup_export.sources.pygments_source import lex_file

app = typer.Typer(
    name="markup-export",
    help="Export source files as syntax-highlighted HTML or LaTeX documents.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Markup Export v{__version__}")
        raise typer.Exit()


def generate_output_path(
    input_path: Path, extension: str, output_dir: Optional[Path] = None
) -> Path:
    """Generate the export path next to the input (or in output_dir)."""
    output_name = suggest_export_name(str(input_path), extension)

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def process_file(
    input_path: Path,
    output_path: Optional[Path],
    exporter: DocumentExporter,
    settings: Settings,
    style_name: Optional[str] = None,
    verbose: bool = False,
) -> bool:
    """Export a single file. Returns True on success."""
    if not input_path.is_file():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    if output_path is None:
        output_path = generate_output_path(input_path, exporter.extension)

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")
        console.print(f"[blue]Style:[/blue] {style_name or settings.style_name}")

    try:
        source = lex_file(input_path, style_name=style_name, settings=settings)
        exporter.export_to_file(source, output_path)
    except ExportWriteError as e:
        console.print(f"[red]Error:[/red] {e}")
        return False
    except (ExportError, ValueError, OSError) as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False

    console.print(
        f"[green]Success:[/green] Document successfully exported as '{output_path}'."
    )
    return True


def is_binary(path: Path, sample_size: int = 1024) -> bool:
    """Guess whether a file is binary from a NUL byte near its start."""
    with path.open("rb") as f:
        return b"\0" in f.read(sample_size)


def find_files(folder_path: Path, extension: Optional[str] = None) -> list[Path]:
    """Find the files of a folder worth exporting.

    Hidden files and directories are skipped, as are previous exports
    (files whose name ends in _export or that already carry the export
    extension) and binary files.
    """
    files: list[Path] = []
    for path in sorted(folder_path.rglob("*")):
        if not path.is_file():
            continue
        relative = path.relative_to(folder_path)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.stem.endswith("_export"):
            continue
        if extension and path.suffix.lower() == extension.lower():
            continue
        if is_binary(path):
            logger.debug("Skipping binary file %s", path)
            continue
        files.append(path)
    return files


def process_folder(
    folder_path: Path,
    exporter: DocumentExporter,
    settings: Settings,
    style_name: Optional[str] = None,
    verbose: bool = False,
) -> tuple[int, int]:
    """Export all files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files = find_files(folder_path, exporter.extension)

    if not files:
        console.print(f"[yellow]No files found in {folder_path}[/yellow]")
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to export[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Exporting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Exporting {file_path.name}...")
            if process_file(
                file_path, None, exporter, settings, style_name, verbose
            ):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="File or folder to export",
        exists=True,
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Export format: {', '.join(SUPPORTED_FORMATS)} (default: html)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        "-s",
        help="Pygments style providing the colors (default: default)",
    ),
    tab_width: Optional[int] = typer.Option(
        None,
        "--tab-width",
        "-t",
        min=1,
        help="Tab width in columns (default: 8)",
    ),
    use_zoom: bool = typer.Option(
        False,
        "--use-zoom",
        "-z",
        help="Add the configured zoom level to the font size (HTML only)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Export source files as styled HTML or LaTeX documents.

    Examples:

        python export.py script.py

        python export.py script.py --format latex

        python export.py /path/to/folder --style monokai

        python export.py notes.txt --use-zoom  # Honour MARKUP_EXPORT_ZOOM
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = get_settings()
    if tab_width is not None:
        settings = settings.model_copy(update={"tab_width": tab_width})

    try:
        exporter = DocumentExporter(fmt or settings.default_format, use_zoom=use_zoom)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if use_zoom and not exporter.renderer.supports_zoom:
        console.print(
            f"[yellow]Warning:[/yellow] --use-zoom has no effect for "
            f"{exporter.renderer.name} export"
        )

    if path.is_file():
        # Single file mode
        success = process_file(path, output, exporter, settings, style, verbose)
        raise typer.Exit(0 if success else 1)
    else:
        # Folder mode
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                "Files will be saved alongside originals."
            )

        success, fail = process_folder(path, exporter, settings, style, verbose)
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
