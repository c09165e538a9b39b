"""CLI application entry point for glif2svg.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from glif2svg import __version__
from glif2svg.cli.output import (
    console,
    create_progress,
    print_batch_info,
    print_cancellation_summary,
    print_error,
    print_failures,
    print_header,
    print_step,
    print_success,
)
from glif2svg.config import (
    ContourPolicy,
    ConversionConfig,
    Glif2SvgSettings,
    LoggingConfig,
    ProcessingConfig,
)
from glif2svg.core import GlifProcessor
from glif2svg.exceptions import Glif2SvgError
from glif2svg.io import SvgWriter, find_glif_files

# Create the Typer app
app = typer.Typer(
    name="glif2svg",
    help="Convert UFO .glif glyphs to SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glif2svg[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a .glif file, or a UFO / glyphs directory",
            show_default=False,
        ),
    ],
    output_arg: Annotated[
        Path | None,
        typer.Argument(
            help="Output file (or directory for batch runs); '-' or none for stdout",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file or directory (same as the second argument)",
        ),
    ] = None,
    no_viewbox: Annotated[
        bool,
        typer.Option(
            "--no-viewbox",
            "-B",
            help="Don't put viewBox in SVG",
        ),
    ] = False,
    no_metrics: Annotated[
        bool,
        typer.Option(
            "--no-metrics",
            "-M",
            help="Ignore font metrics and size the SVG from the outline bounds",
        ),
    ] = False,
    fontinfo: Annotated[
        Path | None,
        typer.Option(
            "--fontinfo",
            "-F",
            help="fontinfo.plist to read metrics from (default: the glif's parent UFO)",
        ),
    ] = None,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal digits kept in coordinates",
            min=0,
        ),
    ] = 6,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on contours without points instead of skipping them",
        ),
    ] = False,
    skip_malformed: Annotated[
        bool,
        typer.Option(
            "--skip-malformed",
            help="Drop contours with incomplete curves instead of failing the glyph",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers for directories (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert a glyph outline to an SVG document with one path.

    With font metrics (from the parent UFO's fontinfo.plist or --fontinfo) the
    SVG spans the advance width and the ascender to descender height.
    Otherwise it is sized to the outline's bounding box.

    Example:
        glif2svg Font.ufo/glyphs/a.glif a.svg
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if output_arg is not None and output is not None:
        print_error("Give the output either as an argument or with --output, not both")
        raise typer.Exit(code=1)
    output_path = output_arg if output_arg is not None else output

    if not input_path.exists():
        print_error(
            f"Input not found: {input_path}",
            details=f"The path '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if fontinfo is not None and not fontinfo.is_file():
        print_error(f"fontinfo file not found: {fontinfo}")
        raise typer.Exit(code=1)

    settings = Glif2SvgSettings(
        conversion=ConversionConfig(
            precision=precision,
            omit_viewbox=no_viewbox,
            ignore_metrics=no_metrics,
            empty_contours=ContourPolicy.FAIL if strict else ContourPolicy.SKIP,
            malformed_contours=ContourPolicy.SKIP if skip_malformed else ContourPolicy.FAIL,
        ),
        processing=ProcessingConfig(
            max_workers=workers,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="INFO" if verbose else log_level,
        ),
    )

    try:
        if input_path.is_dir():
            _handle_directory(input_path, output_path, fontinfo, settings, quiet, verbose)
        else:
            _handle_file(input_path, output_path, fontinfo, settings, quiet)

    except Glif2SvgError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_file(
    glif_path: Path,
    output_path: Path | None,
    fontinfo: Path | None,
    settings: Glif2SvgSettings,
    quiet: bool,
) -> None:
    """Convert a single glif to a file or stdout.

    Args:
        glif_path: Input .glif
        output_path: Output .svg, None or '-' for stdout
        fontinfo: Explicit fontinfo.plist
        settings: Application settings
        quiet: Suppress warnings on the console
    """
    if output_path is not None and str(output_path) == "-":
        output_path = None

    processor = GlifProcessor(settings, quiet=quiet)
    stats = processor.process_file(glif_path, output_path, fontinfo_path=fontinfo)

    if stats.error_count:
        _, message = stats.errors[0]
        print_error(message)
        raise typer.Exit(code=1)


def _handle_directory(
    input_dir: Path,
    output_dir: Path | None,
    fontinfo: Path | None,
    settings: Glif2SvgSettings,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert every glif of a UFO or glyphs directory.

    Args:
        input_dir: UFO or glyphs directory
        output_dir: Directory for the .svg files (default: <input>-svg)
        fontinfo: Explicit fontinfo.plist
        settings: Application settings
        quiet: Suppress output
        verbose: Show every failed glyph
    """
    if output_dir is None or str(output_dir) == "-":
        output_dir = SvgWriter.get_output_dir(input_dir)

    glyph_count = len(find_glif_files(input_dir))
    workers = settings.processing.max_workers

    if not quiet:
        print_header(__version__)
        print_step("Converting")
        print_batch_info(
            str(input_dir),
            glyph_count,
            workers if workers else os.cpu_count() or 1,
            is_auto=(workers is None),
        )

    processor = GlifProcessor(settings, quiet=quiet)

    try:
        if not quiet and glyph_count:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Converting {glyph_count} glyphs",
                    total=glyph_count,
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process_directory(
                    input_dir,
                    output_dir,
                    fontinfo_path=fontinfo,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.process_directory(input_dir, output_dir, fontinfo_path=fontinfo)
    except KeyboardInterrupt:
        if not quiet:
            partial = processor.processing_logger.stats
            print_cancellation_summary(partial.converted_count, partial.cancelled_count)
        raise typer.Exit(code=130) from None

    if not quiet:
        print_success(
            output_path=str(output_dir),
            total_time_s=stats.duration_seconds,
            converted=stats.converted_count,
            skipped_contours=stats.skipped_contour_count,
            errors=stats.error_count,
            metrics_fallbacks=stats.metrics_fallback_count,
            avg_time_ms=stats.avg_glyph_time_ms,
        )
        if stats.errors:
            print_failures(stats.errors, limit=len(stats.errors) if verbose else 20)

    if stats.error_count:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
