"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages. Everything goes to stderr so
an SVG written to stdout stays clean.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch conversion.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]glif2svg[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_batch_info(input_dir: str, glyph_count: int, workers: int, is_auto: bool) -> None:
    """Print what a batch run is about to do.

    Args:
        input_dir: UFO or glyphs directory
        glyph_count: Number of glif files found
        workers: Number of parallel workers
        is_auto: Whether the worker count was auto-detected
    """
    line = Text("  ")
    line.append(input_dir)
    console.print(line)
    auto_suffix = " (auto)" if is_auto else ""
    console.print(
        f"  {glyph_count:,} glyphs {SYM_DOT} {workers} workers{auto_suffix} "
        f"{SYM_DOT} Ctrl+C to cancel"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    converted: int,
    skipped_contours: int,
    errors: int,
    metrics_fallbacks: int = 0,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Output file or directory
        total_time_s: Total processing time in seconds
        converted: Number of glyphs converted
        skipped_contours: Number of contours left out
        errors: Number of errors encountered
        metrics_fallbacks: Number of glyphs sized from their outline bounds
        avg_time_ms: Average conversion time per glyph in milliseconds
    """
    time_str = _format_time(total_time_s)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {converted} glyphs {SYM_DOT} {skipped_contours} contours skipped {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if metrics_fallbacks:
        console.print(
            f"  [yellow]{metrics_fallbacks} glyphs sized from outline bounds[/yellow] "
            "(no usable fontinfo.plist)"
        )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg")


def print_failures(errors: list[tuple[str, str]], limit: int = 20) -> None:
    """List glyphs that failed to convert.

    Args:
        errors: (glyph name, message) pairs
        limit: Maximum number of entries shown
    """
    for glyph_name, message in errors[:limit]:
        console.print(f"  [red]{SYM_ERR}[/red] {glyph_name}: {message}")
    if len(errors) > limit:
        console.print(f"  ... +{len(errors) - limit} more")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(converted: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        converted: Number of glyphs converted before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {converted} glyphs completed {SYM_DOT} {cancelled} tasks cancelled")
