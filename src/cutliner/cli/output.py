"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
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

from cutliner.config import CutLineParams, PageConfig

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for image processing."""
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]Cutliner[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_settings(params: CutLineParams, page: PageConfig) -> None:
    """Print the cut line parameters and page size.

    Args:
        params: Cut line parameters
        page: Page configuration
    """
    side = "inside" if params.offset_mm > 0 else "outside" if params.offset_mm < 0 else "on edge"
    console.print(
        f"  offset {params.offset_mm:g} mm ({side}) {SYM_DOT} "
        f"smoothness {params.smoothness:g} px {SYM_DOT} "
        f"{params.smooth_iterations} passes"
    )
    console.print(
        f"  page {page.width_px:g}x{page.height_px:g} px {SYM_DOT} "
        f"{page.margin_mm:g} mm safety margin"
    )


def print_image_result(name: str, cutlines: int, points: int) -> None:
    """Print one image's cut line summary (used in dry runs)."""
    line = Text("  ")
    line.append(name)
    if cutlines:
        line.append(f"  {cutlines} cut line {SYM_DOT} {points} points")
    else:
        line.append("  no cut line", style="yellow")
    console.print(line)


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
    processed: int,
    empty: int,
    errors: int,
    avg_image_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        processed: Number of images with a cut line
        empty: Number of fully transparent images
        errors: Number of errors encountered
        avg_image_ms: Average cut line generation time per image
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} cut lines {SYM_DOT} {empty} empty {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )
    if avg_image_ms is not None:
        console.print(f"  [dim]{_format_time(avg_image_ms / 1000)} per image[/dim]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message."""
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
