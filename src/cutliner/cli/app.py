"""CLI application entry point for cutliner.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutliner import __version__
from cutliner.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_error,
    print_header,
    print_image_result,
    print_settings,
    print_step,
    print_success,
)
from cutliner.config import (
    CutlinerSettings,
    ExportConfig,
    LineColor,
    LoggingConfig,
    PageConfig,
    ProcessingConfig,
)
from cutliner.core.pipeline import validate_params
from cutliner.core.processor import SheetProcessor
from cutliner.exceptions import CutlinerError, ExportSaveError, InvalidParameterError

# Create the Typer app
app = typer.Typer(
    name="cutliner",
    help="Generate die-cut lines for stickers from images with transparent backgrounds.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Cutliner[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    images: Annotated[
        list[Path],
        typer.Argument(
            help="Paths to input images (PNG with transparency)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path",
        ),
    ] = Path("cutline.svg"),
    offset: Annotated[
        float,
        typer.Option(
            "--offset",
            "-d",
            help="Cut line offset in mm, step 0.5 (positive = inside, negative = outside)",
            min=-10.0,
            max=10.0,
        ),
    ] = 2.0,
    smoothness: Annotated[
        float,
        typer.Option(
            "--smoothness",
            "-s",
            help="Simplification tolerance in px, step 0.5 (0.5-5)",
            min=0.5,
            max=5.0,
        ),
    ] = 2.0,
    iterations: Annotated[
        int,
        typer.Option(
            "--iterations",
            help="Smoothing passes",
            min=0,
        ),
    ] = 2,
    alpha_threshold: Annotated[
        int,
        typer.Option(
            "--alpha-threshold",
            help="Alpha value at or above which a pixel is opaque",
            min=0,
            max=255,
        ),
    ] = 128,
    page_width: Annotated[
        float,
        typer.Option(
            "--page-width",
            help="Page width in px",
        ),
    ] = 800.0,
    page_height: Annotated[
        float,
        typer.Option(
            "--page-height",
            help="Page height in px",
        ),
    ] = 600.0,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            help="Scale factor for every placed image",
        ),
    ] = 1.0,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            "-c",
            help="Cut line colour (magenta|black)",
        ),
    ] = "magenta",
    no_images: Annotated[
        bool,
        typer.Option(
            "--no-images",
            help="Export cut lines only, without the artwork",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: sequential)",
            min=1,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Generate and report cut lines without writing the SVG",
        ),
    ] = False,
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
    """Generate cut lines for one or more sticker images and export them as SVG.

    Each image is placed at the top-left of the page safe area. Its opaque
    region is outlined, simplified, smoothed and offset by --offset mm.

    Example:
        cutliner sticker.png --offset -1 -o cutline.svg
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    for path in images:
        if not path.is_file():
            print_error(
                f"Input file not found: {path}",
                details=f"The file '{path}' does not exist or is not a file.",
            )
            raise typer.Exit(code=1)

    try:
        line_color = LineColor(color.lower())
    except ValueError:
        print_error(f"Invalid color: {color}", details="Valid values: magenta, black")
        raise typer.Exit(code=1)

    try:
        params = validate_params(
            {
                "offset_mm": offset,
                "smoothness": smoothness,
                "smooth_iterations": iterations,
                "alpha_threshold": alpha_threshold,
            }
        )
    except InvalidParameterError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if page_width <= 0 or page_height <= 0:
        print_error("Page width and height must be positive")
        raise typer.Exit(code=1)

    if scale <= 0:
        print_error(f"Scale must be positive, got {scale}")
        raise typer.Exit(code=1)

    settings = CutlinerSettings(
        params=params,
        page=PageConfig(width_px=page_width, height_px=page_height),
        export=ExportConfig(line_color=line_color, embed_images=not no_images),
        processing=ProcessingConfig(max_workers=workers, scale=scale),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level if not quiet else "ERROR",
        ),
    )

    if not quiet:
        print_header(__version__)
        print_step(f"Processing {len(images)} image{'s' if len(images) != 1 else ''}")
        print_settings(settings.params, settings.page)

    output_path = None if dry_run else output

    try:
        processor = SheetProcessor(settings)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Generating", total=len(images))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process(
                    image_paths=images,
                    output_path=output_path,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.process(image_paths=images, output_path=output_path)

    except ExportSaveError as e:
        print_error(f"Could not save SVG: {e.reason}")
        raise typer.Exit(code=1)
    except CutlinerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if stats.errors and not quiet:
        for name, message in stats.errors:
            print_error(f"{name}: {message}")

    if dry_run:
        if not quiet:
            print_step("Cut lines (dry run)")
            for image in processor.sheet.images:
                print_image_result(
                    image.name,
                    cutlines=len(image.cutlines),
                    points=sum(len(p) for p in image.cutlines),
                )
            console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – nothing written")
    elif not quiet:
        print_success(
            output_path=str(output),
            total_time_s=stats.duration_seconds,
            processed=stats.processed_count,
            empty=stats.empty_count,
            errors=stats.error_count,
            avg_image_ms=stats.avg_image_time_ms,
        )

    if stats.error_count and not processor.sheet.images:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
