"""Sheet processing orchestration.

Loads sticker images, generates their cut lines (optionally in worker
processes), places them on a sheet and exports the result.

Key components:
- process_image: Top-level picklable function for parallel execution
- SheetProcessor: Main orchestrator class
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from cutliner.config import CutlinerSettings
from cutliner.core.pipeline import CutLinePipeline
from cutliner.core.sheet import Sheet
from cutliner.domain import PixelBuffer, Polygon
from cutliner.exceptions import CutlinerError
from cutliner.io import ImageReader, SvgWriter
from cutliner.utils import ProcessingLogger, ProcessingStats, configure_logging


def process_image(
    buffer_dict: dict[str, Any],
    params_dict: dict[str, Any],
) -> dict[str, Any]:
    """Generate cut lines for a single image.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        buffer_dict: Serialized pixel buffer (from PixelBuffer.to_dict())
        params_dict: Serialized cut line parameters

    Returns:
        Dictionary containing either:
        - Success: {"cutlines": [polygon_dict, ...], "duration_ms": float}
        - Error: {"error": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        buffer = PixelBuffer.from_dict(buffer_dict)
        cutlines = CutLinePipeline(params_dict).generate(buffer)
        return {
            "cutlines": [p.to_dict() for p in cutlines],
            "duration_ms": (time.time() - start_time) * 1000,
        }
    except Exception as e:
        return {
            "error": str(e),
            "traceback": traceback.format_exc(),
            "duration_ms": (time.time() - start_time) * 1000,
        }


class SheetProcessor:
    """Orchestrates cut line generation for a set of image files.

    Manages the complete workflow:
    1. Decode image files
    2. Generate cut lines per image (sequentially or in worker processes)
    3. Place images on a sheet
    4. Export the sheet as SVG

    Example:
        processor = SheetProcessor(CutlinerSettings())
        stats = processor.process(
            image_paths=[Path("cat.png"), Path("dog.png")],
            output_path=Path("cutline.svg"),
        )
    """

    def __init__(self, config: CutlinerSettings) -> None:
        """Initialize sheet processor with configuration.

        Args:
            config: Cutliner settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.processing_logger = ProcessingLogger(self.logger)
        self.sheet = Sheet(page=config.page, params=config.params)

    def process(
        self,
        image_paths: Sequence[Path],
        output_path: Path | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ProcessingStats:
        """Process image files into a cut line sheet.

        Args:
            image_paths: Image files to place on the sheet, in order
            output_path: SVG output path (nothing is written if None)
            max_workers: Worker processes (None uses config; None or 1 runs inline)
            progress_callback: Optional callback(completed, total, image_name, success)

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            ExportSaveError: If the SVG cannot be written
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        self.logger.info(
            "Starting sheet processing",
            images=len(image_paths),
            output=str(output_path) if output_path else None,
            max_workers=max_workers,
        )

        loaded = self._load_images(image_paths)

        if max_workers is not None and max_workers > 1 and len(loaded) > 1:
            results = self._generate_parallel(loaded, max_workers)
        else:
            results = self._generate_sequential(loaded)

        total = len(image_paths)
        completed = 0
        loaded_paths = {path for path, _, _ in loaded}
        for path in image_paths:
            if path not in loaded_paths:
                completed += 1
                if progress_callback is not None:
                    progress_callback(completed, total, path.name, False)

        for (path, buffer, source), result in zip(loaded, results):
            name = path.name
            success = False

            if "error" in result:
                self.processing_logger.log_image_error(
                    name, Exception(result["error"]), traceback=result.get("traceback")
                )
            else:
                cutlines = [Polygon.from_dict(p) for p in result["cutlines"]]
                try:
                    self.sheet.add_image(
                        buffer,
                        name=name,
                        source=source,
                        scale=self.config.processing.scale,
                        cutlines=cutlines,
                    )
                except CutlinerError as e:
                    self.processing_logger.log_image_error(name, e)
                else:
                    success = True
                    if cutlines:
                        self.processing_logger.log_image_complete(
                            name,
                            cutlines=len(cutlines),
                            points=sum(len(p) for p in cutlines),
                            duration_ms=result["duration_ms"],
                        )
                    else:
                        self.processing_logger.log_image_empty(name)

            completed += 1
            if progress_callback is not None:
                progress_callback(completed, total, name, success)

        if output_path is not None:
            writer = SvgWriter(page=self.config.page, config=self.config.export)
            writer.save(self.sheet.images, output_path)
            self.logger.info("Sheet saved", output=str(output_path), images=len(self.sheet))

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            empty=stats.empty_count,
            errors=stats.error_count,
            cutlines=stats.cutlines_generated,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _load_images(
        self, image_paths: Sequence[Path]
    ) -> list[tuple[Path, PixelBuffer, bytes]]:
        """Decode image files, logging and skipping the ones that fail."""
        loaded: list[tuple[Path, PixelBuffer, bytes]] = []
        for path in image_paths:
            self.processing_logger.log_image_start(path.name)
            try:
                with ImageReader(path) as reader:
                    loaded.append((path, reader.to_pixel_buffer(), reader.source_bytes))
            except (FileNotFoundError, CutlinerError) as e:
                self.processing_logger.log_image_error(path.name, e)
        return loaded

    def _generate_sequential(
        self, loaded: list[tuple[Path, PixelBuffer, bytes]]
    ) -> list[dict[str, Any]]:
        params_dict = self.sheet.params.model_dump()
        return [process_image(buffer.to_dict(), params_dict) for _, buffer, _ in loaded]

    def _generate_parallel(
        self, loaded: list[tuple[Path, PixelBuffer, bytes]], max_workers: int
    ) -> list[dict[str, Any]]:
        """Generate cut lines in worker processes, preserving input order."""
        params_dict = self.sheet.params.model_dump()
        results: list[dict[str, Any]] = [{} for _ in loaded]

        self.logger.info(
            "Starting parallel processing",
            image_count=len(loaded),
            max_workers=max_workers,
        )

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            pending = {
                executor.submit(process_image, buffer.to_dict(), params_dict): idx
                for idx, (_, buffer, _) in enumerate(loaded)
            }
            try:
                for future in as_completed(pending):
                    idx = pending[future]
                    try:
                        results[idx] = future.result()
                    except Exception as e:
                        results[idx] = {
                            "error": str(e),
                            "traceback": traceback.format_exc(),
                            "duration_ms": 0.0,
                        }
            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results
