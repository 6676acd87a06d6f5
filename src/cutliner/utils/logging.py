"""Logging utilities for Cutliner."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    processed_count: int = 0
    empty_count: int = 0
    error_count: int = 0
    cutlines_generated: int = 0
    points_emitted: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    image_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_image_time_ms(self) -> float | None:
        """Average pipeline time per image."""
        if not self.image_timings_ms:
            return None
        return sum(self.image_timings_ms) / len(self.image_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output is plain stdlib logging; the log file (when given)
    receives JSON-rendered structlog events.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("cutliner")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
        started=datetime.now().isoformat(timespec="seconds"),
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_image_start(self, image_name: str) -> None:
        """Log start of image processing."""
        self._logger.debug("Processing image", image=image_name)

    def log_image_complete(
        self,
        image_name: str,
        cutlines: int,
        points: int,
        duration_ms: float,
    ) -> None:
        """Log successful image processing."""
        self._logger.info(
            "Image processed",
            image=image_name,
            cutlines=cutlines,
            points=points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.cutlines_generated += cutlines
        self._stats.points_emitted += points
        self._stats.image_timings_ms.append(duration_ms)

    def log_image_empty(self, image_name: str) -> None:
        """Log an image that produced no cut line."""
        self._logger.warning("No cut line generated", image=image_name)
        self._stats.empty_count += 1

    def log_image_error(
        self,
        image_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log image processing error."""
        self._logger.error(
            "Image processing failed",
            image=image_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((image_name, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
