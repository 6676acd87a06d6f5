"""Configuration settings for Cutliner."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cutliner.units import SAFETY_MARGIN_MM


class LineColor(str, Enum):
    """Cut line stroke colour."""

    MAGENTA = "magenta"
    BLACK = "black"

    @property
    def rgb(self) -> str:
        """CSS colour used in exported documents."""
        if self is LineColor.MAGENTA:
            return "rgb(255, 0, 255)"
        return "rgb(0, 0, 0)"


def _check_step(value: float, step: float, name: str) -> float:
    ratio = value / step
    if abs(ratio - round(ratio)) > 1e-9:
        raise ValueError(f"{name} must be a multiple of {step}")
    return value


class CutLineParams(BaseModel):
    """Tuning options for a single pipeline run.

    Parameters are immutable: a change produces a new instance and the cut
    lines are regenerated from the source pixels.
    """

    model_config = ConfigDict(frozen=True)

    offset_mm: float = Field(
        default=2.0,
        ge=-10.0,
        le=10.0,
        description="Signed offset in mm (positive = inside, negative = outside)",
    )
    smoothness: float = Field(
        default=2.0,
        ge=0.5,
        le=5.0,
        description="Douglas-Peucker tolerance in pixels",
    )
    smooth_iterations: int = Field(
        default=2,
        ge=0,
        description="Number of [1 2 1]/4 smoothing passes",
    )
    alpha_threshold: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Alpha value at or above which a pixel is opaque",
    )

    @field_validator("offset_mm")
    @classmethod
    def _offset_step(cls, value: float) -> float:
        return _check_step(value, 0.5, "offset_mm")

    @field_validator("smoothness")
    @classmethod
    def _smoothness_step(cls, value: float) -> float:
        return _check_step(value, 0.5, "smoothness")


class PageConfig(BaseModel):
    """Page (sheet) dimensions in pixels."""

    width_px: float = Field(
        default=800.0,
        gt=0.0,
        description="Page width in pixels",
    )
    height_px: float = Field(
        default=600.0,
        gt=0.0,
        description="Page height in pixels",
    )
    margin_mm: float = Field(
        default=SAFETY_MARGIN_MM,
        ge=0.0,
        description="Safety margin kept clear on every side",
    )


class ExportConfig(BaseModel):
    """Configuration for SVG export."""

    line_color: LineColor = Field(
        default=LineColor.MAGENTA,
        description="Cut line stroke colour",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Cut line stroke width in pixels",
    )
    embed_images: bool = Field(
        default=True,
        description="Embed the source images beneath the cut lines",
    )
    precision: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places for path coordinates",
    )


class ProcessingConfig(BaseModel):
    """Configuration for sheet processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None or 1 = sequential)",
    )
    scale: float = Field(
        default=1.0,
        gt=0.0,
        description="Scale factor applied to every placed image",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CutlinerSettings(BaseModel):
    """Main application settings."""

    params: CutLineParams = Field(default_factory=CutLineParams)
    page: PageConfig = Field(default_factory=PageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CutlinerSettings:
    """Get default application settings."""
    return CutlinerSettings()
