"""Configuration management for cutliner.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CutLineParams: Pipeline tuning options (offset, smoothness, ...)
- PageConfig: Page size and safety margin
- ExportConfig: SVG export settings
- ProcessingConfig: Sheet processing settings
- LoggingConfig: Logging settings
- CutlinerSettings: Main application settings
"""

from cutliner.config.settings import (
    CutLineParams,
    CutlinerSettings,
    ExportConfig,
    LineColor,
    LoggingConfig,
    PageConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "CutLineParams",
    "CutlinerSettings",
    "ExportConfig",
    "LineColor",
    "LoggingConfig",
    "PageConfig",
    "ProcessingConfig",
    "get_default_settings",
]
