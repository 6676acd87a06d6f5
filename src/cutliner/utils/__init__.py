"""Utility functions for cutliner.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics helpers
"""

from cutliner.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
