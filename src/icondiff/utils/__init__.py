"""Utility functions for icondiff.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics
"""

from icondiff.utils.logging import (
    DiffLogger,
    DiffStats,
    configure_logging,
)

__all__ = [
    "DiffLogger",
    "DiffStats",
    "configure_logging",
]
