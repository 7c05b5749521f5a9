"""Configuration management for icondiff.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SamplingConfig: Axis step table and unknown-axis policy
- RenderConfig: Outline/raster rendering settings
- DiffConfig: Defect accounting policy
- OutputConfig: Failure artifact destination
- ProcessingConfig: Worker pool settings
- LoggingConfig: Logging settings
- IconDiffSettings: Main application settings
"""

from icondiff.config.settings import (
    DiffConfig,
    IconDiffSettings,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    RenderConfig,
    RenderMode,
    SamplingConfig,
    default_steps,
    get_default_settings,
)

__all__ = [
    "DiffConfig",
    "IconDiffSettings",
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "RenderConfig",
    "RenderMode",
    "SamplingConfig",
    "default_steps",
    "get_default_settings",
]
