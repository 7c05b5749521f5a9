"""Configuration settings for icondiff."""

import tempfile
from enum import Enum
from pathlib import Path

from PIL import ImageColor
from pydantic import BaseModel, Field, field_validator


def default_steps() -> dict[str, int]:
    """Step size per recognized axis tag."""
    return {
        "FILL": 1,
        "GRAD": 25,
        "ROND": 50,
        "opsz": 16,
        "wght": 200,
    }


class RenderMode(str, Enum):
    """How icons are rendered for comparison."""

    OUTLINE = "outline"
    RASTER = "raster"


class SamplingConfig(BaseModel):
    """Configuration for design-space sampling."""

    steps: dict[str, int] = Field(
        default_factory=default_steps,
        description="Step between stops, keyed by axis tag",
    )
    strict: bool = Field(
        default=False,
        description="Fail on axes without a step instead of sampling min/default/max",
    )

    @field_validator("steps")
    @classmethod
    def _positive_steps(cls, steps: dict[str, int]) -> dict[str, int]:
        for tag, step in steps.items():
            if len(tag) != 4:
                raise ValueError(f"Axis tag must be 4 characters: {tag!r}")
            if step <= 0:
                raise ValueError(f"Step for {tag} must be positive, got {step}")
        return steps


class RenderConfig(BaseModel):
    """Configuration for rendering icons."""

    mode: RenderMode = Field(
        default=RenderMode.OUTLINE,
        description="Compare vector outlines or raster images",
    )
    size: int | None = Field(
        default=None,
        ge=1,
        description="Render size (None = the larger units per em of both fonts)",
    )
    scale: float = Field(
        default=1.0,
        gt=0.0,
        le=16.0,
        description="Pixel scale applied to size in raster mode",
    )
    foreground: str = Field(
        default="#000000",
        description="Raster foreground colour",
    )
    background: str = Field(
        default="#ffffff",
        description="Raster background colour",
    )

    @field_validator("foreground", "background")
    @classmethod
    def _valid_colour(cls, colour: str) -> str:
        ImageColor.getrgb(colour)
        return colour


class DiffConfig(BaseModel):
    """Configuration for defect accounting."""

    location_mismatch_is_defect: bool = Field(
        default=False,
        description="Count locations present in only one build as defects",
    )


class OutputConfig(BaseModel):
    """Configuration for failure artifacts."""

    artifact_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        description="Directory receiving failure artifacts",
    )


class ProcessingConfig(BaseModel):
    """Configuration for comparison processing."""

    max_workers: int | None = Field(
        default=1,
        ge=1,
        description="Worker processes (1 = in process, None = auto)",
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


class IconDiffSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> IconDiffSettings:
    """Get default application settings."""
    return IconDiffSettings()
