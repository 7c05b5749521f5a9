"""Logging utilities for icondiff."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from icondiff.domain import IconIdentifier, Location


@dataclass
class DiffStats:
    """Statistics from a diff run."""

    icon_count: int = 0
    location_count: int = 0
    comparison_count: int = 0
    mismatch_count: int = 0
    failing_icons: list[str] = field(default_factory=list)
    icon_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_icon_time_ms(self) -> float | None:
        if not self.icon_timings_ms:
            return None
        return sum(self.icon_timings_ms) / len(self.icon_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console records go to stderr so stdout carries only the report.

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

    for handler in list(root_logger.handlers):
        if getattr(handler, "_icondiff", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._icondiff = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel("ERROR" if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._icondiff = True  # type: ignore[attr-defined]
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

    logger = structlog.get_logger("icondiff")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class DiffLogger:
    """Logger for tracking comparison progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = DiffStats()

    def log_plan(self, icons: int, locations: int, only_left: int, only_right: int) -> None:
        """Log the reconciled test surface."""
        self._logger.info(
            "Test surface reconciled",
            icons=icons,
            locations=locations,
            only_left=only_left,
            only_right=only_right,
        )
        self._stats.icon_count = icons
        self._stats.location_count = locations

    def log_location_mismatch(self, only_left: int, only_right: int) -> None:
        """Log constellations that differ between the builds."""
        self._logger.warning(
            "Inconsistent location sets",
            only_left=only_left,
            only_right=only_right,
        )

    def log_mismatch(self, icon: IconIdentifier, location: Location, ordinal: int) -> None:
        """Log one failing comparison."""
        self._logger.debug(
            "Renderings differ",
            icon=icon.primary_name,
            location=location.describe(),
            ordinal=ordinal,
        )
        self._stats.mismatch_count += 1

    def log_artifact(self, key: str) -> None:
        self._logger.debug("Artifact written", key=key)

    def log_icon_complete(
        self,
        icon: IconIdentifier,
        bad: int,
        total: int,
        duration_ms: float,
    ) -> None:
        """Log the outcome of one icon."""
        self._logger.info(
            "Icon compared",
            icon=icon.primary_name,
            bad=bad,
            total=total,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.comparison_count += total
        self._stats.icon_timings_ms.append(duration_ms)
        if bad:
            self._stats.failing_icons.append(icon.primary_name)

    @property
    def stats(self) -> DiffStats:
        """Get current run statistics."""
        return self._stats
