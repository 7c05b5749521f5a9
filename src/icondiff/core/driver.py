"""Diff orchestration.

The driver builds both fonts' constellations and icon sets, reconciles them,
then maps every common icon over every common location. Each icon is an
independent task, run in process or on a ProcessPoolExecutor; outcomes are
reduced in canonical icon order so reports and artifact ordinals do not
depend on scheduling.
"""

import re
import time
from collections.abc import Callable, Iterator
from concurrent.futures import ProcessPoolExecutor
from contextlib import closing
from dataclasses import dataclass, field

import structlog

from icondiff.config import IconDiffSettings, RenderConfig, RenderMode
from icondiff.core.artifacts import ArtifactSink, FailureArtifactWriter
from icondiff.core.compare import equivalent_outlines, equivalent_rasters
from icondiff.core.constellation import constellation
from icondiff.core.reconcile import Reconciliation, reconcile_icons, reconcile_locations
from icondiff.domain import IconIdentifier, Location
from icondiff.exceptions import InvalidFilterError
from icondiff.io import IconFont
from icondiff.utils import DiffLogger

LEFT = "left"
RIGHT = "right"

Rendering = str | bytes


@dataclass(frozen=True)
class IconTask:
    """One unit of work: an icon and every location to test it at."""

    icon: IconIdentifier
    locations: tuple[Location, ...]
    render: RenderConfig
    size: int


@dataclass
class Mismatch:
    """Both renderings of a failing (icon, location) pair.

    Attributes:
        location: Where the renderings differ
        ordinal: 1-based position among the icon's failing locations
        left: Rendering from the left font
        right: Rendering from the right font
    """

    location: Location
    ordinal: int
    left: Rendering = field(repr=False)
    right: Rendering = field(repr=False)


@dataclass
class IconOutcome:
    """Comparison result for one icon across all common locations."""

    icon: IconIdentifier
    good: list[Location] = field(default_factory=list)
    bad: list[Location] = field(default_factory=list)
    mismatches: list[Mismatch] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def bad_count(self) -> int:
        return len(self.bad)

    @property
    def total(self) -> int:
        return len(self.good) + len(self.bad)

    @property
    def passed(self) -> bool:
        return not self.bad


@dataclass
class DiffPlan:
    """The reconciled test surface of two fonts."""

    icons: Reconciliation[IconIdentifier]
    locations: Reconciliation[Location]
    size: int

    @property
    def test_icons(self) -> list[IconIdentifier]:
        return self.icons.common

    @property
    def test_locations(self) -> list[Location]:
        return self.locations.common


@dataclass
class DiffReport:
    """Everything a diff run found."""

    plan: DiffPlan
    outcomes: list[IconOutcome]
    location_mismatch_is_defect: bool = False
    artifacts: list[str] = field(default_factory=list)

    @property
    def reconciliation_defects(self) -> int:
        defects = self.plan.icons.defect_count
        if self.location_mismatch_is_defect:
            defects += self.plan.locations.defect_count
        return defects

    @property
    def comparison_defects(self) -> int:
        return sum(outcome.bad_count for outcome in self.outcomes)

    @property
    def total_defects(self) -> int:
        return self.reconciliation_defects + self.comparison_defects

    @property
    def success(self) -> bool:
        return self.total_defects == 0


def render(font: IconFont, icon: IconIdentifier, location: Location, task: IconTask) -> Rendering:
    """Render one icon at one location in the configured mode."""
    name = icon.primary_name
    if task.render.mode is RenderMode.RASTER:
        return font.draw_png(
            name,
            location,
            task.size,
            scale=task.render.scale,
            foreground=task.render.foreground,
            background=task.render.background,
        )
    return font.draw_svg(name, location, task.size)


def compare_icon(left: IconFont, right: IconFont, task: IconTask) -> IconOutcome:
    """Compare one icon at every location of a task.

    Ordinals are assigned in the task's location order, so they are the same
    whichever process runs the task.
    """
    start_time = time.time()
    outcome = IconOutcome(icon=task.icon)
    name = task.icon.primary_name

    for location in task.locations:
        left_rendering = render(left, task.icon, location, task)
        right_rendering = render(right, task.icon, location, task)

        if task.render.mode is RenderMode.RASTER:
            same = equivalent_rasters(left_rendering, right_rendering)
        else:
            same = equivalent_outlines(name, left_rendering, right_rendering)

        if same:
            outcome.good.append(location)
        else:
            outcome.bad.append(location)
            outcome.mismatches.append(
                Mismatch(
                    location=location,
                    ordinal=len(outcome.bad),
                    left=left_rendering,
                    right=right_rendering,
                )
            )

    outcome.duration_ms = (time.time() - start_time) * 1000
    return outcome


# Fonts owned by a worker process, set by the pool initializer
_worker_fonts: tuple[IconFont, IconFont] | None = None


def _init_worker(left_data: bytes, left_label: str, right_data: bytes, right_label: str) -> None:
    global _worker_fonts
    _worker_fonts = (
        IconFont.from_bytes(left_data, left_label),
        IconFont.from_bytes(right_data, right_label),
    )


def _compare_in_worker(task: IconTask) -> IconOutcome:
    if _worker_fonts is None:
        raise RuntimeError("Worker fonts not initialized")
    return compare_icon(_worker_fonts[0], _worker_fonts[1], task)


def compile_filter(pattern: str | None) -> re.Pattern[str] | None:
    """Compile an icon name filter.

    Raises:
        InvalidFilterError: If the pattern is not a valid regular expression
    """
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidFilterError(pattern, str(e)) from e


def filter_icons(
    icons: set[IconIdentifier], name_filter: re.Pattern[str] | None
) -> set[IconIdentifier]:
    """Keep icons with at least one name matching the filter."""
    if name_filter is None:
        return icons
    return {icon for icon in icons if any(name_filter.search(n) for n in icon.names)}


class DiffDriver:
    """Orchestrates a diff of two builds of an icon font.

    Example:
        with IconFont(Path("old.ttf")) as left, IconFont(Path("new.ttf")) as right:
            driver = DiffDriver(left, right)
            report = driver.run(DirectorySink(Path("/tmp")))
            print(report.total_defects)
    """

    def __init__(
        self,
        left: IconFont,
        right: IconFont,
        settings: IconDiffSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            left: Reference build
            right: Build under test
            settings: Sampling, rendering and processing settings
            logger: Structured logger (module logger if None)
        """
        self.left = left
        self.right = right
        self.settings = settings or IconDiffSettings()
        self.logger = logger or structlog.get_logger("icondiff")
        self.diff_logger = DiffLogger(self.logger)

    def _constellation(self, font: IconFont) -> frozenset[Location]:
        sampling = self.settings.sampling
        return constellation(
            font.axes(),
            font.location,
            steps=sampling.steps,
            strict=sampling.strict,
        )

    def plan(self, name_filter: str | None = None) -> DiffPlan:
        """Reconcile the icon sets and constellations of both fonts.

        Args:
            name_filter: Regular expression; only icons with a matching name
                are tested or reported

        Returns:
            DiffPlan with the common surface in canonical order

        Raises:
            InvalidFilterError: If name_filter is not a valid pattern
            UnknownAxisError: If strict sampling meets an unknown axis
        """
        pattern = compile_filter(name_filter)

        icons = reconcile_icons(
            filter_icons(self.left.icons(), pattern),
            filter_icons(self.right.icons(), pattern),
        )
        locations = reconcile_locations(
            self._constellation(self.left),
            self._constellation(self.right),
        )
        if not locations.is_consistent:
            self.diff_logger.log_location_mismatch(
                len(locations.only_left), len(locations.only_right)
            )

        size = self.settings.render.size or max(
            self.left.units_per_em, self.right.units_per_em
        )
        self.diff_logger.log_plan(
            icons=len(icons.common),
            locations=len(locations.common),
            only_left=len(icons.only_left),
            only_right=len(icons.only_right),
        )
        return DiffPlan(icons=icons, locations=locations, size=size)

    def _outcomes(self, tasks: list[IconTask]) -> Iterator[IconOutcome]:
        max_workers = self.settings.processing.max_workers
        if max_workers == 1 or len(tasks) <= 1:
            for task in tasks:
                yield compare_icon(self.left, self.right, task)
            return

        self.logger.info("Starting parallel comparison", tasks=len(tasks), max_workers=max_workers)
        with ProcessPoolExecutor(
            max_workers=max_workers,
            initializer=_init_worker,
            initargs=(self.left.data, self.left.label, self.right.data, self.right.label),
        ) as executor:
            try:
                # map yields in submission order
                yield from executor.map(_compare_in_worker, tasks)
            except BaseException:
                # Drop queued icons when the run fails or is abandoned
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    def execute(
        self,
        plan: DiffPlan,
        sink: ArtifactSink,
        on_outcome: Callable[[IconOutcome], None] | None = None,
    ) -> DiffReport:
        """Compare every common icon at every common location.

        Args:
            plan: Reconciled test surface
            sink: Destination for failure artifacts
            on_outcome: Called once per icon, in canonical icon order

        Returns:
            DiffReport with per-icon outcomes

        Raises:
            ArtifactWriteError: If an artifact cannot be written
        """
        stats = self.diff_logger.stats
        stats.start_time = time.time()
        writer = FailureArtifactWriter(sink)
        report = DiffReport(
            plan=plan,
            outcomes=[],
            location_mismatch_is_defect=self.settings.diff.location_mismatch_is_defect,
        )

        tasks = [
            IconTask(
                icon=icon,
                locations=tuple(plan.test_locations),
                render=self.settings.render,
                size=plan.size,
            )
            for icon in plan.test_icons
        ]

        with closing(self._outcomes(tasks)) as outcomes:
            for outcome in outcomes:
                self._record(outcome, writer, report, on_outcome)

        stats.end_time = time.time()
        self.logger.info(
            "Diff complete",
            icons=len(report.outcomes),
            locations=stats.location_count,
            defects=report.total_defects,
            failing_icons=stats.failing_icons,
            avg_icon_time_ms=stats.avg_icon_time_ms,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return report

    def _record(
        self,
        outcome: IconOutcome,
        writer: FailureArtifactWriter,
        report: DiffReport,
        on_outcome: Callable[[IconOutcome], None] | None,
    ) -> None:
        """Persist both sides of every mismatch of one icon and report it."""
        name = outcome.icon.primary_name
        for mismatch in outcome.mismatches:
            self.diff_logger.log_mismatch(outcome.icon, mismatch.location, mismatch.ordinal)
            for side, rendering in ((LEFT, mismatch.left), (RIGHT, mismatch.right)):
                if isinstance(rendering, bytes):
                    keys = writer.write_raster(name, side, rendering, mismatch.ordinal)
                else:
                    keys = writer.write_outline(name, side, rendering, mismatch.ordinal)
                for key in keys:
                    self.diff_logger.log_artifact(key)
                report.artifacts.extend(keys)

        self.diff_logger.log_icon_complete(
            outcome.icon, outcome.bad_count, outcome.total, outcome.duration_ms
        )
        report.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    def run(
        self,
        sink: ArtifactSink,
        name_filter: str | None = None,
        on_outcome: Callable[[IconOutcome], None] | None = None,
    ) -> DiffReport:
        """Plan and execute a full diff."""
        return self.execute(self.plan(name_filter), sink, on_outcome)
