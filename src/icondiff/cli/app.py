"""CLI application entry point for icondiff.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from icondiff import __version__
from icondiff.cli.output import (
    print_artifacts,
    print_error,
    print_failures,
    print_font_info,
    print_header,
    print_icon_outcome,
    print_location_defects,
    print_location_mismatch,
    print_only,
    print_success,
    print_testing,
)
from icondiff.config import (
    DiffConfig,
    IconDiffSettings,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    RenderConfig,
    RenderMode,
    SamplingConfig,
)
from icondiff.core import DiffDriver, DirectorySink
from icondiff.exceptions import FontLoadError, IconDiffError
from icondiff.io import IconFont
from icondiff.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="icondiff",
    help="Check that two builds of a variable icon font render identically.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"icondiff v{__version__}")
        raise typer.Exit()


@app.command()
def diff(
    left_font: Annotated[
        Path,
        typer.Argument(
            help="Reference build of the font",
            show_default=False,
        ),
    ],
    right_font: Annotated[
        Path,
        typer.Argument(
            help="Build under test",
            show_default=False,
        ),
    ],
    name_filter: Annotated[
        str | None,
        typer.Option(
            "--filter",
            "-f",
            help="Regex filter for icon names",
        ),
    ] = None,
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Comparison mode (outline|raster)",
        ),
    ] = "outline",
    size: Annotated[
        int | None,
        typer.Option(
            "--size",
            "-s",
            help="Render size (default: units per em)",
            min=1,
        ),
    ] = None,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            help="Pixel scale for raster mode",
        ),
    ] = 1.0,
    foreground: Annotated[
        str,
        typer.Option(
            "--foreground",
            help="Raster foreground colour",
        ),
    ] = "#000000",
    background: Annotated[
        str,
        typer.Option(
            "--background",
            help="Raster background colour",
        ),
    ] = "#ffffff",
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for failure artifacts (default: temp dir)",
        ),
    ] = None,
    strict_axes: Annotated[
        bool,
        typer.Option(
            "--strict-axes",
            help="Fail on axes without a sampling step",
        ),
    ] = False,
    strict_locations: Annotated[
        bool,
        typer.Option(
            "--strict-locations",
            help="Count locations present in only one build as failures",
        ),
    ] = False,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker processes (default: 1)",
            min=1,
        ),
    ] = 1,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print the report",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compare two builds of a variable icon font across their design space.

    Every icon present in both builds is rendered at every sampled location
    of every axis. Icons missing from one build and renderings that differ
    are reported; the exit status is 0 only if there are none.

    Example:
        icondiff MaterialSymbols-old.ttf MaterialSymbols-new.ttf -f '^home'
    """
    try:
        render_mode = RenderMode(mode.lower())
    except ValueError:
        print_error(
            f"Invalid mode: {mode}",
            details="Valid values: outline, raster",
        )
        raise typer.Exit(code=1)

    try:
        settings = IconDiffSettings(
            sampling=SamplingConfig(strict=strict_axes),
            render=RenderConfig(
                mode=render_mode,
                size=size,
                scale=scale,
                foreground=foreground,
                background=background,
            ),
            diff=DiffConfig(location_mismatch_is_defect=strict_locations),
            output=OutputConfig(artifact_dir=output_dir) if output_dir else OutputConfig(),
            processing=ProcessingConfig(max_workers=workers),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    fonts: list[IconFont] = []
    try:
        for path in (left_font, right_font):
            font = IconFont(path)
            font.load()
            fonts.append(font)
        left, right = fonts

        if not quiet:
            for side, font in (("left", left), ("right", right)):
                print_font_info(
                    side,
                    font.label,
                    [axis.tag for axis in font.axes()],
                    font.units_per_em,
                )

        driver = DiffDriver(left, right, settings, logger)
        plan = driver.plan(name_filter)

        if not plan.locations.is_consistent:
            print_location_mismatch()
            if settings.diff.location_mismatch_is_defect:
                print_location_defects("only_left_location", plan.locations.only_left)
                print_location_defects("only_right_location", plan.locations.only_right)

        print_testing(len(plan.test_icons), len(plan.test_locations))
        print_only("only_left", plan.icons.only_left)
        print_only("only_right", plan.icons.only_right)

        report = driver.execute(
            plan,
            DirectorySink(settings.output.artifact_dir),
            on_outcome=print_icon_outcome,
        )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except IconDiffError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        for font in fonts:
            font.close()

    if report.success:
        if not quiet:
            print_success(len(plan.test_icons), len(plan.test_locations))
        raise typer.Exit(code=0)

    print_failures(report.total_defects)
    if report.artifacts and not quiet:
        print_artifacts(settings.output.artifact_dir, len(report.artifacts))
    raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
