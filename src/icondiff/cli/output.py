"""Console output helpers for the CLI.

The diff report goes to stdout as plain lines so build pipelines can grep
it. Headers, notices and errors go to stderr through Rich.
"""

from pathlib import Path

from rich.console import Console
from rich.text import Text

from icondiff.core.driver import IconOutcome
from icondiff.domain import IconIdentifier, Location

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

LOCATION_MISMATCH = "Inconsistent location sets, did axes or ranges of axes change?"


def report(line: str) -> None:
    """Print one report line verbatim to stdout."""
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    err_console.print(f"\n[bold]icondiff[/bold] v{version}")
    err_console.print("─" * 44)


def print_font_info(side: str, font_path: str, axes: list[str], upm: int) -> None:
    """Print font information.

    Args:
        side: "left" or "right"
        font_path: Path to the font file
        axes: Axis tags of the font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line = Text(f"  {side:<5} ")
    line.append(font_path)
    err_console.print(line)
    axes_str = ", ".join(axes) if axes else "static"
    err_console.print(f"        {axes_str} {SYM_DOT} {upm:,} UPM")


def print_location_mismatch() -> None:
    report(LOCATION_MISMATCH)


def print_location_defects(desc: str, locations: list[Location]) -> None:
    for location in locations:
        report(f"{desc} {location}")


def print_testing(icon_count: int, location_count: int) -> None:
    report(f"Testing {icon_count} icons at {location_count} locations...")


def print_only(desc: str, icons: list[IconIdentifier]) -> None:
    """Print icons present on one side only.

    Args:
        desc: "only_left" or "only_right"
        icons: Offending icons, in canonical order
    """
    for icon in icons:
        report(f"{desc} {icon.key}")


def print_icon_outcome(outcome: IconOutcome) -> None:
    """Print whether an icon passed at every location."""
    name = outcome.icon.primary_name
    if outcome.passed:
        report(f"{name} passes")
    else:
        report(f"{name} fails at {outcome.bad_count}/{outcome.total} locations")


def print_failures(errors: int) -> None:
    report(f"Eeek, {errors} failures!")


def print_artifacts(directory: Path, count: int) -> None:
    """Print where failure artifacts were written."""
    line = Text(f"\n{SYM_DOT} {count} failure artifacts in ")
    line.append(str(directory), style="bold")
    err_console.print(line)


def print_success(icons: int, locations: int) -> None:
    err_console.print(
        f"\n[bold green]{SYM_OK} Identical[/bold green] "
        f"{icons} icons {SYM_DOT} {locations} locations"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")
