"""Constellation generation.

A constellation is the cartesian product of every axis' stops, turned into
canonical Locations by the font that owns the axes. Locations that
canonicalize to the same coordinates collapse into one.
"""

from collections.abc import Callable, Iterable, Mapping

from icondiff.core.sampler import STEP_POLICY, stops
from icondiff.domain import Axis, Location

RawLocation = dict[str, float]


def raw_constellation(
    axes: list[Axis],
    steps: Mapping[str, int] = STEP_POLICY,
    strict: bool = False,
) -> list[RawLocation]:
    """Cross product of per-axis stops in user-space coordinates.

    Starts from a single empty location and extends every partial location
    by every stop of the next axis.

    Args:
        axes: Axes of the font
        steps: Step size per axis tag
        strict: Reject axes without a step

    Returns:
        One dict per grid point; a font without axes yields one empty dict
    """
    stop_lists = [(axis.tag, stops(axis, steps, strict)) for axis in axes]

    locations: list[RawLocation] = [{}]
    while stop_lists:
        tag, values = stop_lists.pop()
        locations = [
            {**location, tag: float(value)}
            for location in locations
            for value in values
        ]
    return locations


def constellation(
    axes: list[Axis],
    canonicalize: Callable[[RawLocation], Location],
    steps: Mapping[str, int] = STEP_POLICY,
    strict: bool = False,
) -> frozenset[Location]:
    """Build the set of canonical locations to test for one font.

    Args:
        axes: Axes of the font
        canonicalize: The font's mapping from user-space values to Location
        steps: Step size per axis tag
        strict: Reject axes without a step

    Returns:
        Set of distinct Locations; its size is at most the product of the
        per-axis stop counts
    """
    return frozenset(canonicalize(raw) for raw in raw_constellation(axes, steps, strict))


def ordered(locations: Iterable[Location]) -> list[Location]:
    """Locations in canonical processing order."""
    return sorted(locations, key=Location.sort_key)
