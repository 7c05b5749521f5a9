"""Stop sampling for variation axes.

Each recognized axis is sampled from its minimum in fixed steps, always
including the default and maximum. Unrecognized axes are sampled at
min/default/max only, or rejected when strict sampling is requested.
"""

from collections.abc import Mapping

from icondiff.config.settings import default_steps
from icondiff.domain import Axis
from icondiff.exceptions import UnknownAxisError

STEP_POLICY: Mapping[str, int] = default_steps()


def stepped_stops(minimum: int, default: int, maximum: int, step: int) -> list[int]:
    """Stops from minimum in increments of step, plus default and max.

    Returns:
        Sorted, deduplicated stops
    """
    values = []
    current = minimum
    while current <= maximum:
        values.append(current)
        current += step
    values.append(default)
    values.append(maximum)
    return sorted(set(values))


def stops(
    axis: Axis,
    steps: Mapping[str, int] = STEP_POLICY,
    strict: bool = False,
) -> list[int]:
    """Representative coordinates for one axis.

    Args:
        axis: Axis to sample
        steps: Step size per axis tag
        strict: Raise for tags missing from steps instead of sampling
            min/default/max

    Returns:
        Ascending, distinct stops containing default and max

    Raises:
        UnknownAxisError: If strict and the tag has no step
    """
    step = steps.get(axis.tag)
    if step is None:
        if strict:
            raise UnknownAxisError(axis.tag, steps.keys())
        return sorted({axis.min, axis.default, axis.max})
    return stepped_stops(axis.min, axis.default, axis.max, step)
