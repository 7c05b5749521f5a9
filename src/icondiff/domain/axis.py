"""Variation axis and design-space location types.

This module defines the value objects describing a font's design space:
- Axis: One variation axis as read from fvar
- Location: One point in the design space, in canonical normalized form
"""

from dataclasses import dataclass, field

from fontTools.misc.fixedTools import fixedToFloat

from icondiff.exceptions import AxisRangeError

# Normalized coordinates are stored as F2Dot14, the precision fonts use for them
F2DOT14_BITS = 14


@dataclass(frozen=True, slots=True)
class Axis:
    """A variation axis of a font.

    Attributes:
        tag: 4-character axis tag (e.g., "wght", "FILL")
        min: Minimum user-space value
        default: Default user-space value
        max: Maximum user-space value
    """

    tag: str
    min: int
    default: int
    max: int

    def __post_init__(self) -> None:
        if not self.min <= self.default <= self.max:
            raise AxisRangeError(self.tag, self.min, self.default, self.max)

    @property
    def triple(self) -> tuple[int, int, int]:
        """(min, default, max) as used by fontTools normalization."""
        return (self.min, self.default, self.max)


@dataclass(frozen=True, slots=True)
class Location:
    """A point in a font's variation design space.

    Two locations are equal when their canonical normalized coordinates
    are equal, whatever user-space values they were built from.

    Attributes:
        coords: (tag, F2Dot14 normalized value) pairs in font axis order
        user: (tag, user-space value) pairs the location was built from
    """

    coords: tuple[tuple[str, int], ...]
    user: tuple[tuple[str, float], ...] = field(default=(), compare=False, hash=False)

    def sort_key(self) -> tuple[tuple[str, int], ...]:
        """Canonical ordering key."""
        return self.coords

    def normalized(self) -> dict[str, float]:
        """Normalized coordinates as floats, keyed by axis tag."""
        return {tag: fixedToFloat(value, F2DOT14_BITS) for tag, value in self.coords}

    def describe(self) -> str:
        """Human-readable form, preferring user-space values."""
        if self.user:
            return ",".join(f"{tag}={value:g}" for tag, value in self.user)
        return ",".join(f"{tag}={value:g}" for tag, value in self.normalized().items())

    def __str__(self) -> str:
        return self.describe() or "default"
