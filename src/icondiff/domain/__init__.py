"""Domain models for icondiff.

This module contains the value objects shared by the sampling, reconciliation
and comparison layers. All models are:

- Immutable (frozen dataclasses)
- Hashable by content, so equal values deduplicate in sets
- Independent of fonttools table objects

Key classes:
- Axis: A variation axis (tag, min, default, max)
- Location: A canonical point in the design space
- IconIdentifier: Names and codepoints identifying an icon
- Outline, Subpath, Segment: Parsed vector renderings
"""

from icondiff.domain.axis import Axis, Location
from icondiff.domain.icon import IconIdentifier
from icondiff.domain.outline import (
    Outline,
    Segment,
    Subpath,
    parse_outline,
    split_subpaths,
)

__all__: list[str] = [
    "Axis",
    "IconIdentifier",
    "Location",
    "Outline",
    "Segment",
    "Subpath",
    "parse_outline",
    "split_subpaths",
]
