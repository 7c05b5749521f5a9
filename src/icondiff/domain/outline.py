"""Vector outline representation used for structural comparison.

An outline is the sequence of subpaths of a rendered SVG path. Subpath
boundaries are the positions of move commands in the path data; each
subpath is parsed with fontTools' SVG path parser into pen commands, from
which the drawable segments are derived.
"""

from dataclasses import dataclass
from typing import NamedTuple

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path

from icondiff.exceptions import OutlineParseError

Coordinate = tuple[float, float]
PenCommand = tuple[str, tuple[Coordinate, ...]]

MOVE_COMMANDS = frozenset("mM")

_SEGMENT_NAMES = {"line": "Line", "quad": "Quad", "cubic": "Cubic"}


class Segment(NamedTuple):
    """One drawable segment; points include the start point."""

    kind: str
    points: tuple[Coordinate, ...]

    def describe(self) -> str:
        points = ", ".join(f"({x!r}, {y!r})" for x, y in self.points)
        return f"{_SEGMENT_NAMES[self.kind]}({points})"


@dataclass(frozen=True)
class Subpath:
    """A contour delimited by a move command.

    Attributes:
        elements: Pen commands with absolute points, as recorded
    """

    elements: tuple[PenCommand, ...]

    @property
    def closed(self) -> bool:
        return any(op == "closePath" for op, _ in self.elements)

    @property
    def segments(self) -> list[Segment]:
        """Drawable segments, including the implicit closing line."""
        segments: list[Segment] = []
        start: Coordinate | None = None
        current: Coordinate | None = None
        for op, points in self.elements:
            if op == "moveTo":
                start = current = points[0]
            elif op == "lineTo":
                segments.append(Segment("line", (current, points[0])))
                current = points[0]
            elif op == "qCurveTo":
                pieces = [points] if len(points) == 2 else decomposeQuadraticSegment(points)
                for off, on in pieces:
                    segments.append(Segment("quad", (current, off, on)))
                    current = on
            elif op == "curveTo":
                pieces = [points] if len(points) == 3 else decomposeSuperBezierSegment(points)
                for c1, c2, on in pieces:
                    segments.append(Segment("cubic", (current, c1, c2, on)))
                    current = on
            elif op == "closePath":
                if current is not None and current != start:
                    segments.append(Segment("line", (current, start)))
                current = start
        return segments

    def __len__(self) -> int:
        return len(self.segments)


@dataclass(frozen=True)
class Outline:
    """All subpaths of a rendered icon, in path order."""

    subpaths: tuple[Subpath, ...]

    def __len__(self) -> int:
        return len(self.subpaths)

    def __iter__(self):
        return iter(self.subpaths)


def split_subpaths(path_data: str) -> list[str]:
    """Split SVG path data at every move command.

    Text before the first move command carries no drawing and is dropped.
    """
    starts = [i for i, c in enumerate(path_data) if c in MOVE_COMMANDS]
    ends = starts[1:] + [len(path_data)]
    return [path_data[start:end] for start, end in zip(starts, ends)]


def parse_subpath(icon_name: str, chunk: str) -> Subpath:
    """Parse one subpath's path data into pen commands."""
    pen = RecordingPen()
    try:
        parse_path(chunk, pen)
    except (ValueError, IndexError) as e:
        raise OutlineParseError(icon_name, f"{e} in {chunk!r}") from e
    elements = tuple(
        (op, tuple((float(x), float(y)) for x, y in args)) for op, args in pen.value
    )
    return Subpath(elements=elements)


def parse_outline(icon_name: str, path_data: str) -> Outline:
    """Parse SVG path data into an Outline.

    Args:
        icon_name: Icon the path belongs to, for error messages
        path_data: Contents of an SVG path's d attribute

    Returns:
        Outline with one subpath per move command

    Raises:
        OutlineParseError: If the path data is malformed
    """
    return Outline(
        subpaths=tuple(parse_subpath(icon_name, chunk) for chunk in split_subpaths(path_data))
    )
