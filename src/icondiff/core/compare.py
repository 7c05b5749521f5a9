"""Equivalence checks between two renderings of the same icon.

Outline comparison is structural and exact, with one tolerance: a closed
subpath may start one segment later on the right than on the left. Raster
comparison is byte-for-byte.
"""

from icondiff.domain import Subpath, parse_outline
from icondiff.exceptions import OutlineParseError

PATH_PREAMBLE = '<path d="'


def extract_path(icon_name: str, svg: str) -> tuple[str, str, str]:
    """Split an SVG document around its first path data attribute.

    Returns:
        (text up to and including `<path d="`, path data, remaining text)

    Raises:
        OutlineParseError: If the document has no path data
    """
    start = svg.find(PATH_PREAMBLE)
    if start < 0:
        raise OutlineParseError(icon_name, "no <path d=...> in rendering")
    start += len(PATH_PREAMBLE)
    end = svg.find('"', start)
    if end < 0:
        raise OutlineParseError(icon_name, "unterminated path data")
    return svg[:start], svg[start:end], svg[end:]


def rotate_right(items: list, n: int = 1) -> list:
    """Rotate a list right by n positions; the last n items move to the front."""
    if not items:
        return items
    n %= len(items)
    return items[-n:] + items[:-n] if n else list(items)


def equivalent_subpaths(left: Subpath, right: Subpath) -> bool:
    """Check two subpaths for equivalence.

    Subpaths are equivalent when their segments and closure are identical,
    or when both are closed, the left one is not empty and rotating the
    right one's segments right by one position reproduces the left one.

    Segments make the closing line explicit, so a contour closed by a line
    back to its start matches the same contour closed by `Z` alone.
    Subpaths without segments only match when their pen commands do.
    """
    if left == right:
        return True
    left_segments = left.segments
    right_segments = right.segments
    if left.closed != right.closed:
        return False
    if not left_segments or not right_segments:
        # Pen commands already differ
        return False
    if left_segments == right_segments:
        return True
    if not left.closed:
        return False
    # The contour start point moved by one segment
    return rotate_right(right_segments) == left_segments


def equivalent_outlines(icon_name: str, left_svg: str, right_svg: str) -> bool:
    """Check two SVG renderings of an icon for structural equivalence.

    Subpaths are compared pairwise by index; differing subpath counts are
    never equivalent.

    Args:
        icon_name: Icon being compared, for error messages
        left_svg: Rendering from the left font
        right_svg: Rendering from the right font

    Returns:
        True if every subpath pair is equivalent

    Raises:
        OutlineParseError: If either rendering cannot be parsed
    """
    left = parse_outline(icon_name, extract_path(icon_name, left_svg)[1])
    right = parse_outline(icon_name, extract_path(icon_name, right_svg)[1])

    if len(left) != len(right):
        return False

    return all(equivalent_subpaths(a, b) for a, b in zip(left, right))


def equivalent_rasters(left: bytes, right: bytes) -> bool:
    """Exact equality of two encoded pixel buffers."""
    return left == right
