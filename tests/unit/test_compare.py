"""Tests for outline and raster equivalence."""

import pytest

from icondiff.core.compare import (
    equivalent_outlines,
    equivalent_rasters,
    equivalent_subpaths,
    extract_path,
    rotate_right,
)
from icondiff.domain import parse_outline
from icondiff.exceptions import OutlineParseError

SQUARE = "M0 0L10 0L10 10L0 10Z"
# Same square starting one segment later
SQUARE_SHIFTED = "M10 0L10 10L0 10L0 0Z"
# Same square starting two segments later
SQUARE_SHIFTED_TWICE = "M10 10L0 10L0 0L10 0Z"
SMALL_SQUARE = "M20 20L30 20L30 30L20 30Z"


def svg(path: str) -> str:
    return f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10"><path d="{path}"/></svg>'


def subpath(path: str):
    (only,) = parse_outline("test", path).subpaths
    return only


class TestExtractPath:
    """Tests for locating path data in an SVG document."""

    def test_split(self):
        preamble, path, suffix = extract_path("home", svg(SQUARE))
        assert preamble.endswith('<path d="')
        assert path == SQUARE
        assert suffix == '"/></svg>'

    def test_missing_path(self):
        with pytest.raises(OutlineParseError, match="home"):
            extract_path("home", "<svg></svg>")


class TestRotateRight:
    def test_rotate(self):
        assert rotate_right([1, 2, 3, 4]) == [4, 1, 2, 3]
        assert rotate_right([1, 2, 3, 4], 2) == [3, 4, 1, 2]

    def test_empty(self):
        assert rotate_right([]) == []


class TestEquivalentSubpaths:
    """Tests for single subpath comparison."""

    def test_reflexive(self):
        assert equivalent_subpaths(subpath(SQUARE), subpath(SQUARE))

    def test_rotated_by_one(self):
        assert equivalent_subpaths(subpath(SQUARE), subpath(SQUARE_SHIFTED))

    def test_rotated_by_two(self):
        assert not equivalent_subpaths(subpath(SQUARE), subpath(SQUARE_SHIFTED_TWICE))

    def test_explicit_closing_line(self):
        """A closing lineTo back to the start draws the same segments."""
        assert equivalent_subpaths(subpath(SQUARE), subpath("M0 0L10 0L10 10L0 10L0 0Z"))

    def test_relative_commands(self):
        assert equivalent_subpaths(subpath(SQUARE), subpath("m0 0l10 0l0 10l-10 0z"))

    def test_horizontal_vertical_shorthand(self):
        assert equivalent_subpaths(subpath(SQUARE), subpath("M0 0H10V10H0Z"))

    def test_coordinate_change(self):
        assert not equivalent_subpaths(subpath(SQUARE), subpath("M0 0L10 0L10 11L0 10Z"))

    def test_segment_type_change(self):
        assert not equivalent_subpaths(subpath(SQUARE), subpath("M0 0L10 0Q10 10 0 10Z"))

    def test_missing_segment(self):
        assert not equivalent_subpaths(subpath(SQUARE), subpath("M0 0L10 0L10 10Z"))

    def test_open_subpath_not_rotated(self):
        """Only closed contours may start elsewhere."""
        assert not equivalent_subpaths(subpath("M0 0L10 0L10 10"), subpath("M10 0L10 10L0 0"))

    def test_open_versus_closed(self):
        assert not equivalent_subpaths(subpath("M0 0L10 0L10 10L0 0"), subpath("M0 0L10 0L10 10Z"))

    def test_empty_subpaths(self):
        assert equivalent_subpaths(subpath("M5 5"), subpath("M5 5"))
        assert not equivalent_subpaths(subpath("M5 5"), subpath("M6 6"))

    def test_closed_empty_subpaths_compare_move_point(self):
        assert equivalent_subpaths(subpath("M5 5Z"), subpath("M5 5Z"))
        assert not equivalent_subpaths(subpath("M5 5Z"), subpath("M6 6Z"))

    def test_empty_versus_drawn(self):
        assert not equivalent_subpaths(subpath("M0 0Z"), subpath(SQUARE))
        assert not equivalent_subpaths(subpath(SQUARE), subpath("M0 0Z"))

    def test_curves_rotated_by_one(self):
        left = "M0 0C5 0 10 5 10 10L0 10Z"
        right = "M10 10L0 10L0 0C5 0 10 5 10 10Z"
        assert equivalent_subpaths(subpath(left), subpath(right))


class TestEquivalentOutlines:
    """Tests for whole outline comparison."""

    def test_reflexive(self):
        path = SQUARE + SMALL_SQUARE
        assert equivalent_outlines("home", svg(path), svg(path))

    def test_one_subpath_rotated(self):
        assert equivalent_outlines(
            "home", svg(SQUARE + SMALL_SQUARE), svg(SQUARE_SHIFTED + SMALL_SQUARE)
        )

    def test_last_subpath_is_compared(self):
        assert not equivalent_outlines(
            "home",
            svg(SQUARE + SMALL_SQUARE),
            svg(SQUARE + "M20 20L31 20L30 30L20 30Z"),
        )

    def test_subpath_count_differs(self):
        assert not equivalent_outlines("home", svg(SQUARE + SMALL_SQUARE), svg(SQUARE))

    def test_subpath_order_matters(self):
        assert not equivalent_outlines(
            "home", svg(SQUARE + SMALL_SQUARE), svg(SMALL_SQUARE + SQUARE)
        )

    def test_empty_paths(self):
        assert equivalent_outlines("blank", svg(""), svg(""))
        assert not equivalent_outlines("blank", svg(""), svg(SQUARE))

    def test_malformed_path(self):
        with pytest.raises(OutlineParseError, match="home"):
            equivalent_outlines("home", svg("M0 0L10"), svg(SQUARE))


class TestEquivalentRasters:
    """Tests for exact buffer comparison."""

    def test_identical(self):
        assert equivalent_rasters(b"\x89PNG\x00\x01", b"\x89PNG\x00\x01")

    def test_single_byte_differs(self):
        buffer = bytes(range(256))
        changed = bytearray(buffer)
        changed[128] ^= 1
        assert not equivalent_rasters(buffer, bytes(changed))

    def test_length_differs(self):
        assert not equivalent_rasters(b"\x00" * 4, b"\x00" * 5)
