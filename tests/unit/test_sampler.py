"""Tests for axis stop sampling."""

import pytest

from icondiff.core.sampler import STEP_POLICY, stepped_stops, stops
from icondiff.domain import Axis
from icondiff.exceptions import AxisRangeError, UnknownAxisError


class TestSteppedStops:
    """Tests for the stepping algorithm."""

    def test_weight_scenario(self):
        """wght 100..700 with default 400 samples every 200 plus the default."""
        assert stops(Axis("wght", 100, 400, 700)) == [100, 300, 400, 500, 700]

    def test_fill_axis(self):
        assert stops(Axis("FILL", 0, 0, 1)) == [0, 1]

    def test_max_appended_when_off_step(self):
        """opsz 20..48 steps by 16 and still ends at max."""
        assert stops(Axis("opsz", 20, 24, 48)) == [20, 24, 36, 48]

    def test_grade_negative_range(self):
        assert stops(Axis("GRAD", -50, 0, 200)) == list(range(-50, 201, 25))

    def test_round_axis(self):
        assert stops(Axis("ROND", 0, 0, 100)) == [0, 50, 100]

    def test_min_equals_max(self):
        """A degenerate axis yields a single stop."""
        assert stops(Axis("wght", 400, 400, 400)) == [400]

    def test_stepped_stops_sorted_and_unique(self):
        values = stepped_stops(0, 7, 10, 3)
        assert values == sorted(set(values))
        assert values == [0, 3, 6, 7, 9, 10]

    @pytest.mark.parametrize(
        "axis",
        [
            Axis("wght", 100, 400, 700),
            Axis("wght", 100, 350, 900),
            Axis("opsz", 20, 24, 48),
            Axis("GRAD", -50, 0, 200),
            Axis("ROND", 0, 30, 100),
            Axis("FILL", 0, 1, 1),
        ],
    )
    def test_stepped_properties(self, axis):
        """Ascending, distinct, covering min, default and max."""
        values = stops(axis)
        step = STEP_POLICY[axis.tag]

        assert all(a < b for a, b in zip(values, values[1:]))
        assert axis.default in values
        assert axis.max in values
        assert values[0] == axis.min
        expected_steps = set(range(axis.min, axis.max + 1, step))
        assert expected_steps <= set(values)


class TestUnknownAxis:
    """Tests for axes without a sampling step."""

    def test_permissive_fallback(self):
        assert stops(Axis("wdth", 75, 100, 125)) == [75, 100, 125]

    def test_permissive_fallback_dedups(self):
        assert stops(Axis("slnt", -10, 0, 0)) == [-10, 0]

    def test_strict_raises(self):
        with pytest.raises(UnknownAxisError) as exc_info:
            stops(Axis("wdth", 75, 100, 125), strict=True)

        assert exc_info.value.tag == "wdth"
        assert "wght" in exc_info.value.known_tags
        assert "wdth" in str(exc_info.value)

    def test_strict_accepts_known(self):
        assert stops(Axis("wght", 100, 400, 700), strict=True) == [100, 300, 400, 500, 700]

    def test_tags_are_case_sensitive(self):
        """WGHT is not wght."""
        assert stops(Axis("WGHT", 100, 400, 700)) == [100, 400, 700]

    def test_custom_steps(self):
        assert stops(Axis("wdth", 75, 100, 125), steps={"wdth": 25}) == [75, 100, 125]
        assert stops(Axis("wght", 100, 400, 700), steps={"wght": 300}) == [100, 400, 700]


class TestAxis:
    """Tests for the Axis value object."""

    def test_invalid_range(self):
        with pytest.raises(AxisRangeError, match="wght"):
            Axis("wght", 700, 400, 100)

    def test_default_outside_range(self):
        with pytest.raises(AxisRangeError):
            Axis("FILL", 0, 2, 1)

    def test_hashable(self):
        assert len({Axis("wght", 100, 400, 700), Axis("wght", 100, 400, 700)}) == 1
