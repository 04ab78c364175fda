"""
Unit tests for geometry primitives.
"""

import math

import pytest
from spacebind.geometry import (
    Area,
    Axis,
    AxisExtent,
    loose_equals,
    scale_percent_frame,
    to_percent_frame,
    within,
)


@pytest.mark.unit
class TestLooseEquals:
    """Test tolerance-based comparison."""

    @pytest.mark.parametrize("value", [0, 1, -3.5, 1e9, 0.0001])
    def test_equal_to_itself(self, value):
        assert loose_equals(value, value)

    def test_zero_epsilon_is_exact(self):
        assert loose_equals(2.0, 2.0, 0)
        assert not loose_equals(2.0, 2.0000001, 0)

    def test_close_values_match(self):
        # 0.01 <= 0.01 * 2.005
        assert loose_equals(2.0, 2.01)

    def test_distant_values_do_not_match(self):
        assert not loose_equals(2.0, 2.1)

    def test_opposite_signs_do_not_match(self):
        assert not loose_equals(-2, 2)

    def test_symmetric(self):
        assert loose_equals(100, 100.9) == loose_equals(100.9, 100)
        assert loose_equals(1000, 1012, 0.012) == loose_equals(1012, 1000, 0.012)

    def test_zero_against_nonzero(self):
        assert not loose_equals(0, 0.001)


@pytest.mark.unit
class TestWithin:
    """Test absolute tolerance comparison."""

    def test_inside_tolerance(self):
        assert within(1000, 996, 5)
        assert within(996, 1000, 5)

    def test_boundary_is_inclusive(self):
        assert within(1000, 995, 5)

    def test_outside_tolerance(self):
        assert not within(800, 1000, 5)

    def test_zero_tolerance(self):
        assert within(3, 3, 0)
        assert not within(3, 3.5, 0)


@pytest.mark.unit
class TestArea:
    """Test Area helpers."""

    def test_edges(self):
        area = Area(10, 20, 300, 400)
        assert area.right == 310
        assert area.bottom == 420

    def test_extents(self):
        area = Area(10, 20, 300, 400)
        assert area.extent(Axis.HORIZONTAL) == AxisExtent(10, 300)
        assert area.extent(Axis.VERTICAL) == AxisExtent(20, 400)

    def test_from_extents(self):
        area = Area.from_extents(AxisExtent(1, 2), AxisExtent(3, 4))
        assert area == Area(1, 3, 2, 4)

    def test_extent_end(self):
        assert AxisExtent(100, 50).end == 150

    def test_axis_edge_names(self):
        assert Axis.HORIZONTAL.start_edge == "left"
        assert Axis.HORIZONTAL.end_edge == "right"
        assert Axis.VERTICAL.start_edge == "top"
        assert Axis.VERTICAL.end_edge == "bottom"

    def test_loose_equals(self):
        assert Area(100, 100, 800, 600).loose_equals(Area(100.5, 100, 800, 600))
        assert not Area(100, 100, 800, 600).loose_equals(Area(110, 100, 800, 600))

    def test_describe(self):
        assert Area(0, 0, 10, 20).describe() == "left: 0, top: 0, right: 10, bottom: 20"


@pytest.mark.unit
class TestPercentFrames:
    """Test conversion between percentage and absolute frames."""

    def test_scale_full_frame(self, laptop_area):
        frame = scale_percent_frame(Area(0, 0, 100, 100), laptop_area)
        assert frame == laptop_area

    def test_scale_right_half(self, standard_area):
        frame = scale_percent_frame(Area(50, 0, 50, 100), standard_area)
        assert frame == Area(960, 0, 960, 1080)

    def test_scale_offset_screen(self, laptop_area):
        frame = scale_percent_frame(Area(25, 50, 50, 50), laptop_area)
        assert frame == Area(1920 + 360, 450, 720, 450)

    def test_to_percent(self, laptop_area):
        percent = to_percent_frame(Area(2280, 450, 720, 450), laptop_area)
        assert percent == Area(25, 50, 50, 50)

    def test_to_percent_of_empty_screen(self):
        with pytest.raises(ZeroDivisionError):
            to_percent_frame(Area(0, 0, 10, 10), Area(0, 0, 0, 0))

    def test_round_trip_thirds(self, standard_area):
        percent = Area(200 / 3, 0, 100 / 3, 100)
        absolute = scale_percent_frame(percent, standard_area)
        assert math.isclose(absolute.x, 1280)
        assert math.isclose(absolute.width, 640)
