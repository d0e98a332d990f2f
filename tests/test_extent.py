"""Tests for the tilegrid.extent module."""

import pytest

from tilegrid.extent import (
    Corner,
    contains_coordinate,
    create_extent,
    get_center,
    get_corner,
    get_height,
    get_top_left,
    get_width,
)


EXTENT = (-10.0, -5.0, 30.0, 15.0)


class TestSize:
    """Tests for width, height and center."""

    def test_width_and_height(self):
        """get_width and get_height should measure the extent axes."""
        assert get_width(EXTENT) == 40.0
        assert get_height(EXTENT) == 20.0

    def test_center(self):
        """get_center should return the midpoint."""
        assert get_center(EXTENT) == (10.0, 5.0)

    def test_create_extent(self):
        """create_extent should keep the bounds in order."""
        assert create_extent(1, 2, 3, 4) == (1, 2, 3, 4)


class TestGetCorner:
    """Tests for the get_corner function."""

    @pytest.mark.parametrize("corner, expected", [
        (Corner.TOP_LEFT, (-10.0, 15.0)),
        (Corner.TOP_RIGHT, (30.0, 15.0)),
        (Corner.BOTTOM_LEFT, (-10.0, -5.0)),
        (Corner.BOTTOM_RIGHT, (30.0, -5.0)),
    ])
    def test_each_corner(self, corner, expected):
        """get_corner should return the requested corner."""
        assert get_corner(EXTENT, corner) == expected

    def test_accepts_string_values(self):
        """get_corner should accept the corner names as plain strings."""
        assert get_corner(EXTENT, "bottom-left") == (-10.0, -5.0)

    def test_rejects_unknown_corner(self):
        """get_corner should raise ValueError for unknown corners."""
        with pytest.raises(ValueError):
            get_corner(EXTENT, "middle")

    def test_top_left_matches_corner(self):
        """get_top_left should agree with get_corner."""
        assert get_top_left(EXTENT) == get_corner(EXTENT, Corner.TOP_LEFT)


class TestContainsCoordinate:
    """Tests for the contains_coordinate function."""

    def test_inside(self):
        assert contains_coordinate(EXTENT, (0.0, 0.0))

    def test_boundary_is_inside(self):
        """contains_coordinate should treat the boundary as inside."""
        assert contains_coordinate(EXTENT, (-10.0, 15.0))
        assert contains_coordinate(EXTENT, (30.0, -5.0))

    def test_outside(self):
        assert not contains_coordinate(EXTENT, (-10.1, 0.0))
        assert not contains_coordinate(EXTENT, (0.0, 15.1))
