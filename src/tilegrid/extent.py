"""Axis-aligned extent helpers.

An extent is a ``(min_x, min_y, max_x, max_y)`` tuple in projected
coordinates. Coordinates are ``(x, y)`` tuples.
"""
from enum import Enum
from typing import Tuple

Extent = Tuple[float, float, float, float]
Coordinate = Tuple[float, float]


class Corner(str, Enum):
    """Extent corner used as a tile grid origin."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


def create_extent(min_x: float, min_y: float, max_x: float, max_y: float) -> Extent:
    """Build an extent from its four bounds."""
    return (min_x, min_y, max_x, max_y)


def get_width(extent: Extent) -> float:
    return extent[2] - extent[0]


def get_height(extent: Extent) -> float:
    return extent[3] - extent[1]


def get_center(extent: Extent) -> Coordinate:
    return ((extent[0] + extent[2]) / 2, (extent[1] + extent[3]) / 2)


def get_top_left(extent: Extent) -> Coordinate:
    return (extent[0], extent[3])


def get_corner(extent: Extent, corner: Corner) -> Coordinate:
    """Return one of the four corners of an extent.

    Parameters
    ----------
    extent : tuple of float
        (min_x, min_y, max_x, max_y).
    corner : Corner
        Which corner to return. Plain strings such as ``"bottom-left"``
        are accepted as well.

    Returns
    -------
    tuple of float
        (x, y) of the requested corner.

    Raises
    ------
    ValueError
        If ``corner`` is not a known corner.
    """
    corner = Corner(corner)
    if corner is Corner.BOTTOM_LEFT:
        return (extent[0], extent[1])
    elif corner is Corner.BOTTOM_RIGHT:
        return (extent[2], extent[1])
    elif corner is Corner.TOP_LEFT:
        return (extent[0], extent[3])
    return (extent[2], extent[3])


def contains_coordinate(extent: Extent, coordinate: Coordinate) -> bool:
    """Closed containment test: points on the boundary are inside."""
    x, y = coordinate[0], coordinate[1]
    return extent[0] <= x <= extent[2] and extent[1] <= y <= extent[3]
