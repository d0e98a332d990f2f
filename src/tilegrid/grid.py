"""Tile grid entity.

A tile grid couples a resolution pyramid with an origin and a tile size and
converts between map coordinates and ``(z, x, y)`` tile coordinates. Columns
grow to the right of the origin and rows grow downwards from it, so with a
top-left origin row 0 is the top row.
"""
import logging
import math
from typing import List, Optional, Sequence, Tuple

from . import common
from .common import Size, SizeLike, to_size
from .exceptions import TileGridError
from .extent import Coordinate, Extent, get_top_left

logger = logging.getLogger(__name__)

TileCoord = Tuple[int, int, int]


class TileGrid:
    """Tile addressing for a fixed resolution pyramid.

    Parameters
    ----------
    resolutions : sequence of float
        Map units per pixel, one per zoom level starting at zoom 0.
    extent : tuple of float, optional
        Grid extent as (min_x, min_y, max_x, max_y).
    origin : tuple of float, optional
        Point tile columns and rows are counted from. Defaults to the top
        left corner of ``extent``.
    tile_size : int or tuple of int, optional
        Tile size in pixels. None means ``DEFAULT_TILE_SIZE``.
    min_zoom : int, optional
        Lowest zoom level in use, by default 0.

    Raises
    ------
    TileGridError
        If ``resolutions`` is empty or neither ``origin`` nor ``extent``
        is given.
    """

    def __init__(self, resolutions: Sequence[float], extent: Optional[Extent] = None,
                 origin: Optional[Coordinate] = None,
                 tile_size: Optional[SizeLike] = None, min_zoom: int = 0):
        if len(resolutions) == 0:
            raise TileGridError("A tile grid needs at least one resolution")
        if origin is None:
            if extent is None:
                raise TileGridError("Either origin or extent must be configured")
            origin = get_top_left(extent)

        self.resolutions = list(resolutions)
        self.extent = extent
        self.origin = origin
        self.tile_size = tile_size if tile_size is not None else common.DEFAULT_TILE_SIZE
        self.min_zoom = min_zoom
        self.max_zoom = len(self.resolutions) - 1
        logger.debug(f"TileGrid origin={self.origin} zooms={self.min_zoom}..{self.max_zoom}")

    def __repr__(self):
        return (f"TileGrid(extent={self.extent}, origin={self.origin}, "
                f"tile_size={self.tile_size}, levels={len(self.resolutions)})")

    def get_resolutions(self) -> List[float]:
        return self.resolutions

    def get_resolution(self, z: int) -> float:
        """Return the resolution of zoom level ``z``.

        Raises
        ------
        TileGridError
            If ``z`` is outside ``0..max_zoom``.
        """
        if not 0 <= z <= self.max_zoom:
            raise TileGridError(f"Zoom {z} outside 0..{self.max_zoom}")
        return self.resolutions[z]

    def get_min_zoom(self) -> int:
        return self.min_zoom

    def get_max_zoom(self) -> int:
        return self.max_zoom

    def get_extent(self) -> Optional[Extent]:
        return self.extent

    def get_origin(self, z: int = 0) -> Coordinate:
        return self.origin

    def get_tile_size(self, z: int = 0) -> Size:
        return to_size(self.tile_size)

    def get_tile_coord_center(self, tile_coord: TileCoord) -> Coordinate:
        """Return the map coordinate at the center of a tile.

        Parameters
        ----------
        tile_coord : tuple of int
            (z, x, y) tile coordinate.

        Returns
        -------
        tuple of float
            (x, y) center in map units.
        """
        z, x, y = tile_coord
        origin_x, origin_y = self.get_origin(z)
        resolution = self.get_resolution(z)
        tile_w, tile_h = self.get_tile_size(z)
        return (origin_x + (x + 0.5) * tile_w * resolution,
                origin_y - (y + 0.5) * tile_h * resolution)

    def get_tile_coord_extent(self, tile_coord: TileCoord) -> Extent:
        """Return the (min_x, min_y, max_x, max_y) covered by a tile."""
        z, x, y = tile_coord
        origin_x, origin_y = self.get_origin(z)
        resolution = self.get_resolution(z)
        tile_w, tile_h = self.get_tile_size(z)
        min_x = origin_x + x * tile_w * resolution
        max_y = origin_y - y * tile_h * resolution
        return (min_x, max_y - tile_h * resolution,
                min_x + tile_w * resolution, max_y)

    def get_tile_coord_for_coord_and_z(self, coordinate: Coordinate, z: int) -> TileCoord:
        """Return the tile coordinate containing a map coordinate at zoom ``z``.

        Parameters
        ----------
        coordinate : tuple of float
            (x, y) in map units.
        z : int
            Zoom level.

        Returns
        -------
        tuple of int
            (z, x, y) tile coordinate.
        """
        origin_x, origin_y = self.get_origin(z)
        resolution = self.get_resolution(z)
        tile_w, tile_h = self.get_tile_size(z)
        x = math.floor((coordinate[0] - origin_x) / resolution / tile_w)
        y = math.floor((origin_y - coordinate[1]) / resolution / tile_h)
        return (z, x, y)
