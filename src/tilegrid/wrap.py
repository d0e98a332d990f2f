"""Horizontal world wraparound for tile coordinates."""
import logging
import math

from .extent import contains_coordinate, get_width
from .factory import extent_from_projection

logger = logging.getLogger(__name__)


def wrap_x(tile_grid, tile_coord, projection):
    """Re-express a tile coordinate outside the world as the one inside it.

    The tile center is shifted by a whole number of world widths until it
    falls inside the projection extent. Rows and zoom levels are left
    untouched; there is no vertical wrap.

    Parameters
    ----------
    tile_grid : TileGrid
        Grid the tile coordinate belongs to.
    tile_coord : tuple of int
        (z, x, y) tile coordinate.
    projection : Projection or str
        Projection whose extent is one world.

    Returns
    -------
    tuple of int
        ``tile_coord`` itself when its center is inside the projection
        extent, otherwise the equivalent tile coordinate inside it.
    """
    z = tile_coord[0]
    center = tile_grid.get_tile_coord_center(tile_coord)
    projection_extent = extent_from_projection(projection)
    if contains_coordinate(projection_extent, center):
        return tile_coord

    world_width = get_width(projection_extent)
    worlds_away = math.ceil((projection_extent[0] - center[0]) / world_width)
    wrapped = (center[0] + world_width * worlds_away, center[1])
    logger.debug(f"Wrapping {tile_coord} by {worlds_away} world(s)")
    return tile_grid.get_tile_coord_for_coord_and_z(wrapped, z)
