"""Tile grid addressing for map clients.

Builds resolution pyramids and tile grids for extents, projections and the
XYZ scheme, and wraps tile coordinates around the date line.
"""

from . import config
from .cache import DefaultGridCache
from .common import DEFAULT_MAX_ZOOM, DEFAULT_TILE_SIZE, to_size
from .exceptions import TileGridError, UnknownProjectionError
from .extent import Corner
from .factory import (
    XYZOptions,
    create_for_extent,
    create_for_projection,
    create_xyz,
    extent_from_projection,
    get_for_projection,
    resolutions_from_extent,
)
from .grid import TileGrid
from .proj import Projection, ProjectionRegistry, Units, add_projection, get_projection
from .wrap import wrap_x

__version__ = "0.1.0"

__all__ = [
    "Corner",
    "DEFAULT_MAX_ZOOM",
    "DEFAULT_TILE_SIZE",
    "DefaultGridCache",
    "Projection",
    "ProjectionRegistry",
    "TileGrid",
    "TileGridError",
    "Units",
    "UnknownProjectionError",
    "XYZOptions",
    "add_projection",
    "create_for_extent",
    "create_for_projection",
    "create_xyz",
    "extent_from_projection",
    "get_for_projection",
    "get_projection",
    "resolutions_from_extent",
    "to_size",
    "wrap_x",
]
