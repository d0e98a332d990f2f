"""Tile grid factories.

Functions to derive resolution pyramids and extents and to build tile grids
for an extent, for a projection, or for the global XYZ (slippy map) scheme.
A zoom factor of 2 between levels is assumed throughout.
"""
import dataclasses
import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from . import common, proj
from .common import SizeLike, to_size
from .exceptions import TileGridError
from .extent import Corner, Extent, create_extent, get_corner, get_height, get_width
from .grid import TileGrid

logger = logging.getLogger(__name__)

XYZ_PROJECTION = "EPSG:3857"


@dataclass(frozen=True)
class XYZOptions:
    """Options for ``create_xyz``.

    Attributes
    ----------
    extent : tuple of float, optional
        Grid extent. Defaults to the extent of EPSG:3857.
    max_zoom : int, optional
        Deepest zoom level. Defaults to ``DEFAULT_MAX_ZOOM``.
    min_zoom : int
        Lowest zoom level in use, by default 0.
    tile_size : int or tuple of int, optional
        Tile size in pixels. Defaults to ``DEFAULT_TILE_SIZE``.
    """

    extent: Optional[Extent] = None
    max_zoom: Optional[int] = None
    min_zoom: int = 0
    tile_size: Optional[SizeLike] = None


def resolutions_from_extent(extent: Extent, max_zoom: Optional[int] = None,
                            tile_size: Optional[SizeLike] = None) -> List[float]:
    """Create a resolution pyramid for an extent.

    Level 0 fits the whole extent into a single tile; each further level
    halves the resolution.

    Parameters
    ----------
    extent : tuple of float
        (min_x, min_y, max_x, max_y).
    max_zoom : int, optional
        Deepest zoom level, by default ``DEFAULT_MAX_ZOOM``.
    tile_size : int or tuple of int, optional
        Tile size in pixels, by default ``DEFAULT_TILE_SIZE``.

    Returns
    -------
    list of float
        ``max_zoom + 1`` resolutions, from zoom 0 downwards.
    """
    if max_zoom is None:
        max_zoom = common.DEFAULT_MAX_ZOOM
    tile_w, tile_h = to_size(tile_size if tile_size is not None else common.DEFAULT_TILE_SIZE)

    max_resolution = max(get_width(extent) / tile_w, get_height(extent) / tile_h)
    if max_resolution <= 0:
        logger.debug(f"Extent {extent} gives non-positive resolutions")

    zooms = np.arange(max_zoom + 1, dtype=np.float64)
    return (max_resolution / np.power(2.0, zooms)).tolist()


def extent_from_projection(projection) -> Extent:
    """Return a tile grid extent for a projection.

    The projection's own extent is used when it declares one. Otherwise a
    square covering +/-180 degrees, converted to projection units, is
    assumed.

    Parameters
    ----------
    projection : Projection or str
        Projection or projection identifier.

    Returns
    -------
    tuple of float
        (min_x, min_y, max_x, max_y).

    Raises
    ------
    UnknownProjectionError
        If ``projection`` cannot be resolved.
    TileGridError
        If the projection has neither an extent nor a meters per unit
        factor (e.g. pixel projections). Such a projection has no
        meaningful global square, so this raises instead of returning
        NaN bounds.
    """
    projection = proj.get_projection(projection)
    extent = projection.extent
    if extent is None:
        meters_per_unit = projection.get_meters_per_unit()
        if meters_per_unit is None:
            raise TileGridError(f"{projection.code} has no extent and no meters per unit")
        half = 180 * proj.METERS_PER_UNIT[proj.Units.DEGREES] / meters_per_unit
        extent = create_extent(-half, -half, half, half)
    return extent


def create_for_extent(extent: Extent, max_zoom: Optional[int] = None,
                      tile_size: Optional[SizeLike] = None,
                      corner: Optional[Corner] = None) -> TileGrid:
    """Create a tile grid covering an extent.

    Parameters
    ----------
    extent : tuple of float
        (min_x, min_y, max_x, max_y).
    max_zoom : int, optional
        Deepest zoom level, by default ``DEFAULT_MAX_ZOOM``.
    tile_size : int or tuple of int, optional
        Tile size in pixels, by default ``DEFAULT_TILE_SIZE``.
    corner : Corner, optional
        Extent corner used as origin, by default ``Corner.TOP_LEFT``.

    Returns
    -------
    TileGrid
    """
    if corner is None:
        corner = Corner.TOP_LEFT

    resolutions = resolutions_from_extent(extent, max_zoom, tile_size)

    return TileGrid(
        extent=extent,
        origin=get_corner(extent, corner),
        resolutions=resolutions,
        tile_size=tile_size,
    )


def create_for_projection(projection, max_zoom: Optional[int] = None,
                          tile_size: Optional[SizeLike] = None,
                          corner: Optional[Corner] = None) -> TileGrid:
    """Create a tile grid covering a projection's extent.

    The origin defaults to the top left corner, as for
    ``create_for_extent``.
    """
    extent = extent_from_projection(projection)
    return create_for_extent(extent, max_zoom, tile_size, corner)


def create_xyz(options: Optional[XYZOptions] = None) -> TileGrid:
    """Create a tile grid with the standard XYZ tiling scheme.

    Parameters
    ----------
    options : XYZOptions, optional
        Grid options. The passed instance is not modified.

    Returns
    -------
    TileGrid
        Grid with a top left origin, so row 0 is the northernmost row.

    Examples
    --------
    >>> grid = create_xyz(XYZOptions(max_zoom=2))
    >>> grid.get_max_zoom()
    2
    """
    options = options if options is not None else XYZOptions()
    if options.extent is None:
        options = dataclasses.replace(
            options, extent=proj.get_projection(XYZ_PROJECTION).extent)

    resolutions = resolutions_from_extent(
        options.extent, options.max_zoom, options.tile_size)

    return TileGrid(
        extent=options.extent,
        resolutions=resolutions,
        tile_size=options.tile_size,
        min_zoom=options.min_zoom,
    )


def get_for_projection(projection) -> TileGrid:
    """Return the default tile grid for a projection.

    The grid is created with ``create_for_projection`` on first request and
    the same instance is returned afterwards.

    Raises
    ------
    UnknownProjectionError
        If ``projection`` cannot be resolved.
    """
    projection = proj.get_projection(projection)
    return proj.registry.default_grids.get_or_create(projection, create_for_projection)
