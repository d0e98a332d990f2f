"""Projection registry.

Projections are looked up by identifier (e.g. ``"EPSG:3857"``). The spherical
Mercator and geographic WGS84 projections are built in under all of their
common aliases. Any other identifier is resolved with pyproj and registered
on first use, so repeated lookups return the same object.

Examples
--------
>>> get_projection("EPSG:3857").units
<Units.METERS: 'm'>
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from typing import Optional

from pyproj import CRS
from pyproj.exceptions import CRSError

from .cache import DefaultGridCache
from .exceptions import UnknownProjectionError
from .extent import Extent

logger = logging.getLogger(__name__)

EARTH_RADIUS = 6378137.0
HALF_SIZE = math.pi * EARTH_RADIUS


class Units(str, Enum):
    """Projection units."""

    DEGREES = "degrees"
    FEET = "ft"
    METERS = "m"
    PIXELS = "pixels"
    TILE_PIXELS = "tile-pixels"
    USFEET = "us-ft"


#: Meters per unit lookup table. Degrees are measured on a sphere of
#: radius 6370997 m.
METERS_PER_UNIT = {
    Units.DEGREES: 2 * math.pi * 6370997 / 360,
    Units.FEET: 0.3048,
    Units.METERS: 1.0,
    Units.USFEET: 1200 / 3937,
}

_PYPROJ_UNITS = {
    "degree": Units.DEGREES,
    "metre": Units.METERS,
    "meter": Units.METERS,
    "foot": Units.FEET,
    "US survey foot": Units.USFEET,
}


@dataclass(eq=False)
class Projection:
    """Coordinate reference system metadata used by tile grids.

    Parameters
    ----------
    code : str
        Identifier, e.g. ``"EPSG:3857"``.
    units : Units, optional
        Units of the projected coordinates.
    extent : tuple of float, optional
        Validity extent in projected coordinates. None for unbounded
        projections.
    world_extent : tuple of float, optional
        Validity extent in degrees.
    axis_orientation : str, optional
        Axis order as a three letter string, by default ``"enu"``.
    global_ : bool, optional
        Whether the projection covers the whole world and wraps
        horizontally, by default False.
    meters_per_unit : float, optional
        Overrides the lookup in ``METERS_PER_UNIT``.

    Notes
    -----
    Instances compare and hash by identity, which makes them usable as
    weak keys of the default grid cache.
    """

    code: str
    units: Optional[Units] = None
    extent: Optional[Extent] = None
    world_extent: Optional[Extent] = None
    axis_orientation: str = "enu"
    global_: bool = False
    meters_per_unit: Optional[float] = None

    def get_meters_per_unit(self) -> Optional[float]:
        """Return meters per unit, or None for unit-less projections."""
        if self.meters_per_unit is not None:
            return self.meters_per_unit
        return METERS_PER_UNIT.get(self.units)

    def can_wrap_x(self) -> bool:
        return self.global_ and self.extent is not None


def _epsg3857_projections():
    codes = [
        "EPSG:3857",
        "EPSG:102100",
        "EPSG:102113",
        "EPSG:900913",
        "urn:ogc:def:crs:EPSG:6.18:3:3857",
        "urn:ogc:def:crs:EPSG::3857",
        "http://www.opengis.net/gml/srs/epsg.xml#3857",
    ]
    return [
        Projection(
            code=code,
            units=Units.METERS,
            extent=(-HALF_SIZE, -HALF_SIZE, HALF_SIZE, HALF_SIZE),
            world_extent=(-180.0, -85.0, 180.0, 85.0),
            global_=True,
        )
        for code in codes
    ]


def _epsg4326_projections():
    codes = [
        ("CRS:84", "enu"),
        ("EPSG:4326", "neu"),
        ("urn:ogc:def:crs:EPSG::4326", "neu"),
        ("urn:ogc:def:crs:EPSG:6.6:4326", "neu"),
        ("urn:ogc:def:crs:OGC:1.3:CRS84", "enu"),
        ("urn:ogc:def:crs:OGC:2:84", "enu"),
        ("http://www.opengis.net/gml/srs/epsg.xml#4326", "neu"),
        ("urn:x-ogc:def:crs:EPSG:4326", "neu"),
    ]
    return [
        Projection(
            code=code,
            units=Units.DEGREES,
            extent=(-180.0, -90.0, 180.0, 90.0),
            world_extent=(-180.0, -90.0, 180.0, 90.0),
            axis_orientation=axis,
            global_=True,
            meters_per_unit=math.pi * EARTH_RADIUS / 180,
        )
        for code, axis in codes
    ]


def projection_from_crs(code: str) -> Projection:
    """Build a Projection from any identifier pyproj understands.

    Units are read from the first axis of the CRS. No extent is declared,
    so tile grids for these projections use a synthesized global extent.

    Parameters
    ----------
    code : str
        EPSG code, PROJ string, WKT or anything else accepted by
        ``pyproj.CRS.from_user_input``.

    Returns
    -------
    Projection

    Raises
    ------
    UnknownProjectionError
        If pyproj cannot parse ``code`` or the CRS has no axes.
    """
    try:
        crs = CRS.from_user_input(code)
    except CRSError as err:
        raise UnknownProjectionError(code) from err
    if not crs.axis_info:
        raise UnknownProjectionError(code)

    axis = crs.axis_info[0]
    units = _PYPROJ_UNITS.get(axis.unit_name)
    meters_per_unit = None
    if units is None:
        if crs.is_geographic:
            # Other angular units, scaled from degrees
            units = Units.DEGREES
            meters_per_unit = (METERS_PER_UNIT[Units.DEGREES]
                               * math.degrees(axis.unit_conversion_factor))
        else:
            units = Units.METERS
            meters_per_unit = axis.unit_conversion_factor
    logger.debug(f"Resolved {code} with pyproj: {crs.name} ({axis.unit_name})")

    return Projection(
        code=code,
        units=units,
        axis_orientation="neu" if axis.direction == "north" else "enu",
        meters_per_unit=meters_per_unit,
    )


class ProjectionRegistry:
    """Projections by identifier, plus the default tile grid of each.

    Parameters
    ----------
    builtins : bool, optional
        Register EPSG:3857, EPSG:4326 and their aliases, by default True.
    use_pyproj : bool, optional
        Resolve unregistered identifiers with pyproj, by default True.

    Attributes
    ----------
    default_grids : DefaultGridCache
        Lazily populated default grid per projection.
    """

    def __init__(self, builtins: bool = True, use_pyproj: bool = True):
        self._projections = {}
        self._lock = RLock()
        self.builtins = builtins
        self.use_pyproj = use_pyproj
        self.default_grids = DefaultGridCache()
        if builtins:
            self._add_builtins()

    def add(self, projection: Projection, code: Optional[str] = None):
        """Register ``projection`` under ``code`` (its own code by default)."""
        with self._lock:
            self._projections[code or projection.code] = projection

    def get(self, projection_like) -> Projection:
        """Resolve an identifier or pass a Projection through.

        Raises
        ------
        UnknownProjectionError
            If the identifier is not registered and cannot be resolved.
        """
        if isinstance(projection_like, Projection):
            return projection_like
        if not isinstance(projection_like, str):
            raise UnknownProjectionError(projection_like)
        with self._lock:
            projection = self._projections.get(projection_like)
            if projection is None:
                if not self.use_pyproj:
                    raise UnknownProjectionError(projection_like)
                projection = projection_from_crs(projection_like)
                self._projections[projection_like] = projection
            return projection

    def clear(self):
        """Drop added projections and cached default grids.

        The built-in projections are registered again if the registry was
        created with them.
        """
        with self._lock:
            self._projections.clear()
            self.default_grids.clear()
            if self.builtins:
                self._add_builtins()

    def _add_builtins(self):
        for projection in _epsg3857_projections() + _epsg4326_projections():
            self.add(projection)

    def __contains__(self, code):
        with self._lock:
            return code in self._projections


registry = ProjectionRegistry()


def get_projection(projection_like) -> Projection:
    """Resolve ``projection_like`` through the shared registry."""
    return registry.get(projection_like)


def add_projection(projection: Projection):
    """Register ``projection`` with the shared registry."""
    registry.add(projection)
