"""Tests for the tilegrid.proj module."""

import math

import pytest

from tilegrid import proj
from tilegrid.exceptions import TileGridError, UnknownProjectionError
from tilegrid.proj import (
    METERS_PER_UNIT,
    Projection,
    ProjectionRegistry,
    Units,
    add_projection,
    get_projection,
)


class TestMetersPerUnit:
    """Tests for unit conversion factors."""

    def test_degrees_use_6370997_sphere(self):
        """One degree should be measured on a sphere of radius 6370997 m."""
        assert METERS_PER_UNIT[Units.DEGREES] == pytest.approx(2 * math.pi * 6370997 / 360)

    def test_feet(self):
        assert METERS_PER_UNIT[Units.FEET] == 0.3048
        assert METERS_PER_UNIT[Units.USFEET] == pytest.approx(1200 / 3937)

    def test_projection_uses_table(self):
        """get_meters_per_unit should fall back to the units table."""
        projection = Projection(code="x", units=Units.FEET)
        assert projection.get_meters_per_unit() == 0.3048

    def test_explicit_value_wins(self):
        """An explicit meters_per_unit should override the table."""
        projection = Projection(code="x", units=Units.METERS, meters_per_unit=2.5)
        assert projection.get_meters_per_unit() == 2.5

    def test_pixels_have_no_factor(self):
        """Pixel projections should report no meters per unit."""
        assert Projection(code="x", units=Units.PIXELS).get_meters_per_unit() is None


class TestProjection:
    """Tests for the Projection class."""

    def test_identity_equality(self):
        """Projections with equal fields should still be distinct keys."""
        first = Projection(code="x", units=Units.METERS)
        second = Projection(code="x", units=Units.METERS)
        assert first != second
        assert len({first, second}) == 2

    def test_can_wrap_x(self):
        """Only global projections with an extent can wrap."""
        assert get_projection("EPSG:3857").can_wrap_x()
        assert not Projection(code="x", units=Units.METERS, global_=True).can_wrap_x()
        assert not Projection(code="x", extent=(0, 0, 1, 1)).can_wrap_x()


class TestBuiltins:
    """Tests for the built-in projections."""

    @pytest.mark.parametrize("code", [
        "EPSG:3857", "EPSG:102100", "EPSG:102113", "EPSG:900913",
        "urn:ogc:def:crs:EPSG::3857",
    ])
    def test_spherical_mercator_aliases(self, code, half_size):
        """Every spherical Mercator alias should share the same extent."""
        projection = get_projection(code)
        assert projection.units is Units.METERS
        assert projection.extent == pytest.approx((-half_size, -half_size, half_size, half_size))
        assert projection.global_

    def test_mercator_half_size(self):
        """The EPSG:3857 extent should be pi times the WGS84 radius."""
        assert get_projection("EPSG:3857").extent[2] == pytest.approx(20037508.342789244)

    @pytest.mark.parametrize("code, axis", [
        ("EPSG:4326", "neu"),
        ("CRS:84", "enu"),
        ("urn:ogc:def:crs:OGC:1.3:CRS84", "enu"),
        ("urn:ogc:def:crs:EPSG::4326", "neu"),
    ])
    def test_geographic_aliases(self, code, axis):
        """Every WGS84 alias should be in degrees with the right axis order."""
        projection = get_projection(code)
        assert projection.units is Units.DEGREES
        assert projection.extent == (-180.0, -90.0, 180.0, 90.0)
        assert projection.axis_orientation == axis
        assert projection.get_meters_per_unit() == pytest.approx(math.pi * 6378137 / 180)


class TestGetProjection:
    """Tests for projection lookup."""

    def test_passes_instances_through(self, planar_projection):
        """get_projection should return Projection instances unchanged."""
        assert get_projection(planar_projection) is planar_projection

    def test_same_object_on_repeated_lookup(self):
        assert get_projection("EPSG:3857") is get_projection("EPSG:3857")

    def test_add_projection(self, planar_projection):
        """add_projection should make a projection resolvable by code."""
        add_projection(planar_projection)
        assert get_projection("LOCAL:planar") is planar_projection

    def test_pyproj_fallback_metric(self):
        """Unregistered metric codes should resolve through pyproj."""
        projection = get_projection("EPSG:3395")
        assert projection.units is Units.METERS
        assert projection.extent is None
        assert projection.get_meters_per_unit() == 1.0
        assert get_projection("EPSG:3395") is projection

    def test_pyproj_fallback_us_feet(self):
        """US survey foot CRSs should map to Units.USFEET."""
        projection = get_projection("EPSG:2263")
        assert projection.units is Units.USFEET
        assert projection.get_meters_per_unit() == pytest.approx(1200 / 3937)

    def test_pyproj_fallback_geographic(self):
        """Geographic CRSs should resolve to degrees, northing first."""
        projection = get_projection("EPSG:4269")
        assert projection.units is Units.DEGREES
        assert projection.axis_orientation == "neu"

    def test_unknown_code(self):
        """Unresolvable identifiers should raise UnknownProjectionError."""
        with pytest.raises(UnknownProjectionError) as excinfo:
            get_projection("unknown:projection")
        assert excinfo.value.code == "unknown:projection"
        assert "unknown:projection" in str(excinfo.value)

    def test_unknown_is_a_lookup_error(self):
        """UnknownProjectionError should be both a TileGridError and a KeyError."""
        assert issubclass(UnknownProjectionError, TileGridError)
        assert issubclass(UnknownProjectionError, KeyError)

    def test_non_string_is_unknown(self):
        with pytest.raises(UnknownProjectionError):
            get_projection(None)

    def test_pyproj_can_be_disabled(self):
        """A registry without pyproj should only know registered codes."""
        registry = ProjectionRegistry(use_pyproj=False)
        with pytest.raises(UnknownProjectionError):
            registry.get("EPSG:3395")


class TestProjectionRegistry:
    """Tests for the ProjectionRegistry class."""

    def test_empty_registry(self):
        """A registry without builtins should not know EPSG:3857."""
        registry = ProjectionRegistry(builtins=False, use_pyproj=False)
        assert "EPSG:3857" not in registry
        with pytest.raises(UnknownProjectionError):
            registry.get("EPSG:3857")

    def test_add_under_alias(self, planar_projection):
        registry = ProjectionRegistry(builtins=False)
        registry.add(planar_projection, "ALIAS:1")
        assert registry.get("ALIAS:1") is planar_projection

    def test_clear(self, planar_projection):
        """clear should drop added projections and cached default grids."""
        registry = ProjectionRegistry()
        registry.add(planar_projection)
        registry.default_grids.get_or_create(planar_projection, lambda p: object())
        registry.clear()
        assert "LOCAL:planar" not in registry
        assert len(registry.default_grids) == 0

    def test_clear_keeps_builtins(self, half_size):
        """Built-in projections should survive clear with their extents."""
        registry = ProjectionRegistry()
        registry.clear()
        assert "EPSG:3857" in registry
        assert registry.get("EPSG:3857").extent == pytest.approx(
            (-half_size, -half_size, half_size, half_size))

    def test_clear_without_builtins_stays_empty(self):
        registry = ProjectionRegistry(builtins=False, use_pyproj=False)
        registry.clear()
        assert "EPSG:3857" not in registry

    def test_xyz_grid_after_clear(self, registry):
        """create_xyz should still find the EPSG:3857 extent after clear."""
        from tilegrid.factory import create_xyz

        registry.clear()
        assert create_xyz().get_extent() == registry.get("EPSG:3857").extent

    def test_shared_registry_is_patched(self, registry):
        """The module registry should be the per-test fixture instance."""
        assert proj.registry is registry
