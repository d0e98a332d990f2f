"""Shared pytest fixtures for tilegrid tests."""

import math

import pytest

from tilegrid import proj
from tilegrid.factory import create_xyz, XYZOptions


HALF_SIZE = math.pi * 6378137


@pytest.fixture(autouse=True)
def registry(monkeypatch):
    """Provide a fresh projection registry so cached grids never leak between tests."""
    fresh = proj.ProjectionRegistry()
    monkeypatch.setattr(proj, "registry", fresh)
    return fresh


@pytest.fixture
def half_size():
    """Half the edge length of the EPSG:3857 extent in meters."""
    return HALF_SIZE


@pytest.fixture
def mercator_extent():
    """Provide the full EPSG:3857 extent."""
    return (-HALF_SIZE, -HALF_SIZE, HALF_SIZE, HALF_SIZE)


@pytest.fixture
def xyz_grid():
    """Provide an XYZ grid over EPSG:3857 down to zoom 5."""
    return create_xyz(XYZOptions(max_zoom=5))


@pytest.fixture
def planar_projection():
    """Provide an unbounded metric projection without a declared extent."""
    return proj.Projection(code="LOCAL:planar", units=proj.Units.METERS)
