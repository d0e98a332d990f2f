"""Default tile grid side-table.

One default grid per projection, computed lazily on first request and kept
for as long as the projection object is alive. The table is keyed by
projection identity and guarded by a lock so concurrent first requests still
store a single grid.
"""
import logging
import threading
import weakref

logger = logging.getLogger(__name__)


class DefaultGridCache:
    """Mapping from projection identity to its default tile grid."""

    def __init__(self):
        self._grids = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def get(self, projection):
        """Return the cached grid for ``projection`` or None."""
        with self._lock:
            return self._grids.get(projection)

    def get_or_create(self, projection, create):
        """Return the cached grid, building it with ``create(projection)`` once.

        Parameters
        ----------
        projection : tilegrid.proj.Projection
            Cache key, compared by identity.
        create : callable
            Called with ``projection`` when no grid is cached yet.

        Returns
        -------
        tilegrid.grid.TileGrid
            The one default grid stored for ``projection``.
        """
        with self._lock:
            grid = self._grids.get(projection)
            if grid is None:
                logger.debug(f"Creating default tile grid for {projection.code}")
                grid = create(projection)
                self._grids[projection] = grid
            return grid

    def clear(self):
        with self._lock:
            self._grids.clear()

    def __contains__(self, projection):
        with self._lock:
            return projection in self._grids

    def __len__(self):
        with self._lock:
            return len(self._grids)
