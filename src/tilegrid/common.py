"""Shared tile grid defaults and size helpers."""
from typing import Tuple, Union

from .config import settings

#: Deepest zoom level a generated resolution pyramid reaches by default.
DEFAULT_MAX_ZOOM = int(settings.get("default_max_zoom", 42))

#: Default tile edge length in pixels.
DEFAULT_TILE_SIZE = int(settings.get("default_tile_size", 256))

Size = Tuple[float, float]
SizeLike = Union[float, Size]


def to_size(size: SizeLike) -> Size:
    """Normalise a scalar or (width, height) pair into a pair.

    Parameters
    ----------
    size : float or tuple of float
        Tile edge length for square tiles, or an explicit (width, height).

    Returns
    -------
    tuple of float
        (width, height) pair.
    """
    if isinstance(size, (tuple, list)):
        width, height = size
        return (width, height)
    return (size, size)
