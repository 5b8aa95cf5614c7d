"""Grid-path to bounding-region decoding.

Exact inverse of ``encoder.encode``: starting from the whole globe, each
index narrows the region to one of the 2048 children of the current
cell.  Row 0 is the northernmost row, column 0 the westernmost column.
"""

from __future__ import annotations

from bgrid.core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from bgrid.grid._validation import require_grid_path
from bgrid.grid.schedule import divisors_for_level
from bgrid.models.region import BoundingRegion


def decode(path: list[int] | tuple[int, ...]) -> BoundingRegion:
    """Decode a grid path into its bounding region.

    An empty path yields the whole globe.

    Args:
        path: Cell indices, coarsest level first, each in ``[1, 2048]``.

    Returns:
        The ``BoundingRegion`` denoted by *path*.

    Raises:
        InvalidInputError: If *path* is not a list or tuple of integer
            cell indices within range.
    """
    indices = require_grid_path(path)

    min_lat, max_lat = MIN_LATITUDE, MAX_LATITUDE
    min_lon, max_lon = MIN_LONGITUDE, MAX_LONGITUDE

    for level, index in enumerate(indices, start=1):
        lon_divisor, lat_divisor = divisors_for_level(level)
        col, row = (index - 1) % lon_divisor, (index - 1) // lon_divisor

        lon_width = (max_lon - min_lon) / lon_divisor
        lat_height = (max_lat - min_lat) / lat_divisor

        # max_lon is one cell width past the *new* min_lon.
        min_lon = min_lon + col * lon_width
        max_lon = min_lon + lon_width

        max_lat = max_lat - row * lat_height
        min_lat = max_lat - lat_height

    return BoundingRegion(min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon)
