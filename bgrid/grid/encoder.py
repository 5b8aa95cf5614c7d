"""Coordinate to grid-path encoding.

The coordinate is normalised into a unit square with ``(0, 0)`` at the
north-west corner.  Each level picks the cell containing the point,
records its 1-based row-major index, then zooms into that cell so the
next level subdivides it.

Floating-point operations run in a fixed order on 64-bit floats so the
output matches other implementations bit for bit.
"""

from __future__ import annotations

import math

from bgrid.core.constants import LATITUDE_SPAN, LONGITUDE_SPAN, MAX_LATITUDE, MAX_LONGITUDE
from bgrid.grid._validation import require_finite, require_positive_int
from bgrid.grid.schedule import divisors_for_level
from bgrid.models.region import GridPath


def encode(lat: float, lon: float, levels: int) -> GridPath:
    """Encode a coordinate into a grid path of *levels* cell indices.

    Range is not checked.  At the poles and the anti-meridian the
    normalised position reaches exactly 1.0; the column and row are then
    clamped to the last cell, so every index stays within ``[1, 2048]``.

    Args:
        lat: Latitude in degrees.
        lon: Longitude in degrees.
        levels: Number of subdivision levels (>= 1).

    Returns:
        Tuple of ``levels`` cell indices, coarsest first.

    Raises:
        InvalidInputError: If *lat* or *lon* is not a finite number, or
            *levels* is not a positive integer.
    """
    lat = require_finite(lat, "lat")
    lon = require_finite(lon, "lon")
    levels = require_positive_int(levels, "levels")

    x = (lon + MAX_LONGITUDE) / LONGITUDE_SPAN
    y = (MAX_LATITUDE - lat) / LATITUDE_SPAN

    path: list[int] = []
    for level in range(1, levels + 1):
        lon_divisor, lat_divisor = divisors_for_level(level)
        col = _clamp(math.floor(x * lon_divisor), lon_divisor)
        row = _clamp(math.floor(y * lat_divisor), lat_divisor)
        path.append(row * lon_divisor + col + 1)
        x = x * lon_divisor - col
        y = y * lat_divisor - row

    return tuple(path)


def _clamp(position: int, divisor: int) -> int:
    return min(max(position, 0), divisor - 1)
