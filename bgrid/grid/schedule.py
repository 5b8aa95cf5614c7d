"""Per-level divisor schedule.

Longitude spans 360 degrees and latitude 180, a 2:1 ratio.  Odd levels
split longitude 64 ways and latitude 32 ways; even levels swap the two.
Every level therefore partitions a cell into exactly 2048 children while
the average aspect ratio over two consecutive levels stays close to
square.
"""

from __future__ import annotations

from typing import NamedTuple

from bgrid.core.constants import COARSE_DIVISOR, FINE_DIVISOR
from bgrid.grid._validation import require_positive_int


class DivisorPair(NamedTuple):
    """Number of columns and rows a cell is split into at one level."""

    lon_divisor: int
    lat_divisor: int

    @property
    def total(self) -> int:
        """Number of child cells at this level (always 2048)."""
        return self.lon_divisor * self.lat_divisor


_ODD_LEVEL = DivisorPair(lon_divisor=FINE_DIVISOR, lat_divisor=COARSE_DIVISOR)
_EVEN_LEVEL = DivisorPair(lon_divisor=COARSE_DIVISOR, lat_divisor=FINE_DIVISOR)


def divisors_for_level(level: int) -> DivisorPair:
    """Return the divisor pair used at 1-based *level*.

    Raises:
        InvalidInputError: If *level* is not an integer >= 1.
    """
    level = require_positive_int(level, "level")
    return _ODD_LEVEL if level % 2 == 1 else _EVEN_LEVEL
