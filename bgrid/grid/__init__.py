"""Coordinate/grid codec.

- schedule: Per-level (longitude, latitude) divisor pair
- encoder: Coordinate → grid path
- decoder: Grid path → bounding region
- enumerator: Every child cell of one level
"""

from bgrid.grid.decoder import decode
from bgrid.grid.encoder import encode
from bgrid.grid.enumerator import enumerate_cells, get_grid_cells
from bgrid.grid.schedule import DivisorPair, divisors_for_level

__all__ = [
    "DivisorPair",
    "decode",
    "divisors_for_level",
    "encode",
    "enumerate_cells",
    "get_grid_cells",
]
