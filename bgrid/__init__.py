"""BGrid hierarchical geographic grid.

Encodes a (lat, lon) coordinate into a path of cell indices, one per
level, where every level splits the current cell into 2048 children
(64x32 on odd levels, 32x64 on even ones).  Each index can therefore be
written as a word from a 2048-word list.  Paths decode back into their
bounding region, and any level can be enumerated cell by cell for
tiling and visualisation.
"""

from bgrid.core.constants import SUPPORTED_LANGUAGES
from bgrid.core.exceptions import (
    BgridError,
    InvalidInputError,
    MalformedWordListError,
    UnsupportedLanguageError,
    WordListFetchError,
    WordListMissingError,
    WordListUnavailableError,
)
from bgrid.grid import (
    DivisorPair,
    decode,
    divisors_for_level,
    encode,
    enumerate_cells,
    get_grid_cells,
)
from bgrid.models import BoundingRegion, Cell, GridPath

__version__ = "0.1.0"

__all__ = [
    "SUPPORTED_LANGUAGES",
    "BgridError",
    "BoundingRegion",
    "Cell",
    "DivisorPair",
    "GridPath",
    "InvalidInputError",
    "MalformedWordListError",
    "UnsupportedLanguageError",
    "WordListFetchError",
    "WordListMissingError",
    "WordListUnavailableError",
    "decode",
    "divisors_for_level",
    "encode",
    "enumerate_cells",
    "get_grid_cells",
]
