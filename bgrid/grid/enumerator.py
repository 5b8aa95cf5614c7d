"""Single-level child cell enumeration.

``enumerate_cells`` yields the 2048 children of one parent path, each
with its decoded geometry.  It never descends further; walking the tree
is left to the caller, who passes a longer ``parent_path`` per call and
so keeps depth and memory bounded explicitly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bgrid.core.constants import DEFAULT_MAX_LEVEL
from bgrid.grid._validation import require_grid_path, require_positive_int
from bgrid.grid.decoder import decode
from bgrid.grid.schedule import divisors_for_level
from bgrid.models.region import Cell

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bgrid.models.region import GridPath

logger = logging.getLogger(__name__)


def enumerate_cells(
    level: int,
    parent_path: list[int] | tuple[int, ...] = (),
    max_level: int = DEFAULT_MAX_LEVEL,
) -> Iterator[Cell]:
    """Return a lazy iterator over every child cell at *level*.

    Arguments are validated when this function is called, before the
    first cell is produced.  Each call returns a fresh iterator.

    Args:
        level: 1-based level whose divisor pair sets the child count.
        parent_path: Path of the parent cell (empty for the whole globe).
        max_level: Depth guard; nothing is yielded when
            ``level > max_level``.

    Yields:
        ``Cell`` objects in ascending index order (1..2048), matching
        row-major decode order.

    Raises:
        InvalidInputError: If *level* or *max_level* is not a positive
            integer, or *parent_path* is not a valid grid path.
    """
    level = require_positive_int(level, "level")
    max_level = require_positive_int(max_level, "max_level")
    parent = require_grid_path(parent_path, "parent_path")

    if level > max_level:
        logger.debug("Enumeration skipped | level=%d | max_level=%d", level, max_level)
        return iter(())

    return _iter_children(level, parent)


def get_grid_cells(
    level: int,
    parent_path: list[int] | tuple[int, ...] = (),
    max_level: int = DEFAULT_MAX_LEVEL,
) -> list[Cell]:
    """Materialise ``enumerate_cells`` into a list."""
    return list(enumerate_cells(level, parent_path, max_level))


def _iter_children(level: int, parent: GridPath) -> Iterator[Cell]:
    total = divisors_for_level(level).total
    logger.debug("Enumerating cells | level=%d | parent=%s | total=%d", level, parent, total)
    for index in range(1, total + 1):
        full_path = (*parent, index)
        yield Cell(index=index, full_path=full_path, region=decode(full_path))
