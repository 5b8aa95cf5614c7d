"""Argument validation shared by the codec operations.

Every public codec function validates eagerly with these helpers before
doing any work, so a bad argument never yields a partial result.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Integral, Real

from bgrid.core.constants import MAX_CELL_INDEX, MIN_CELL_INDEX
from bgrid.core.exceptions import InvalidInputError
from bgrid.models.region import GridPath


def require_finite(value: object, name: str) -> float:
    """Return *value* as a float, or raise if it is not a finite real number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        msg = f"{name} must be a finite number, got {type(value).__name__}"
        raise InvalidInputError(msg)
    as_float = float(value)
    if not math.isfinite(as_float):
        msg = f"{name} must be a finite number, got {value!r}"
        raise InvalidInputError(msg)
    return as_float


def require_positive_int(value: object, name: str) -> int:
    """Return *value* as an int, or raise if it is not an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        msg = f"{name} must be a positive integer, got {type(value).__name__}"
        raise InvalidInputError(msg)
    as_int = int(value)
    if as_int < 1:
        msg = f"{name} must be a positive integer, got {as_int}"
        raise InvalidInputError(msg)
    return as_int


def require_grid_path(path: object, name: str = "path") -> GridPath:
    """Return *path* as a tuple of cell indices.

    Accepts a list or tuple whose entries are integers in ``[1, 2048]``.
    Strings, bytes, mappings and one-shot iterables are rejected.
    """
    if not isinstance(path, (list, tuple)):
        msg = f"{name} must be a list or tuple of cell indices, got {type(path).__name__}"
        raise InvalidInputError(msg)

    indices: list[int] = []
    for position, entry in enumerate(path):
        if isinstance(entry, bool) or not isinstance(entry, Integral):
            msg = (
                f"{name}[{position}] must be an integer cell index, "
                f"got {type(entry).__name__}"
            )
            raise InvalidInputError(msg)
        index = int(entry)
        if not MIN_CELL_INDEX <= index <= MAX_CELL_INDEX:
            msg = (
                f"{name}[{position}]={index} is outside the cell index range "
                f"[{MIN_CELL_INDEX}, {MAX_CELL_INDEX}]"
            )
            raise InvalidInputError(msg)
        indices.append(index)

    return tuple(indices)


def is_index_sequence(value: object) -> bool:
    """Whether *value* is a sequence usable as a grid path (no range check)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
