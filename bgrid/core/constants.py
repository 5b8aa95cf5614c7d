"""Shared BGrid constants: single source of truth.

Grid geometry, coordinate bounds, and word-list settings used by the
codec, the enumerator, and the word-list helpers.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Grid geometry
# ---------------------------------------------------------------------------

FINE_DIVISOR: int = 64
"""Number of cells along the finer axis at any level."""

COARSE_DIVISOR: int = 32
"""Number of cells along the coarser axis at any level."""

CELLS_PER_LEVEL: int = FINE_DIVISOR * COARSE_DIVISOR
"""Fixed branching factor: every level splits a cell into 2048 children."""

MIN_CELL_INDEX: int = 1
MAX_CELL_INDEX: int = CELLS_PER_LEVEL

DEFAULT_MAX_LEVEL: int = 4
"""Default depth guard for single-level enumeration."""

# ---------------------------------------------------------------------------
# Coordinate bounds (WGS 84 degrees)
# ---------------------------------------------------------------------------

MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0
MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0

LATITUDE_SPAN: float = MAX_LATITUDE - MIN_LATITUDE
LONGITUDE_SPAN: float = MAX_LONGITUDE - MIN_LONGITUDE

DEFAULT_BOUNDS_EPSILON: float = 1e-9
"""Tolerance (degrees) for containment checks on reconstructed bounds."""

# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "es", "fr", "pt", "zh")
"""Language codes with a published 2048-word list."""

WORD_LIST_FILENAME_TEMPLATE: str = "bip39-{language}.json"
"""File name of a language's word list under the configured base."""

DEFAULT_WORDLIST_TIMEOUT_S: float = 10.0
