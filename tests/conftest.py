"""Shared pytest fixtures for the BGrid test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bgrid.core.config import BgridConfig

# ---------------------------------------------------------------------------
# Word-list fixtures
# ---------------------------------------------------------------------------


def make_words(prefix: str = "w") -> list[str]:
    """Return 2048 unique lowercase tokens ``<prefix>0001`` .. ``<prefix>2048``."""
    return [f"{prefix}{number:04d}" for number in range(1, 2049)]


@pytest.fixture()
def words() -> list[str]:
    """A valid 2048-entry word list."""
    return make_words()


@pytest.fixture()
def config() -> BgridConfig:
    """Loader configuration with no base location and a short timeout."""
    return BgridConfig(wordlist_timeout_s=2.0)


@pytest.fixture()
def word_list_dir(tmp_path: Path) -> Path:
    """Directory holding ``bip39-en.json`` and ``bip39-es.json``."""
    (tmp_path / "bip39-en.json").write_text(json.dumps(make_words("en")), encoding="utf-8")
    (tmp_path / "bip39-es.json").write_text(json.dumps(make_words("es")), encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# Coordinate samples
# ---------------------------------------------------------------------------

INTERIOR_LATITUDES = (-89.999, -45.5, -12.345678, 0.0, 0.000001, 33.3333, 51.5, 89.999)
INTERIOR_LONGITUDES = (-179.999, -120.5, -0.0001, 0.0, 45.678, 139.6917, 179.999)


@pytest.fixture()
def interior_coordinates() -> list[tuple[float, float]]:
    """Coordinates strictly inside the valid lat/lon ranges."""
    return [(lat, lon) for lat in INTERIOR_LATITUDES for lon in INTERIOR_LONGITUDES]
