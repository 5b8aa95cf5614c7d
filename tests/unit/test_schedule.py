"""Tests for the per-level divisor schedule."""

from __future__ import annotations

import pytest

from bgrid.core.constants import CELLS_PER_LEVEL
from bgrid.core.exceptions import InvalidInputError
from bgrid.grid.schedule import DivisorPair, divisors_for_level


class TestDivisorAlternation:
    """Odd levels split longitude finer, even levels latitude."""

    @pytest.mark.parametrize("level", range(1, 21, 2))
    def test_odd_levels(self, level: int) -> None:
        assert divisors_for_level(level) == DivisorPair(lon_divisor=64, lat_divisor=32)

    @pytest.mark.parametrize("level", range(2, 21, 2))
    def test_even_levels(self, level: int) -> None:
        assert divisors_for_level(level) == DivisorPair(lon_divisor=32, lat_divisor=64)

    @pytest.mark.parametrize("level", range(1, 21))
    def test_product_is_branching_factor(self, level: int) -> None:
        pair = divisors_for_level(level)
        assert pair.total == CELLS_PER_LEVEL == 2048

    def test_unpacks_as_lon_then_lat(self) -> None:
        lon_divisor, lat_divisor = divisors_for_level(1)
        assert (lon_divisor, lat_divisor) == (64, 32)

    def test_large_level(self) -> None:
        assert divisors_for_level(10_001) == (64, 32)


class TestInvalidLevels:
    """Levels below 1 and non-integers are rejected."""

    @pytest.mark.parametrize("level", [0, -1])
    def test_non_positive(self, level: int) -> None:
        with pytest.raises(InvalidInputError):
            divisors_for_level(level)

    @pytest.mark.parametrize("level", [1.0, "1", None, True])
    def test_non_integer(self, level: object) -> None:
        with pytest.raises(InvalidInputError):
            divisors_for_level(level)  # type: ignore[arg-type]
