"""Tests for grid-path decoding."""

from __future__ import annotations

import pytest

from bgrid.core.exceptions import InvalidInputError
from bgrid.grid.decoder import decode
from bgrid.models.region import BoundingRegion


class TestWholeGlobe:
    """An empty path denotes the whole globe."""

    def test_empty_list(self) -> None:
        region = decode([])
        assert region == BoundingRegion(min_lat=-90.0, max_lat=90.0, min_lon=-180.0, max_lon=180.0)
        assert region.center == (0.0, 0.0)

    def test_empty_tuple(self) -> None:
        assert decode(()) == decode([])


class TestPinnedRegions:
    """Level-1 cells are 5.625 x 5.625 degrees."""

    def test_equator_prime_meridian_cell(self) -> None:
        region = decode([1057])
        assert region.min_lat == -5.625
        assert region.max_lat == 0.0
        assert region.min_lon == 0.0
        assert region.max_lon == 5.625
        assert region.center == (-2.8125, 2.8125)

    def test_first_cell_is_north_west(self) -> None:
        assert decode([1]) == BoundingRegion(
            min_lat=84.375, max_lat=90.0, min_lon=-180.0, max_lon=-174.375
        )

    def test_last_cell_is_south_east(self) -> None:
        assert decode([2048]) == BoundingRegion(
            min_lat=-90.0, max_lat=-84.375, min_lon=174.375, max_lon=180.0
        )

    def test_end_of_first_row(self) -> None:
        region = decode([64])
        assert region.max_lat == 90.0
        assert region.max_lon == 180.0

    def test_start_of_second_row(self) -> None:
        region = decode([65])
        assert region.min_lon == -180.0
        assert region.max_lat == 84.375

    def test_second_level_uses_swapped_divisors(self) -> None:
        region = decode([1057, 1])
        assert region.min_lon == 0.0
        assert region.max_lon == 0.17578125  # 5.625 / 32
        assert region.max_lat == 0.0
        assert region.min_lat == -0.087890625  # 5.625 / 64

    def test_second_level_last_cell(self) -> None:
        region = decode([1057, 2048])
        assert region.min_lat == -5.625
        assert region.max_lon == pytest.approx(5.625)

    def test_list_and_tuple_agree(self) -> None:
        assert decode([416, 1760, 3]) == decode((416, 1760, 3))


class TestRegionInvariants:
    def test_min_not_greater_than_max(self) -> None:
        for path in ([1], [2048], [1057, 1, 2048], [7, 1999, 64, 65, 1024]):
            region = decode(path)
            assert region.min_lat <= region.max_lat
            assert region.min_lon <= region.max_lon

    def test_cell_size_shrinks_per_level(self) -> None:
        path = [300, 1200, 5, 2000]
        sizes = [decode(path[:k]).lon_width for k in range(len(path) + 1)]
        assert sizes == sorted(sizes, reverse=True)
        assert sizes[1] == 360.0 / 64
        assert sizes[2] == 360.0 / 64 / 32


class TestInvalidPaths:
    """Anything other than a list/tuple of in-range ints is rejected."""

    @pytest.mark.parametrize("path", ["not-an-array", b"\x01", None, 1057, {1: 2}, {1, 2}])
    def test_not_a_sequence(self, path: object) -> None:
        with pytest.raises(InvalidInputError):
            decode(path)  # type: ignore[arg-type]

    def test_generator_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            decode(index for index in [1, 2])  # type: ignore[arg-type]

    @pytest.mark.parametrize("entry", [1.0, "5", None, True])
    def test_non_integer_entry(self, entry: object) -> None:
        with pytest.raises(InvalidInputError, match=r"path\[1\]"):
            decode([1, entry])  # type: ignore[list-item]

    @pytest.mark.parametrize("entry", [0, -1, 2049])
    def test_out_of_range_entry(self, entry: int) -> None:
        with pytest.raises(InvalidInputError, match="outside"):
            decode([entry])
