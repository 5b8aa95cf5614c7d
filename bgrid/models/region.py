"""Value models for decoded grid geometry.

A ``BoundingRegion`` is the lat/lon rectangle denoted by a grid path and
a ``Cell`` is one child of a parent path, as produced by the enumerator.
Both are frozen and carry no identity beyond their values.

All coordinates are WGS 84 degrees.  Pairs are ``(lat, lon)``, matching
the order of the public ``encode(lat, lon, levels)`` signature.
"""

from __future__ import annotations

from dataclasses import dataclass

from bgrid.core.constants import DEFAULT_BOUNDS_EPSILON

GridPath = tuple[int, ...]
"""Ordered 1-based cell indices, one per level."""


@dataclass(frozen=True, slots=True)
class BoundingRegion:
    """Lat/lon rectangle of a grid path.

    Attributes:
        min_lat: Southern edge in degrees.
        max_lat: Northern edge in degrees.
        min_lon: Western edge in degrees.
        max_lon: Eastern edge in degrees.
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @property
    def center(self) -> tuple[float, float]:
        """Midpoint as ``(lat, lon)``."""
        return ((self.min_lat + self.max_lat) / 2, (self.min_lon + self.max_lon) / 2)

    @property
    def bounds(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """South-west and north-east corners as ``((lat, lon), (lat, lon))``."""
        return ((self.min_lat, self.min_lon), (self.max_lat, self.max_lon))

    @property
    def lat_height(self) -> float:
        """Latitude extent in degrees."""
        return self.max_lat - self.min_lat

    @property
    def lon_width(self) -> float:
        """Longitude extent in degrees."""
        return self.max_lon - self.min_lon

    def contains(
        self,
        lat: float,
        lon: float,
        epsilon: float = DEFAULT_BOUNDS_EPSILON,
    ) -> bool:
        """Whether ``(lat, lon)`` lies inside the region, edges inclusive.

        ``epsilon`` widens every edge to absorb floating-point rounding
        from the successive rescalings performed by encode and decode.
        """
        return (
            self.min_lat - epsilon <= lat <= self.max_lat + epsilon
            and self.min_lon - epsilon <= lon <= self.max_lon + epsilon
        )

    def contains_region(
        self,
        other: BoundingRegion,
        epsilon: float = DEFAULT_BOUNDS_EPSILON,
    ) -> bool:
        """Whether *other* lies entirely inside this region."""
        return self.contains(other.min_lat, other.min_lon, epsilon) and self.contains(
            other.max_lat, other.max_lon, epsilon
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise as ``{"lat", "lon", "bounds"}`` with list-valued bounds."""
        lat, lon = self.center
        return {
            "lat": lat,
            "lon": lon,
            "bounds": [[self.min_lat, self.min_lon], [self.max_lat, self.max_lon]],
        }


@dataclass(frozen=True, slots=True)
class Cell:
    """One child cell beneath a parent grid path.

    Attributes:
        index: 1-based index of this cell within its level (1..2048).
        full_path: Parent path extended with ``index``.
        region: Decoded bounding region of ``full_path``.
    """

    index: int
    full_path: GridPath
    region: BoundingRegion

    @property
    def level(self) -> int:
        """Subdivision depth of this cell."""
        return len(self.full_path)

    @property
    def center(self) -> tuple[float, float]:
        """Midpoint as ``(lat, lon)``."""
        return self.region.center

    @property
    def bounds(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """South-west and north-east corners as ``((lat, lon), (lat, lon))``."""
        return self.region.bounds

    def to_dict(self) -> dict[str, object]:
        """Serialise as ``{"index", "grid", "center", "bounds"}``."""
        lat, lon = self.center
        region = self.region
        return {
            "index": self.index,
            "grid": list(self.full_path),
            "center": {"lat": lat, "lon": lon},
            "bounds": [[region.min_lat, region.min_lon], [region.max_lat, region.max_lon]],
        }
