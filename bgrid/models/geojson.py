"""Pydantic GeoJSON models for visualising grid cells.

Each ``Cell`` becomes a GeoJSON ``Feature`` whose geometry is the closed
rectangle of its bounding region.  GeoJSON positions are ``[lon, lat]``,
the reverse of the ``(lat, lon)`` pairs used elsewhere in the package.

Rings start at the south-west corner and run counter-clockwise, as
RFC 7946 requires for exterior rings.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel, Field

from bgrid.models.region import BoundingRegion, Cell


class PolygonGeometry(BaseModel):
    """GeoJSON Polygon with a single exterior ring."""

    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[list[float]]] = Field(default_factory=list)


class CellProperties(BaseModel):
    """Feature properties identifying the cell.

    Attributes:
        index: 1-based index within the cell's level.
        grid: Full grid path of the cell.
        level: Subdivision depth (``len(grid)``).
        center: Cell center as ``[lat, lon]``.
    """

    index: int
    grid: list[int]
    level: int
    center: list[float]


class CellFeature(BaseModel):
    """GeoJSON Feature for one grid cell."""

    type: Literal["Feature"] = "Feature"
    geometry: PolygonGeometry
    properties: CellProperties


class CellFeatureCollection(BaseModel):
    """GeoJSON FeatureCollection of grid cells."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[CellFeature] = Field(default_factory=list)


def region_to_polygon(region: BoundingRegion) -> PolygonGeometry:
    """Return the closed counter-clockwise ring of *region*."""
    ring = [
        [region.min_lon, region.min_lat],
        [region.max_lon, region.min_lat],
        [region.max_lon, region.max_lat],
        [region.min_lon, region.max_lat],
        [region.min_lon, region.min_lat],
    ]
    return PolygonGeometry(coordinates=[ring])


def cell_to_feature(cell: Cell) -> CellFeature:
    """Build the GeoJSON Feature for *cell*."""
    return CellFeature(
        geometry=region_to_polygon(cell.region),
        properties=CellProperties(
            index=cell.index,
            grid=list(cell.full_path),
            level=cell.level,
            center=list(cell.center),
        ),
    )


def cells_to_feature_collection(cells: Iterable[Cell]) -> CellFeatureCollection:
    """Build a FeatureCollection from any iterable of cells."""
    return CellFeatureCollection(features=[cell_to_feature(cell) for cell in cells])
