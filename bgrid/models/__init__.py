"""Data models.

- BoundingRegion: Lat/lon rectangle denoted by a grid path
- Cell: One child cell beneath a parent path
- CellFeature / CellFeatureCollection: GeoJSON export of cells
"""

from bgrid.models.geojson import (
    CellFeature,
    CellFeatureCollection,
    cell_to_feature,
    cells_to_feature_collection,
)
from bgrid.models.region import BoundingRegion, Cell, GridPath

__all__ = [
    "BoundingRegion",
    "Cell",
    "CellFeature",
    "CellFeatureCollection",
    "GridPath",
    "cell_to_feature",
    "cells_to_feature_collection",
]
