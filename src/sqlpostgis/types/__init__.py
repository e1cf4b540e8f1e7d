"""Value types shared across sqlpostgis."""

from sqlpostgis.types.argument import ABSENT, Argument, ArgumentKind
from sqlpostgis.types.base import SpatialBaseModel
from sqlpostgis.types.fragment import SqlFragment
from sqlpostgis.types.geojson import (
    GEOMETRY_ADAPTER,
    GEOMETRY_TYPES,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = [
    "ABSENT",
    "Argument",
    "ArgumentKind",
    "SpatialBaseModel",
    "SqlFragment",
    "GEOMETRY_ADAPTER",
    "GEOMETRY_TYPES",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
]
