"""GeoJSON geometry models.

Only geometry objects are modelled. Features and FeatureCollections are
rejected, and unknown members are dropped on validation so that a
validated geometry serializes to ``type``, ``coordinates`` (or
``geometries``) and, when present, ``crs``.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, TypeAdapter
from typing_extensions import Annotated


Coordinate = Union[StrictInt, Annotated[float, Field(strict=True, allow_inf_nan=False)]]
Position = Annotated[List[Coordinate], Field(min_length=2, max_length=3)]


def _ring_is_closed(ring: List[List[Any]]) -> List[List[Any]]:
    if ring[0] != ring[-1]:
        raise ValueError("linear ring must start and end with the same position")
    return ring


LineStringCoordinates = Annotated[List[Position], Field(min_length=2)]
LinearRing = Annotated[List[Position], Field(min_length=4), AfterValidator(_ring_is_closed)]
PolygonCoordinates = List[LinearRing]


class _Geometry(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Point(_Geometry):
    type: Literal["Point"]
    coordinates: Position
    crs: Optional[Dict[str, Any]] = None


class MultiPoint(_Geometry):
    type: Literal["MultiPoint"]
    coordinates: List[Position]
    crs: Optional[Dict[str, Any]] = None


class LineString(_Geometry):
    type: Literal["LineString"]
    coordinates: LineStringCoordinates
    crs: Optional[Dict[str, Any]] = None


class MultiLineString(_Geometry):
    type: Literal["MultiLineString"]
    coordinates: List[LineStringCoordinates]
    crs: Optional[Dict[str, Any]] = None


class Polygon(_Geometry):
    type: Literal["Polygon"]
    coordinates: PolygonCoordinates
    crs: Optional[Dict[str, Any]] = None


class MultiPolygon(_Geometry):
    type: Literal["MultiPolygon"]
    coordinates: List[PolygonCoordinates]
    crs: Optional[Dict[str, Any]] = None


class GeometryCollection(_Geometry):
    type: Literal["GeometryCollection"]
    geometries: List["Geometry"]
    crs: Optional[Dict[str, Any]] = None


Geometry = Annotated[
    Union[
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
    ],
    Field(discriminator="type"),
]

GeometryCollection.model_rebuild()

GEOMETRY_ADAPTER: TypeAdapter = TypeAdapter(Geometry)

GEOMETRY_TYPES = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
)
