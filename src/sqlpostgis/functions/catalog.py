"""Catalog of the built-in PostGIS operations.

Each entry maps a Python operation name to the SQL function it emits and
to the classifier applied to each parameter. Operations with extra SQL
shape (operators, casts, SRID extraction) live in
:mod:`sqlpostgis.functions.postgis`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class ParamKind(str, Enum):
    """Classifier applied to a parameter.

    Values:
        GEOMETRY: Raw expression, WKT literal or column name
        NUMBER: Number, raw expression or column name
        BOOLEAN: Boolean, raw expression or column name
        GEOJSON: GeoJSON geometry, raw expression or column name
    """

    GEOMETRY = "geometry"
    NUMBER = "number"
    BOOLEAN = "boolean"
    GEOJSON = "geojson"


@dataclass(frozen=True)
class Param:
    name: str
    kind: ParamKind = ParamKind.GEOMETRY
    optional: bool = False


@dataclass(frozen=True)
class FunctionSpec:
    """Definition of one catalog operation.

    Attributes:
        sql_name: SQL function emitted by the operation
        params: Parameters in SQL argument order
        auto_alias: Alias the result with the column name when the first
            parameter is a bare column
        doc: One-line description used as the operation's docstring
    """

    sql_name: str
    params: Tuple[Param, ...]
    auto_alias: bool = False
    doc: str = ""


def _geom(name: str = "geom") -> Param:
    return Param(name, ParamKind.GEOMETRY)


def _number(name: str, optional: bool = False) -> Param:
    return Param(name, ParamKind.NUMBER, optional)


_TWO_GEOMETRIES = (_geom("geom1"), _geom("geom2"))


CATALOG: Dict[str, FunctionSpec] = {
    "area": FunctionSpec(
        "ST_Area", (_geom(),),
        doc="Area of a polygonal geometry.",
    ),
    "as_text": FunctionSpec(
        "ST_AsText", (_geom(),), auto_alias=True,
        doc="Well-known text of a geometry.",
    ),
    "as_ewkt": FunctionSpec(
        "ST_AsEWKT", (_geom(),), auto_alias=True,
        doc="Extended well-known text of a geometry, SRID included.",
    ),
    "as_geojson": FunctionSpec(
        "ST_AsGeoJSON",
        (_geom(), _number("max_decimal_digits", True), _number("options", True)),
        auto_alias=True,
        doc="GeoJSON text of a geometry.",
    ),
    "buffer": FunctionSpec(
        "ST_Buffer", (_geom(), _number("radius")),
        doc="Geometry covering all points within radius of geom.",
    ),
    "centroid": FunctionSpec(
        "ST_Centroid", (_geom(),),
        doc="Geometric center of a geometry.",
    ),
    "distance": FunctionSpec(
        "ST_Distance", _TWO_GEOMETRIES,
        doc="Minimum distance between two geometries.",
    ),
    "distance_sphere": FunctionSpec(
        "ST_DistanceSphere", _TWO_GEOMETRIES,
        doc="Minimum distance in meters between two lon/lat geometries.",
    ),
    "dwithin": FunctionSpec(
        "ST_DWithin",
        (
            _geom("geom1"),
            _geom("geom2"),
            _number("distance"),
            Param("use_spheroid", ParamKind.BOOLEAN, optional=True),
        ),
        doc="Whether two geometries are within distance of each other.",
    ),
    "intersection": FunctionSpec(
        "ST_Intersection", _TWO_GEOMETRIES,
        doc="Shared portion of two geometries.",
    ),
    "intersects": FunctionSpec(
        "ST_Intersects", _TWO_GEOMETRIES,
        doc="Whether two geometries share any point.",
    ),
    "within": FunctionSpec(
        "ST_Within", _TWO_GEOMETRIES,
        doc="Whether geom1 lies completely inside geom2.",
    ),
    "geography_from_text": FunctionSpec(
        "ST_GeographyFromText", (_geom("ewkt"),),
        doc="Geography from well-known text.",
    ),
    "geom_from_geojson": FunctionSpec(
        "ST_GeomFromGeoJSON", (Param("geojson", ParamKind.GEOJSON),),
        doc="Geometry from a GeoJSON geometry object, JSON text or column.",
    ),
    "make_envelope": FunctionSpec(
        "ST_MakeEnvelope",
        (
            _number("xmin"),
            _number("ymin"),
            _number("xmax"),
            _number("ymax"),
            _number("srid", True),
        ),
        doc="Rectangular polygon from minimum and maximum coordinates.",
    ),
    "make_point": FunctionSpec(
        "ST_MakePoint",
        (_number("x"), _number("y"), _number("z", True), _number("m", True)),
        doc="2D, 3DZ or 4D point.",
    ),
    "make_valid": FunctionSpec(
        "ST_MakeValid", (_geom(),),
        doc="Valid representation of an invalid geometry.",
    ),
    "point": FunctionSpec(
        "ST_Point", (_number("x"), _number("y")),
        doc="Point from x and y coordinates.",
    ),
    "set_srid": FunctionSpec(
        "ST_SetSRID", (_geom(), _number("srid")),
        doc="Geometry with its SRID replaced, coordinates untouched.",
    ),
    "transform": FunctionSpec(
        "ST_Transform", (_geom(), _number("srid")),
        doc="Geometry reprojected to another spatial reference system.",
    ),
    "x": FunctionSpec("ST_X", (_geom(),), doc="X coordinate of a point."),
    "y": FunctionSpec("ST_Y", (_geom(),), doc="Y coordinate of a point."),
    "z": FunctionSpec("ST_Z", (_geom(),), doc="Z coordinate of a point."),
    "m": FunctionSpec("ST_M", (_geom(),), doc="M coordinate of a point."),
    "multi": FunctionSpec(
        "ST_Multi", (_geom(),),
        doc="Geometry as a MULTI* collection.",
    ),
}
