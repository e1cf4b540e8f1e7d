
from sqlpostgis.__version__ import __version__

from sqlpostgis.classifier import (
    classify,
    classify_number,
    classify_boolean,
    classify_geojson,
    check_geojson_geometry,
    normalize_geojson_geometry,
    is_number,
    is_boolean,
    is_string,
    is_wkt,
)

from sqlpostgis.common.exceptions import (
    SpatialSQLError,
    ErrorCode,
    InvalidArgument,
    InvalidGeoJSON,
)

from sqlpostgis.functions import (
    FunctionRegistry,
    PostGIS,
    create_postgis,
    get_postgis,
)

from sqlpostgis.query_builder import FragmentBuilder, QueryLayer, create_builder

from sqlpostgis.types import ABSENT, Argument, ArgumentKind, SqlFragment


__all__ = [
    "__version__",

    # Operations
    "PostGIS",
    "FunctionRegistry",
    "create_postgis",
    "get_postgis",

    # Builder primitives
    "FragmentBuilder",
    "QueryLayer",
    "create_builder",
    "SqlFragment",
    "Argument",
    "ArgumentKind",
    "ABSENT",

    # Classifiers
    "classify",
    "classify_number",
    "classify_boolean",
    "classify_geojson",
    "check_geojson_geometry",
    "normalize_geojson_geometry",
    "is_number",
    "is_boolean",
    "is_string",
    "is_wkt",

    # Exceptions (public API)
    "SpatialSQLError",
    "ErrorCode",
    "InvalidArgument",
    "InvalidGeoJSON",
]
