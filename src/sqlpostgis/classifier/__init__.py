"""Input classification for spatial function arguments."""

from sqlpostgis.classifier.classify import (
    classify,
    classify_boolean,
    classify_geojson,
    classify_number,
)
from sqlpostgis.classifier.geojson import (
    check_geojson_geometry,
    dump_geojson,
    normalize_geojson_geometry,
)
from sqlpostgis.classifier.predicates import (
    is_boolean,
    is_number,
    is_string,
    is_wkt,
    split_ewkt,
)

__all__ = [
    "classify",
    "classify_boolean",
    "classify_geojson",
    "classify_number",
    "check_geojson_geometry",
    "dump_geojson",
    "normalize_geojson_geometry",
    "is_boolean",
    "is_number",
    "is_string",
    "is_wkt",
    "split_ewkt",
]
