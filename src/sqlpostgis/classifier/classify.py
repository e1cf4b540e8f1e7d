"""Argument classifiers.

Each classifier inspects a plain Python value once and tags it with an
ArgumentKind. Downstream code only ever looks at the tag, so a value is
never spliced into SQL text unless it was classified as a WKT literal.
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from sqlpostgis.classifier.geojson import check_geojson_geometry, dump_geojson
from sqlpostgis.classifier.predicates import is_boolean, is_number, is_string, is_wkt
from sqlpostgis.common.exceptions import invalid_argument
from sqlpostgis.types.argument import Argument

if TYPE_CHECKING:
    from sqlpostgis.query_builder.dialect import QueryLayer


def _layer(layer: Optional["QueryLayer"]) -> "QueryLayer":
    if layer is not None:
        return layer
    # Lazy import to avoid circular dependency
    from sqlpostgis.query_builder.dialect import QueryLayer
    return QueryLayer.default()


def _as_raw(value: Any, layer: Optional["QueryLayer"]) -> Optional[Argument]:
    if isinstance(value, Argument):
        return value
    layer = _layer(layer)
    if layer.is_raw(value):
        return Argument.raw(layer.to_fragment(value))
    return None


def classify(
    value: Any,
    layer: Optional["QueryLayer"] = None,
    parameter: Optional[str] = None,
) -> Argument:
    """Classify a geometry argument.

    Args:
        value: Fragment, clause element, WKT/EWKT text or column name
        layer: Query layer used to recognise raw expressions
        parameter: Parameter name reported in errors

    Returns:
        RAW, LITERAL or COLUMN argument

    Raises:
        InvalidArgument: If value is none of the accepted shapes
    """
    raw = _as_raw(value, layer)
    if raw is not None:
        return raw
    if is_wkt(value):
        return Argument.literal(value)
    if is_string(value):
        return Argument.column(value)
    raise invalid_argument(
        "geometry",
        value,
        parameter=parameter,
        description="geometry expression or column name",
    )


def classify_number(
    value: Any,
    layer: Optional["QueryLayer"] = None,
    parameter: Optional[str] = None,
) -> Argument:
    """Classify a numeric argument; non-numeric strings name a column."""
    raw = _as_raw(value, layer)
    if raw is not None:
        return raw
    if is_number(value):
        return Argument.number(value)
    if is_string(value):
        return Argument.column(value)
    raise invalid_argument("number", value, parameter=parameter)


def classify_boolean(
    value: Any,
    layer: Optional["QueryLayer"] = None,
    parameter: Optional[str] = None,
) -> Argument:
    """Classify a boolean argument; strings name a column."""
    raw = _as_raw(value, layer)
    if raw is not None:
        return raw
    if is_boolean(value):
        return Argument.boolean(value)
    if is_string(value):
        return Argument.column(value)
    raise invalid_argument("boolean", value, parameter=parameter)


def classify_geojson(
    value: Any,
    layer: Optional["QueryLayer"] = None,
    parameter: Optional[str] = None,
) -> Argument:
    """Classify a GeoJSON argument.

    Mappings and JSON object text are validated and bound as canonical
    JSON. A string without braces names a column holding GeoJSON.

    Raises:
        InvalidGeoJSON: If the value is JSON text or a mapping that does not
            describe a valid geometry
        InvalidArgument: If value is neither a string nor a mapping
    """
    raw = _as_raw(value, layer)
    if raw is not None:
        return raw
    if is_string(value) and "{" not in value and "}" not in value:
        return Argument.column(value)
    if is_string(value) or isinstance(value, Mapping):
        return Argument.geojson(dump_geojson(check_geojson_geometry(value)))
    raise invalid_argument(
        "geojson",
        value,
        parameter=parameter,
        description="GeoJSON geometry or column name",
    )
