"""GeoJSON geometry validation and normalization."""

import json
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from sqlpostgis.common.exceptions import InvalidGeoJSON, invalid_geojson
from sqlpostgis.logging import get_logger
from sqlpostgis.types.geojson import GEOMETRY_ADAPTER

logger = get_logger(__name__)


def check_geojson_geometry(value: Any) -> Dict[str, Any]:
    """Validate a GeoJSON geometry and reduce it to its geometry members.

    Accepts a mapping or its JSON text. The result keeps only ``type``,
    ``coordinates`` (``geometries`` for collections) and ``crs`` when set.

    Args:
        value: Mapping or JSON string describing one geometry

    Returns:
        The normalized geometry mapping

    Raises:
        InvalidGeoJSON: If the text is not JSON or the geometry is invalid
    """
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError as e:
            raise invalid_geojson(
                errors=[{"type": "json_invalid", "loc": (), "msg": str(e)}],
                cause=e,
            )

    if not isinstance(value, Mapping):
        raise invalid_geojson(
            errors=[{
                "type": "model_type",
                "loc": (),
                "msg": f"Expected a JSON object, got {type(value).__name__}",
            }]
        )

    try:
        geometry = GEOMETRY_ADAPTER.validate_python(dict(value))
    except ValidationError as e:
        logger.debug(f"GeoJSON rejected with {e.error_count()} error(s)")
        raise invalid_geojson(
            errors=e.errors(include_url=False, include_context=False),
            cause=e,
        )

    return geometry.model_dump(exclude_none=True)


def normalize_geojson_geometry(value: Any) -> Optional[Dict[str, Any]]:
    """Like :func:`check_geojson_geometry` but return None for invalid input."""
    try:
        return check_geojson_geometry(value)
    except InvalidGeoJSON:
        return None


def dump_geojson(geometry: Mapping[str, Any]) -> str:
    """Serialize a normalized geometry to compact, canonical JSON text."""
    return json.dumps(geometry, separators=(",", ":"))
