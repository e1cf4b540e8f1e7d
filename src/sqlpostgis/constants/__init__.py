"""Constants module for sqlpostgis.

Layer 0 of the package: no dependencies on other sqlpostgis modules.

Organization:
    - wkt: Geometry keywords and the WKT/EWKT literal grammar
    - sql: Placeholder conventions, bounding-box operators and cast targets
"""

from sqlpostgis.constants.wkt import GEOMETRY_KEYWORDS, WKT_PATTERN
from sqlpostgis.constants.sql import (
    ALIAS_CLAUSE,
    ESCAPED_PLACEHOLDER,
    IDENTIFIER_PLACEHOLDER,
    PLACEHOLDER_PATTERN,
    VALUE_PLACEHOLDER,
    BoundingBoxOperator,
    SpatialType,
    count_placeholders,
)

__all__ = [
    "GEOMETRY_KEYWORDS",
    "WKT_PATTERN",
    "ALIAS_CLAUSE",
    "ESCAPED_PLACEHOLDER",
    "IDENTIFIER_PLACEHOLDER",
    "PLACEHOLDER_PATTERN",
    "VALUE_PLACEHOLDER",
    "BoundingBoxOperator",
    "SpatialType",
    "count_placeholders",
]
