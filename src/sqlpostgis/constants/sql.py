"""SQL placeholder and operator constants.

Fragments use a two-placeholder binding convention: ``?`` for values and
``??`` for identifiers. Both are resolved by the query layer when a
fragment is rendered. A literal question mark in fragment text is written
``\\?`` and rendered as a plain ``?``.
"""

import re
from enum import Enum


VALUE_PLACEHOLDER = "?"
IDENTIFIER_PLACEHOLDER = "??"
ESCAPED_PLACEHOLDER = "\\?"

# Escaped marks first, then ``??`` before ``?``.
PLACEHOLDER_PATTERN = re.compile(r"\\\?|\?\?|\?")

ALIAS_CLAUSE = " AS " + IDENTIFIER_PLACEHOLDER


def count_placeholders(sql: str) -> int:
    """Count the ``?`` and ``??`` placeholders in sql, ignoring escaped marks."""
    return sum(
        1 for match in PLACEHOLDER_PATTERN.finditer(sql)
        if match.group(0) != ESCAPED_PLACEHOLDER
    )


class BoundingBoxOperator(str, Enum):
    """PostGIS bounding-box operators.

    Values:
        INTERSECTS: A's 2D bounding box intersects B's
        CONTAINED: A's bounding box is contained by B's
        CONTAINS: A's bounding box contains B's
    """

    INTERSECTS = "&&"
    CONTAINED = "@"
    CONTAINS = "~"


class SpatialType(str, Enum):
    """PostGIS types used as cast targets."""

    GEOMETRY = "geometry"
    GEOGRAPHY = "geography"
