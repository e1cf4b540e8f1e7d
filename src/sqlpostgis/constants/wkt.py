"""Well-known text constants.

This module holds the geometry keywords recognised as WKT/EWKT literals
and the grammar used to decide whether a string may be embedded verbatim
in SQL text.
"""

import re
from typing import Tuple


GEOMETRY_KEYWORDS: Tuple[str, ...] = (
    "GEOMETRYCOLLECTION",
    "CURVEPOLYGON",
    "MULTIPOINT",
    "MULTILINESTRING",
    "MULTIPOLYGON",
    "MULTICURVE",
    "MULTISURFACE",
    "POINT",
    "LINESTRING",
    "POLYGON",
    "CURVE",
    "SURFACE",
    "TRIANGLE",
    "CIRCULARSTRING",
    "COMPOUNDCURVE",
    "POLYHEDRALSURFACE",
    "TIN",
)

# The body may only contain coordinates and ring punctuation. Quotes,
# semicolons and letters after the keyword never match.
WKT_PATTERN = re.compile(
    r"(?P<srid>srid=(?P<srid_value>\d+);)?"
    r"(?P<wkt>(?:" + "|".join(GEOMETRY_KEYWORDS) + r")\s*\([0-9,\s.()+-]*\))",
    re.IGNORECASE,
)
