"""Value predicates used by the argument classifiers."""

import math
import re
from decimal import Decimal
from typing import Any, Optional, Tuple

from sqlpostgis.constants.wkt import WKT_PATTERN


_NUMERIC_STRING = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")


def is_number(value: Any) -> bool:
    """Check whether value is a finite number or a numeric string.

    Booleans are not numbers here even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, (float, Decimal)):
        return math.isfinite(value)
    if isinstance(value, str) and _NUMERIC_STRING.fullmatch(value):
        return math.isfinite(float(value))
    return False


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_wkt(value: Any) -> bool:
    """Check whether value is a WKT or EWKT literal safe to embed in SQL."""
    return isinstance(value, str) and WKT_PATTERN.fullmatch(value) is not None


def split_ewkt(value: str) -> Tuple[Optional[int], str]:
    """Split an EWKT literal into its SRID and plain WKT.

    Args:
        value: WKT or EWKT text, e.g. ``SRID=4326;POINT(1 2)``

    Returns:
        Tuple of (srid, wkt). srid is None when the text has no prefix.

    Raises:
        ValueError: If value is not a WKT literal
    """
    match = WKT_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Not a WKT literal: {value!r}")
    srid = match.group("srid_value")
    return (int(srid) if srid is not None else None), match.group("wkt")
