"""Classified arguments for spatial SQL function calls."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ArgumentKind(str, Enum):
    """How an argument is embedded in a fragment.

    Values:
        RAW: An already built fragment, spliced in with its bindings
        LITERAL: WKT/EWKT text, embedded as a SQL string literal
        COLUMN: An identifier, bound through ``??``
        NUMBER: A numeric value, bound through ``?``
        BOOLEAN: A boolean value, bound through ``?``
        GEOJSON: Canonical GeoJSON text, bound through ``?``
        ABSENT: An optional parameter that was not supplied
    """

    RAW = "raw"
    LITERAL = "literal"
    COLUMN = "column"
    NUMBER = "number"
    BOOLEAN = "boolean"
    GEOJSON = "geojson"
    ABSENT = "absent"


@dataclass(frozen=True)
class Argument:
    """A value tagged with exactly one ArgumentKind.

    Build instances through the classmethods, or let the classifiers in
    ``sqlpostgis.classifier`` infer the kind once from a plain value.
    """

    kind: ArgumentKind
    value: Any = None

    @classmethod
    def raw(cls, fragment: Any) -> "Argument":
        return cls(ArgumentKind.RAW, fragment)

    @classmethod
    def literal(cls, text: str) -> "Argument":
        return cls(ArgumentKind.LITERAL, text)

    @classmethod
    def column(cls, name: str) -> "Argument":
        return cls(ArgumentKind.COLUMN, name)

    @classmethod
    def number(cls, value: Any) -> "Argument":
        return cls(ArgumentKind.NUMBER, value)

    @classmethod
    def boolean(cls, value: bool) -> "Argument":
        return cls(ArgumentKind.BOOLEAN, value)

    @classmethod
    def geojson(cls, text: str) -> "Argument":
        return cls(ArgumentKind.GEOJSON, text)

    @classmethod
    def absent(cls) -> "Argument":
        return ABSENT

    @property
    def is_absent(self) -> bool:
        return self.kind == ArgumentKind.ABSENT


ABSENT = Argument(ArgumentKind.ABSENT)
