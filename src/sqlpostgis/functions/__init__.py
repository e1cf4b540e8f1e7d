"""Spatial operations and their registry."""

from sqlpostgis.functions.catalog import CATALOG, FunctionSpec, Param, ParamKind
from sqlpostgis.functions.postgis import (
    PostGIS,
    create_postgis,
    get_postgis,
    make_operation,
)
from sqlpostgis.functions.registry import FunctionRegistry

__all__ = [
    "CATALOG",
    "FunctionSpec",
    "Param",
    "ParamKind",
    "PostGIS",
    "create_postgis",
    "get_postgis",
    "make_operation",
    "FunctionRegistry",
]
