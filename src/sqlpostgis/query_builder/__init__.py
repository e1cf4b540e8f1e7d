"""Fragment construction and rendering."""

from sqlpostgis.query_builder.base import FragmentBuilder
from sqlpostgis.query_builder.dialect import QueryLayer, load_dialect
from sqlpostgis.query_builder.factory import create_builder

__all__ = [
    "FragmentBuilder",
    "QueryLayer",
    "load_dialect",
    "create_builder",
]
