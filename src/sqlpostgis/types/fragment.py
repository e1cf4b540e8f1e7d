"""Parameterized SQL fragments."""

from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from pydantic import field_validator

from sqlpostgis.common.exceptions import InvalidArgument
from sqlpostgis.constants.sql import ALIAS_CLAUSE
from sqlpostgis.types.base import SpatialBaseModel

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import TextClause

    from sqlpostgis.query_builder.dialect import QueryLayer


class SqlFragment(SpatialBaseModel):
    """A piece of SQL text plus the values bound to its placeholders.

    ``?`` placeholders take values and ``??`` placeholders take
    identifiers; both consume ``bindings`` left to right. The alias is kept
    apart from the expression so that re-aliasing replaces it and nesting
    the fragment inside another call drops it.

    Attributes:
        expression: SQL text without the alias clause
        expression_bindings: Values for the placeholders of ``expression``
        alias: Optional output name, rendered as `` AS ??``
    """

    expression: str
    expression_bindings: Tuple[Any, ...] = ()
    alias: Optional[str] = None

    @field_validator("expression_bindings", mode="before")
    @classmethod
    def _coerce_bindings(cls, value: Any) -> Tuple[Any, ...]:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(value)
        return (value,)

    @property
    def sql(self) -> str:
        """Full SQL text, including the alias clause when aliased."""
        if self.alias is None:
            return self.expression
        return self.expression + ALIAS_CLAUSE

    @property
    def bindings(self) -> List[Any]:
        """Bindings matching the placeholders of :attr:`sql`, in order."""
        values = list(self.expression_bindings)
        if self.alias is not None:
            values.append(self.alias)
        return values

    def with_alias(self, alias: str) -> "SqlFragment":
        """Return a copy aliased as ``alias``, replacing any previous alias.

        Raises:
            InvalidArgument: If alias is not a non-empty string
        """
        if not isinstance(alias, str) or not alias:
            raise InvalidArgument(
                "Alias must be a non-empty string",
                details={"received_type": type(alias).__name__},
            )
        return self.model_copy(update={"alias": alias})

    def without_alias(self) -> "SqlFragment":
        if self.alias is None:
            return self
        return self.model_copy(update={"alias": None})

    # ``as`` is reserved in Python
    as_ = with_alias

    def to_sql(self, layer: Optional["QueryLayer"] = None) -> Tuple[str, List[Any]]:
        """Render with identifiers quoted; see :meth:`QueryLayer.to_sql`."""
        return _layer(layer).to_sql(self)

    def to_clause(self, layer: Optional["QueryLayer"] = None) -> "TextClause":
        """Render as a SQLAlchemy text clause; see :meth:`QueryLayer.to_clause`."""
        return _layer(layer).to_clause(self)

    def __str__(self) -> str:
        return self.sql


def _layer(layer: Optional["QueryLayer"]) -> "QueryLayer":
    if layer is not None:
        return layer
    # Lazy import to avoid circular dependency
    from sqlpostgis.query_builder.dialect import QueryLayer
    return QueryLayer.default()
