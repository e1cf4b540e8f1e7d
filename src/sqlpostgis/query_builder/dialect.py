"""SQLAlchemy adapter for sqlpostgis fragments.

Fragments carry ``?`` value placeholders and ``??`` identifier
placeholders. This module resolves them against a SQLAlchemy dialect:
identifiers are quoted with the dialect's identifier preparer and values
either stay positional (:meth:`QueryLayer.to_sql`) or become bound
parameters of a ``TextClause`` (:meth:`QueryLayer.to_clause`).
"""

import re
from functools import lru_cache
from typing import Any, List, Optional, Tuple, Union

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Dialect, make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError
from sqlalchemy.sql.elements import ClauseElement, TextClause

from sqlpostgis.common.exceptions import InvalidArgument, configuration_error
from sqlpostgis.constants.sql import (
    ESCAPED_PLACEHOLDER,
    IDENTIFIER_PLACEHOLDER,
    PLACEHOLDER_PATTERN,
    VALUE_PLACEHOLDER,
    count_placeholders,
)
from sqlpostgis.logging import get_logger
from sqlpostgis.types.fragment import SqlFragment

logger = get_logger(__name__)

_LONE_COLON = re.compile(r"(?<!:):(?!:)")
_PYFORMAT_TOKEN = re.compile(r"%%|%\((?P<name>[^)]+)\)s|\?")
_PARAM_BEFORE_CAST = re.compile(r"(?<![\\\w:])(:p_\d+)(?=::)")


def load_dialect(name: str, paramstyle: str = "qmark") -> Dialect:
    """Instantiate the named SQLAlchemy dialect.

    Args:
        name: Dialect name as used in database URLs, e.g. ``postgresql``
        paramstyle: DBAPI parameter style the dialect compiles to

    Returns:
        Dialect instance. No DBAPI driver is imported.

    Raises:
        SpatialSQLError: CONFIG_ERROR if SQLAlchemy does not know the dialect
    """
    try:
        dialect_cls = make_url(f"{name}://").get_dialect()
    except (ArgumentError, NoSuchModuleError) as e:
        raise configuration_error(
            f"Unknown SQL dialect: {name}",
            config_key="dialect",
            cause=e,
        )
    return dialect_cls(paramstyle=paramstyle)


class QueryLayer:
    """Renders fragments for one SQLAlchemy dialect.

    Example:
        >>> layer = QueryLayer()
        >>> layer.to_sql(SqlFragment(expression="ST_X(??)", expression_bindings=["geom"]))
        ('ST_X("geom")', [])
    """

    def __init__(self, dialect: Optional[Union[str, Dialect]] = None):
        """Initialize the layer.

        Args:
            dialect: Dialect name or instance. Defaults to ``postgresql``.
        """
        if dialect is None or isinstance(dialect, str):
            dialect = load_dialect(dialect or "postgresql")
        self.dialect = dialect
        self.preparer = dialect.identifier_preparer
        # Named markers keep parameters apart from literal "?" in compiled SQL
        self._compile_dialect = type(dialect)(paramstyle="pyformat")

    @classmethod
    def default(cls) -> "QueryLayer":
        """Return the shared layer for the configured dialect."""
        from sqlpostgis.settings import get_settings
        return _layer_for(get_settings().dialect)

    @property
    def name(self) -> str:
        return self.dialect.name

    def quote_identifier(self, name: str) -> str:
        """Quote a possibly dotted identifier, one segment at a time."""
        if not isinstance(name, str) or not name:
            raise InvalidArgument(
                "Identifier must be a non-empty string",
                details={"received_type": type(name).__name__},
            )
        return ".".join(self.preparer.quote_identifier(part) for part in name.split("."))

    def is_raw(self, value: Any) -> bool:
        """Check whether value is an already built SQL expression."""
        return isinstance(value, (SqlFragment, ClauseElement))

    def to_fragment(self, value: Any) -> SqlFragment:
        """Convert a raw expression into a fragment.

        SQLAlchemy clause elements are compiled with named parameters. Each
        parameter marker becomes a ``?`` placeholder with its value as the
        binding, and question marks that belong to the SQL itself (the
        jsonb ``?`` operator, string literals) are escaped as ``\\?``.
        """
        if isinstance(value, SqlFragment):
            return value
        if not isinstance(value, ClauseElement):
            raise InvalidArgument(
                "Expected a SqlFragment or SQLAlchemy expression",
                details={"received_type": type(value).__name__},
            )
        compiled = value.compile(
            dialect=self._compile_dialect,
            compile_kwargs={"render_postcompile": True},
        )
        params = compiled.params
        bindings: List[Any] = []

        def convert(match: "re.Match") -> str:
            token = match.group(0)
            if token == "%%":
                return "%"
            if token == VALUE_PLACEHOLDER:
                return ESCAPED_PLACEHOLDER
            bindings.append(params[match.group("name")])
            return VALUE_PLACEHOLDER

        expression = _PYFORMAT_TOKEN.sub(convert, str(compiled))
        return SqlFragment(expression=expression, expression_bindings=bindings)

    def to_sql(self, fragment: SqlFragment) -> Tuple[str, List[Any]]:
        """Resolve identifier placeholders and keep value placeholders.

        Returns:
            Tuple of (sql, bindings) where sql only contains ``?``
            placeholders and bindings holds their values in order
        """
        values: List[Any] = []

        def resolve(placeholder: str, binding: Any) -> str:
            if placeholder == IDENTIFIER_PLACEHOLDER:
                return self.quote_identifier(binding)
            values.append(binding)
            return placeholder

        sql = self._substitute(fragment, resolve)
        return sql, values

    def to_clause(self, fragment: SqlFragment) -> TextClause:
        """Build a SQLAlchemy text clause with uniquely named bound parameters.

        The clause can be used wherever SQLAlchemy accepts a textual
        expression, e.g. ``select()``, ``where()`` or ``insert().values()``.
        """
        params = []

        def resolve(placeholder: str, binding: Any) -> str:
            if placeholder == IDENTIFIER_PLACEHOLDER:
                return _escape_colons(self.quote_identifier(binding))
            key = f"p_{len(params)}"
            params.append(bindparam(key, binding, unique=True))
            return f":{key}"

        sql = self._substitute(fragment, resolve, escape=_escape_colons)
        # text() does not see ":p_0" in ":p_0::type"
        sql = _PARAM_BEFORE_CAST.sub(r"(\1)", sql)
        return text(sql).bindparams(*params)

    def _substitute(self, fragment: SqlFragment, resolve, escape=None) -> str:
        sql = fragment.sql
        bindings = fragment.bindings
        parts = []
        position = 0
        index = 0

        for match in PLACEHOLDER_PATTERN.finditer(sql):
            if match.group(0) == ESCAPED_PLACEHOLDER:
                chunk = sql[position:match.start()] + VALUE_PLACEHOLDER
                parts.append(escape(chunk) if escape else chunk)
                position = match.end()
                continue
            if index >= len(bindings):
                raise _binding_mismatch(sql, bindings)
            chunk = sql[position:match.start()]
            parts.append(escape(chunk) if escape else chunk)
            parts.append(resolve(match.group(0), bindings[index]))
            position = match.end()
            index += 1

        if index != len(bindings):
            raise _binding_mismatch(sql, bindings)

        tail = sql[position:]
        parts.append(escape(tail) if escape else tail)
        return "".join(parts)

    def __repr__(self) -> str:
        return f"QueryLayer(dialect={self.name!r})"


@lru_cache(maxsize=None)
def _layer_for(dialect_name: str) -> QueryLayer:
    logger.debug(f"Creating query layer for dialect '{dialect_name}'")
    return QueryLayer(dialect_name)


def _escape_colons(sql: str) -> str:
    # text() reads ":name" as a bind parameter; "::" casts are left alone
    return _LONE_COLON.sub(r"\\:", sql)


def _binding_mismatch(sql: str, bindings: List[Any]) -> InvalidArgument:
    placeholders = count_placeholders(sql)
    return InvalidArgument(
        f"Fragment has {placeholders} placeholder(s) but {len(bindings)} binding(s)",
        details={"sql": sql, "placeholders": placeholders, "bindings": len(bindings)},
    )
