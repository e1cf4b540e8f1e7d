"""Fragment builder primitives.

The builder turns classified arguments into parameterized SQL fragments.
It is the only place where SQL text is assembled, and it only ever
splices three things into that text: validated function/type names,
WKT literals that matched the strict grammar, and the expressions of
fragments the caller already built.
"""

import logging
import re
from typing import Any, List, Optional, Sequence, Tuple, Union

from sqlpostgis.classifier import (
    classify,
    classify_boolean,
    classify_geojson,
    classify_number,
    is_wkt,
)
from sqlpostgis.common.exceptions import (
    InvalidArgument,
    invalid_argument,
    invalid_identifier,
)
from sqlpostgis.constants.sql import (
    IDENTIFIER_PLACEHOLDER,
    VALUE_PLACEHOLDER,
    BoundingBoxOperator,
    count_placeholders,
)
from sqlpostgis.logging import get_logger
from sqlpostgis.query_builder.dialect import QueryLayer
from sqlpostgis.types.argument import ABSENT, Argument, ArgumentKind
from sqlpostgis.types.fragment import SqlFragment

logger = get_logger(__name__)

_FUNCTION_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)?")
_TYPE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\([0-9, ]*\))?(?:\[\])?")


class FragmentBuilder:
    """Builds SQL fragments from classified arguments.

    The builder holds no state besides the query layer it classifies raw
    expressions with, so one instance can be shared freely.

    Example:
        >>> builder = FragmentBuilder()
        >>> fragment = builder.build_call(
        ...     "ST_MakePoint", [Argument.number(1.5), Argument.number(2.5)]
        ... )
        >>> fragment.sql, fragment.bindings
        ('ST_MakePoint(?, ?)', [1.5, 2.5])
    """

    def __init__(self, layer: Optional[QueryLayer] = None):
        self.layer = layer or QueryLayer.default()

    # Classification

    def classify(self, value: Any, parameter: Optional[str] = None) -> Argument:
        return classify(value, self.layer, parameter)

    def classify_number(self, value: Any, parameter: Optional[str] = None) -> Argument:
        return classify_number(value, self.layer, parameter)

    def classify_boolean(self, value: Any, parameter: Optional[str] = None) -> Argument:
        return classify_boolean(value, self.layer, parameter)

    def classify_geojson(self, value: Any, parameter: Optional[str] = None) -> Argument:
        return classify_geojson(value, self.layer, parameter)

    def absent(self) -> Argument:
        return ABSENT

    def is_raw(self, value: Any) -> bool:
        return self.layer.is_raw(value)

    def quote_identifier(self, name: str) -> str:
        return self.layer.quote_identifier(name)

    # Construction

    def build_call(self, function_name: str, args: Sequence[Any]) -> SqlFragment:
        """Build ``function_name(<args>)``.

        Trailing absent arguments are dropped. An absent argument followed
        by a present one is bound as NULL.

        Args:
            function_name: SQL function name, optionally schema qualified
            args: Arguments in call order. Values that are not Argument
                instances go through :meth:`classify`.

        Returns:
            Fragment with one binding per placeholder, in call order

        Raises:
            InvalidArgument: If function_name is not a plain SQL name
        """
        self._validate_name(function_name, _FUNCTION_NAME, "function")

        arguments = [self._coerce(arg) for arg in args]
        while arguments and arguments[-1].is_absent:
            arguments.pop()

        parts: List[str] = []
        bindings: List[Any] = []
        for argument in arguments:
            sql, values = self._render(argument)
            parts.append(sql)
            bindings.extend(values)

        fragment = SqlFragment(
            expression=f"{function_name}({', '.join(parts)})",
            expression_bindings=bindings,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Built fragment {fragment.expression} with {len(bindings)} binding(s)",
                extra={"fragment": fragment.to_dict()},
            )
        return fragment

    def build_operator(
        self,
        operator: Union[BoundingBoxOperator, str],
        left: Any,
        right: Any,
    ) -> SqlFragment:
        """Build ``(<left> operator <right>)`` for a bounding-box operator.

        Raises:
            InvalidArgument: If operator is not a known bounding-box operator
        """
        try:
            operator = BoundingBoxOperator(operator)
        except ValueError as e:
            raise InvalidArgument(
                f"Unsupported operator: {operator!r}",
                details={"allowed": [op.value for op in BoundingBoxOperator]},
                cause=e,
            )

        left_sql, left_values = self._render(self._coerce(left))
        right_sql, right_values = self._render(self._coerce(right))
        return SqlFragment(
            expression=f"({left_sql} {operator.value} {right_sql})",
            expression_bindings=left_values + right_values,
        )

    def build_cast(self, arg: Any, type_name: str) -> SqlFragment:
        """Build ``<arg>::type_name``.

        Raw expressions are parenthesized so the cast applies to the whole
        expression.
        """
        self._validate_name(type_name, _TYPE_NAME, "type")
        argument = self._coerce(arg)
        sql, values = self._render(argument)
        if argument.kind == ArgumentKind.RAW:
            sql = f"({sql})"
        return SqlFragment(expression=f"{sql}::{type_name}", expression_bindings=values)

    def raw(self, sql: str, bindings: Optional[Sequence[Any]] = None) -> SqlFragment:
        """Build a fragment from hand-written SQL.

        Raises:
            InvalidArgument: If the placeholder count differs from the
                number of bindings
        """
        bindings = list(bindings or [])
        placeholders = count_placeholders(sql)
        if placeholders != len(bindings):
            raise InvalidArgument(
                f"Expected {placeholders} binding(s) for raw SQL, got {len(bindings)}",
                details={"sql": sql, "placeholders": placeholders, "bindings": len(bindings)},
            )
        return SqlFragment(expression=sql, expression_bindings=bindings)

    def with_alias(self, fragment: SqlFragment, alias: str) -> SqlFragment:
        return fragment.with_alias(alias)

    # Internals

    def _coerce(self, value: Any) -> Argument:
        if isinstance(value, Argument):
            return value
        return self.classify(value)

    def _render(self, argument: Argument) -> Tuple[str, List[Any]]:
        kind = argument.kind
        if kind == ArgumentKind.RAW:
            fragment = self.layer.to_fragment(argument.value)
            return fragment.expression, list(fragment.expression_bindings)
        if kind == ArgumentKind.LITERAL:
            if not is_wkt(argument.value):
                raise invalid_argument("WKT literal", argument.value)
            return f"'{argument.value}'", []
        if kind == ArgumentKind.COLUMN:
            return IDENTIFIER_PLACEHOLDER, [argument.value]
        # NUMBER, BOOLEAN, GEOJSON and interior ABSENT (bound as NULL)
        return VALUE_PLACEHOLDER, [argument.value]

    @staticmethod
    def _validate_name(name: Any, pattern: "re.Pattern", identifier_type: str) -> None:
        if not isinstance(name, str) or not pattern.fullmatch(name):
            raise invalid_identifier(name, identifier_type)
