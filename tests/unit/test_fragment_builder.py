"""Unit tests for the fragment builder."""

import pytest
from sqlalchemy import func

from sqlpostgis.common.exceptions import ErrorCode, InvalidArgument
from sqlpostgis.constants import BoundingBoxOperator
from sqlpostgis.types import ABSENT, Argument, SqlFragment


class TestBuildCall:
    """Function call assembly."""

    def test_numbers_are_bound(self, builder):
        fragment = builder.build_call(
            "ST_MakePoint", [Argument.number(1.5), Argument.number(2.5)]
        )
        assert fragment.sql == "ST_MakePoint(?, ?)"
        assert fragment.bindings == [1.5, 2.5]

    def test_trailing_absent_arguments_are_trimmed(self, builder):
        fragment = builder.build_call(
            "ST_MakePoint", [Argument.number(1), Argument.number(2), ABSENT, ABSENT]
        )
        assert fragment.sql == "ST_MakePoint(?, ?)"
        assert fragment.bindings == [1, 2]

    def test_interior_absent_is_bound_as_null(self, builder):
        fragment = builder.build_call(
            "ST_MakePoint",
            [Argument.number(1), Argument.number(2), ABSENT, Argument.number(4)],
        )
        assert fragment.sql == "ST_MakePoint(?, ?, ?, ?)"
        assert fragment.bindings == [1, 2, None, 4]

    def test_literal_is_spliced(self, builder):
        fragment = builder.build_call("ST_Area", [Argument.literal("POINT(0 0)")])
        assert fragment.sql == "ST_Area('POINT(0 0)')"
        assert fragment.bindings == []

    def test_literal_must_be_wkt(self, builder):
        with pytest.raises(InvalidArgument):
            builder.build_call("ST_Area", [Argument.literal("x'); DROP TABLE t; --")])

    def test_column_uses_identifier_placeholder(self, builder):
        fragment = builder.build_call("ST_Area", [Argument.column("geom")])
        assert fragment.sql == "ST_Area(??)"
        assert fragment.bindings == ["geom"]

    def test_raw_is_spliced_with_bindings(self, builder):
        inner = builder.build_call("ST_Point", [Argument.number(1), Argument.number(2)])
        fragment = builder.build_call(
            "ST_DWithin", [Argument.column("a"), Argument.raw(inner), Argument.number(12)]
        )
        assert fragment.sql == "ST_DWithin(??, ST_Point(?, ?), ?)"
        assert fragment.bindings == ["a", 1, 2, 12]

    def test_nested_fragment_drops_alias(self, builder):
        inner = builder.build_call("ST_Centroid", [Argument.column("geom")]).with_alias("c")
        fragment = builder.build_call("ST_AsText", [Argument.raw(inner)])
        assert fragment.sql == "ST_AsText(ST_Centroid(??))"
        assert fragment.bindings == ["geom"]

    def test_plain_values_are_classified(self, builder):
        fragment = builder.build_call("ST_Intersects", ["geom", "POINT(1 1)"])
        assert fragment.sql == "ST_Intersects(??, 'POINT(1 1)')"
        assert fragment.bindings == ["geom"]

    def test_clause_element_argument(self, builder):
        fragment = builder.build_call("ST_Area", [func.ST_MakeEnvelope(0, 0, 1, 1)])
        assert fragment.sql == "ST_Area(ST_MakeEnvelope(?, ?, ?, ?))"
        assert fragment.bindings == [0, 0, 1, 1]

    def test_no_arguments(self, builder):
        assert builder.build_call("PostGIS_Version", []).sql == "PostGIS_Version()"

    def test_schema_qualified_name(self, builder):
        fragment = builder.build_call("public.ST_Area", [Argument.column("geom")])
        assert fragment.sql == "public.ST_Area(??)"

    @pytest.mark.parametrize("name", ["", "ST_Area(1); DROP", "1abc", "a b", None])
    def test_rejects_invalid_function_names(self, builder, name):
        with pytest.raises(InvalidArgument) as exc_info:
            builder.build_call(name, [])
        assert exc_info.value.error_code == ErrorCode.INVALID_IDENTIFIER

    def test_is_deterministic(self, builder):
        args = [Argument.column("geom"), Argument.number(10)]
        assert builder.build_call("ST_Buffer", args) == builder.build_call("ST_Buffer", args)


class TestBuildOperator:
    """Bounding-box operators."""

    def test_intersects(self, builder):
        fragment = builder.build_operator(
            BoundingBoxOperator.INTERSECTS, Argument.column("a"), Argument.column("b")
        )
        assert fragment.sql == "(?? && ??)"
        assert fragment.bindings == ["a", "b"]

    def test_operator_by_symbol(self, builder):
        fragment = builder.build_operator("~", "geom", "POINT(1 1)")
        assert fragment.sql == "(?? ~ 'POINT(1 1)')"

    def test_rejects_unknown_operator(self, builder):
        with pytest.raises(InvalidArgument, match="Unsupported operator"):
            builder.build_operator("; DROP", "a", "b")


class TestBuildCast:
    """Type casts."""

    def test_column_cast(self, builder):
        fragment = builder.build_cast(Argument.column("geom"), "geography")
        assert fragment.sql == "??::geography"
        assert fragment.bindings == ["geom"]

    def test_raw_cast_is_parenthesized(self, builder):
        inner = builder.build_call("ST_Point", [Argument.number(1), Argument.number(2)])
        fragment = builder.build_cast(inner, "geography")
        assert fragment.sql == "(ST_Point(?, ?))::geography"
        assert fragment.bindings == [1, 2]

    def test_rejects_invalid_type_name(self, builder):
        with pytest.raises(InvalidArgument):
            builder.build_cast("geom", "geography; DROP TABLE t")


class TestRaw:
    """Hand-written fragments."""

    def test_raw(self, builder):
        fragment = builder.raw("ST_Snap(??, ?, ?)", ["geom", "POINT(0 0)", 0.5])
        assert fragment.sql == "ST_Snap(??, ?, ?)"
        assert fragment.bindings == ["geom", "POINT(0 0)", 0.5]

    def test_raw_without_bindings(self, builder):
        assert builder.raw("now()").bindings == []

    def test_escaped_question_mark_needs_no_binding(self, builder):
        fragment = builder.raw("?? \\? ?", ["props", "k"])
        assert fragment.bindings == ["props", "k"]

    def test_rejects_binding_mismatch(self, builder):
        with pytest.raises(InvalidArgument, match="Expected 2 binding"):
            builder.raw("ST_Distance(?, ?)", [1])


class TestAlias:
    """Aliasing replaces, never stacks."""

    def test_with_alias(self, builder):
        fragment = builder.with_alias(builder.build_call("ST_Area", ["geom"]), "area")
        assert fragment.sql == "ST_Area(??) AS ??"
        assert fragment.bindings == ["geom", "area"]

    def test_realiasing_replaces(self, builder):
        fragment = builder.build_call("ST_Area", ["geom"])
        assert fragment.with_alias("a").with_alias("b") == fragment.with_alias("b")

    def test_alias_does_not_mutate(self, builder):
        fragment = builder.build_call("ST_Area", ["geom"])
        fragment.with_alias("a")
        assert fragment.alias is None

    @pytest.mark.parametrize("alias", ["", None, 3])
    def test_rejects_invalid_alias(self, builder, alias):
        with pytest.raises(InvalidArgument):
            builder.build_call("ST_Area", ["geom"]).with_alias(alias)

    def test_without_alias(self):
        fragment = SqlFragment(expression="x").with_alias("y")
        assert fragment.without_alias() == SqlFragment(expression="x")
