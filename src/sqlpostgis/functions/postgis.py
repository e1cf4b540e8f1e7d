"""PostGIS operations facade.

:class:`PostGIS` exposes one callable per spatial operation. Catalog
operations are generated from :data:`CATALOG`; the operations whose SQL
is not a plain function call are defined in :func:`_special_operations`.

Example:
    >>> st = create_postgis()
    >>> st.as_text("geom").sql
    'ST_AsText(??) AS ??'
    >>> st.as_text("geom").to_sql()
    ('ST_AsText("geom") AS "geom"', [])
"""

import inspect
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional

from sqlpostgis.classifier import split_ewkt
from sqlpostgis.constants.sql import BoundingBoxOperator, SpatialType
from sqlpostgis.functions.catalog import CATALOG, FunctionSpec, ParamKind
from sqlpostgis.functions.registry import FunctionRegistry
from sqlpostgis.logging import get_logger
from sqlpostgis.query_builder import FragmentBuilder, create_builder
from sqlpostgis.types.argument import ABSENT, Argument, ArgumentKind
from sqlpostgis.types.fragment import SqlFragment

if TYPE_CHECKING:
    from sqlpostgis.settings import SpatialSettings

logger = get_logger(__name__)

ExtrasBuilder = Callable[[FragmentBuilder], Optional[Mapping[str, Callable]]]


def make_operation(
    name: str,
    spec: FunctionSpec,
    builder: FragmentBuilder,
    auto_alias: bool = True,
) -> Callable[..., SqlFragment]:
    """Create the callable for one catalog entry.

    The callable accepts the entry's parameters positionally or by
    keyword; optional parameters default to None, which leaves them out of
    the SQL call.

    Args:
        name: Python name of the operation
        spec: Catalog entry
        builder: Builder used to classify arguments and build the call
        auto_alias: Whether auto-aliasing is enabled at all

    Returns:
        Callable returning a SqlFragment
    """
    classifiers = {
        ParamKind.GEOMETRY: builder.classify,
        ParamKind.NUMBER: builder.classify_number,
        ParamKind.BOOLEAN: builder.classify_boolean,
        ParamKind.GEOJSON: builder.classify_geojson,
    }
    signature = inspect.Signature([
        inspect.Parameter(
            param.name,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            default=None if param.optional else inspect.Parameter.empty,
        )
        for param in spec.params
    ])

    def operation(*args: Any, **kwargs: Any) -> SqlFragment:
        try:
            bound = signature.bind(*args, **kwargs)
        except TypeError as e:
            raise TypeError(f"{name}() {e}") from None
        bound.apply_defaults()

        arguments: List[Argument] = []
        for param in spec.params:
            value = bound.arguments[param.name]
            if param.optional and value is None:
                arguments.append(ABSENT)
            else:
                arguments.append(classifiers[param.kind](value, param.name))

        fragment = builder.build_call(spec.sql_name, arguments)

        first = arguments[0]
        if auto_alias and spec.auto_alias and first.kind == ArgumentKind.COLUMN:
            fragment = fragment.with_alias(first.value.split(".")[-1])
        return fragment

    operation.__name__ = name
    operation.__qualname__ = name
    operation.__doc__ = spec.doc or f"Call {spec.sql_name}."
    operation.__signature__ = signature
    return operation


def _special_operations(builder: FragmentBuilder) -> Dict[str, Callable[..., SqlFragment]]:
    """Operations that are not a plain catalog function call."""

    def geom_from_text(wkt: Any, srid: Any = None) -> SqlFragment:
        """Geometry from WKT.

        An ``SRID=n;`` prefix is moved into the bound SRID argument unless
        srid is given explicitly.
        """
        argument = builder.classify(wkt, "wkt")
        if argument.kind == ArgumentKind.LITERAL:
            prefix_srid, plain = split_ewkt(argument.value)
            argument = Argument.literal(plain)
            if srid is None:
                srid = prefix_srid

        srid_argument = ABSENT if srid is None else builder.classify_number(srid, "srid")
        return builder.build_call("ST_GeomFromText", [argument, srid_argument])

    def bbox_intersects(geom1: Any, geom2: Any) -> SqlFragment:
        """Whether the 2D bounding boxes of two geometries intersect (``&&``)."""
        return builder.build_operator(
            BoundingBoxOperator.INTERSECTS,
            builder.classify(geom1, "geom1"),
            builder.classify(geom2, "geom2"),
        )

    def bbox_contained(geom1: Any, geom2: Any) -> SqlFragment:
        """Whether geom1's bounding box is contained by geom2's (``@``)."""
        return builder.build_operator(
            BoundingBoxOperator.CONTAINED,
            builder.classify(geom1, "geom1"),
            builder.classify(geom2, "geom2"),
        )

    def bbox_contains(geom1: Any, geom2: Any) -> SqlFragment:
        """Whether geom1's bounding box contains geom2's (``~``)."""
        return builder.build_operator(
            BoundingBoxOperator.CONTAINS,
            builder.classify(geom1, "geom1"),
            builder.classify(geom2, "geom2"),
        )

    def geography(geom: Any) -> SqlFragment:
        """Cast a geometry to geography."""
        return builder.build_cast(builder.classify(geom, "geom"), SpatialType.GEOGRAPHY.value)

    def geometry(geog: Any) -> SqlFragment:
        """Cast a geography to geometry."""
        return builder.build_cast(builder.classify(geog, "geog"), SpatialType.GEOMETRY.value)

    return {
        "geom_from_text": geom_from_text,
        "bbox_intersects": bbox_intersects,
        "bbox_contained": bbox_contained,
        "bbox_contains": bbox_contains,
        "geography": geography,
        "geometry": geometry,
    }


class PostGIS:
    """Facade exposing the registered spatial operations as attributes.

    Attributes:
        builder: Fragment builder shared by all operations
        registry: Registry the attributes resolve against

    Example:
        >>> st = PostGIS(FragmentBuilder())
        >>> st.make_point(1.5, 2.5).bindings
        [1.5, 2.5]
        >>> st.define_extras(lambda b: {"snap": lambda g: b.build_call("ST_Snap", [b.classify(g)])})
        >>> st.snap("geom").sql
        'ST_Snap(??)'
    """

    def __init__(self, builder: FragmentBuilder, auto_alias: bool = True):
        self.builder = builder
        self.registry = FunctionRegistry()

        for name, spec in CATALOG.items():
            self.registry.register(name, make_operation(name, spec, builder, auto_alias))
        for name, impl in _special_operations(builder).items():
            self.registry.register(name, impl)

    def define_extras(self, extras_builder: ExtrasBuilder) -> None:
        """Merge user-defined operations into this facade.

        Args:
            extras_builder: Called with the fragment builder; returns a
                mapping of operation name to callable, or None

        Raises:
            SpatialSQLError: REGISTRY_FROZEN if the facade is frozen
            TypeError: If the returned value is not a mapping
        """
        extras = extras_builder(self.builder)
        if extras is None:
            return
        if not isinstance(extras, Mapping):
            raise TypeError(
                f"Extras builder must return a mapping or None, got {type(extras).__name__}"
            )
        for name, impl in extras.items():
            self.registry.register(name, impl)
        logger.debug(f"Defined {len(extras)} extra function(s): {', '.join(extras)}")

    def freeze(self) -> None:
        self.registry.freeze()

    def names(self) -> List[str]:
        return self.registry.names()

    def __getattr__(self, name: str) -> Callable[..., SqlFragment]:
        # Only reached for names not found on the instance or class
        registry = self.__dict__.get("registry")
        if name.startswith("_") or registry is None or name not in registry:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return registry.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self.registry.names()))


def create_postgis(settings: Optional["SpatialSettings"] = None) -> PostGIS:
    """Create a PostGIS facade.

    Args:
        settings: Settings to use. Defaults to :func:`get_settings`.

    Returns:
        PostGIS facade with all built-in operations registered
    """
    from sqlpostgis.settings import get_settings

    builder = create_builder(settings)
    if settings is None:
        settings = get_settings()
    return PostGIS(builder, auto_alias=settings.auto_alias_columns)


_default_postgis: Optional[PostGIS] = None


def get_postgis() -> PostGIS:
    """Return the process-wide default facade, creating it on first use."""
    global _default_postgis
    if _default_postgis is None:
        _default_postgis = create_postgis()
    return _default_postgis
