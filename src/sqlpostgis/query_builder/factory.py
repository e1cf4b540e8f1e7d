"""Fragment builder factory.

Builders are configured from :class:`SpatialSettings`; callers that do not
pass settings get the environment-backed singleton.
"""

from typing import TYPE_CHECKING, Optional

from sqlpostgis.query_builder.base import FragmentBuilder
from sqlpostgis.query_builder.dialect import QueryLayer

if TYPE_CHECKING:
    from sqlpostgis.settings import SpatialSettings


def create_builder(settings: Optional["SpatialSettings"] = None) -> FragmentBuilder:
    """Create a fragment builder for the configured SQL dialect.

    Args:
        settings: Settings to use. Defaults to :func:`get_settings`.

    Returns:
        FragmentBuilder bound to a query layer for ``settings.dialect``

    Raises:
        SpatialSQLError: CONFIG_ERROR if the dialect is unknown

    Example:
        >>> builder = create_builder()
        >>> builder.layer.name
        'postgresql'
    """
    if settings is None:
        return FragmentBuilder(QueryLayer.default())
    return FragmentBuilder(QueryLayer(settings.dialect))
