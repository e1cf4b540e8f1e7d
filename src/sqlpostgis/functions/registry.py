"""Registry of named spatial operations."""

from typing import Callable, Dict, Iterator, List

from sqlpostgis.common.exceptions import registry_frozen_error, unknown_function_error
from sqlpostgis.logging import get_logger

logger = get_logger(__name__)


class FunctionRegistry:
    """Name to operation mapping, populated once then read-only.

    Later registrations under an existing name replace the earlier one, so
    extensions can override built-in operations. After :meth:`freeze` the
    registry rejects further registration.

    Example:
        >>> registry = FunctionRegistry()
        >>> registry.register("centroid", centroid)
        >>> registry.get("centroid") is centroid
        True
        >>> registry.freeze()
    """

    def __init__(self):
        self._functions: Dict[str, Callable] = {}
        self._frozen: bool = False

    def register(self, name: str, impl: Callable) -> None:
        """Register an operation.

        Raises:
            SpatialSQLError: REGISTRY_FROZEN if the registry is frozen
            TypeError: If impl is not callable
        """
        if self._frozen:
            raise registry_frozen_error(name)
        if not callable(impl):
            raise TypeError(f"Operation '{name}' must be callable, got {type(impl).__name__}")

        if name in self._functions:
            logger.debug(f"Overriding registered function: {name}")
        else:
            logger.debug(f"Registered function: {name}")
        self._functions[name] = impl

    def get(self, name: str) -> Callable:
        """Get a registered operation.

        Raises:
            SpatialSQLError: UNKNOWN_FUNCTION if name is not registered
        """
        try:
            return self._functions[name]
        except KeyError:
            raise unknown_function_error(name, self.names())

    def names(self) -> List[str]:
        return sorted(self._functions)

    def freeze(self) -> None:
        if not self._frozen:
            logger.debug(f"Function registry frozen with {len(self._functions)} functions")
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._functions)
