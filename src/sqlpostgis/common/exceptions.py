from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(Enum):
    """Standard error codes for sqlpostgis.

    Categorized codes identify the error type without multiplying
    exception classes. Each category has its own prefix.

    Attributes:
        CONFIG_*: Configuration-related errors
        VALIDATION_*: Argument classification and validation errors
        REGISTRY_*: Function registry errors
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_ARGUMENT = "VALIDATION_002"
    INVALID_IDENTIFIER = "VALIDATION_004"
    INVALID_GEOJSON = "VALIDATION_005"

    # Registry errors
    REGISTRY_FROZEN = "REGISTRY_001"
    UNKNOWN_FUNCTION = "REGISTRY_002"


class SpatialSQLError(Exception):
    """Base exception for all sqlpostgis errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize sqlpostgis error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from sqlpostgis.logging import get_logger
        logger = get_logger(__name__)
        logger.debug(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


class InvalidArgument(SpatialSQLError):
    """A value has the wrong primitive type for the parameter it feeds.

    Raised before any fragment is produced; never retryable.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        error_code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
    ):
        super().__init__(
            message,
            error_code=error_code,
            details=details,
            cause=cause,
        )


class InvalidGeoJSON(SpatialSQLError):
    """Structured geometry input failed to parse or validate.

    Attributes:
        errors: Structural validation errors reported by the validator,
            one dict per failing location.
    """

    def __init__(
        self,
        message: str = "Invalid GeoJSON",
        errors: Optional[List[Dict[str, Any]]] = None,
        cause: Optional[Exception] = None,
    ):
        self.errors = errors or []
        super().__init__(
            message,
            error_code=ErrorCode.INVALID_GEOJSON,
            details={"errors": self.errors},
            cause=cause,
        )


# Helper functions for common error scenarios
def invalid_argument(
    expected: str,
    value: Any,
    parameter: Optional[str] = None,
    description: Optional[str] = None,
) -> InvalidArgument:
    """Create an invalid argument error.

    Args:
        expected: Name of the expected kind (``number``, ``boolean`` ...)
        value: The rejected value
        parameter: Parameter that received the value, when known
        description: Longer wording for the expected kind, defaults to expected

    Returns:
        InvalidArgument with the expected kind and the value's type in details
    """
    details: Dict[str, Any] = {
        "expected": expected,
        "received_type": type(value).__name__,
    }
    if parameter:
        details["parameter"] = parameter

    return InvalidArgument(
        f"Invalid {expected} provided, expected {description or expected}",
        details=details,
    )


def invalid_geojson(
    errors: Optional[List[Dict[str, Any]]] = None,
    cause: Optional[Exception] = None,
) -> InvalidGeoJSON:
    """Create an invalid GeoJSON error.

    Args:
        errors: Structural validation errors
        cause: The underlying parse or validation exception

    Returns:
        InvalidGeoJSON carrying the errors
    """
    return InvalidGeoJSON("Invalid GeoJSON", errors=errors, cause=cause)


def invalid_identifier(name: Any, identifier_type: str = "identifier") -> InvalidArgument:
    """Create an error for a name that cannot be spliced into SQL text.

    Args:
        name: The rejected name
        identifier_type: Kind of name for the message (``function``, ``type`` ...)

    Returns:
        InvalidArgument with INVALID_IDENTIFIER code
    """
    return InvalidArgument(
        f"Invalid {identifier_type} name: {name!r}",
        details={"identifier_type": identifier_type, "name": str(name)},
        error_code=ErrorCode.INVALID_IDENTIFIER,
    )


def registry_frozen_error(name: str) -> SpatialSQLError:
    """Create an error for a registration attempted after freeze.

    Args:
        name: Operation name that was being registered

    Returns:
        SpatialSQLError with REGISTRY_FROZEN code
    """
    return SpatialSQLError(
        message=f"Cannot register '{name}': function registry is frozen",
        error_code=ErrorCode.REGISTRY_FROZEN,
        details={"function": name},
    )


def unknown_function_error(name: str, available: List[str]) -> SpatialSQLError:
    """Create an error for a lookup of an unregistered operation.

    Args:
        name: Requested operation name
        available: Registered operation names

    Returns:
        SpatialSQLError with UNKNOWN_FUNCTION code
    """
    return SpatialSQLError(
        message=f"Unknown function: '{name}'",
        error_code=ErrorCode.UNKNOWN_FUNCTION,
        details={"function": name, "available": available},
    )


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> SpatialSQLError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        SpatialSQLError with CONFIG_ERROR code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return SpatialSQLError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
