"""Common exceptions for sqlpostgis.

Exception Design:
    The exception system uses error codes for categorization. All errors
    inherit from SpatialSQLError and carry structured details. Only two
    error kinds reach callers during fragment construction:

    - InvalidArgument: wrong primitive type for a parameter
    - InvalidGeoJSON: malformed or non-conforming geometry input

    Every other classification path is total: unrecognised strings fall
    through to column references instead of failing.
"""

from sqlpostgis.common.exceptions import (
    SpatialSQLError,
    ErrorCode,
    InvalidArgument,
    InvalidGeoJSON,
    # Helper functions
    invalid_argument,
    invalid_geojson,
    invalid_identifier,
    registry_frozen_error,
    unknown_function_error,
    configuration_error,
)

__all__ = [
    # Base Exception and Error Codes
    "SpatialSQLError",
    "ErrorCode",
    "InvalidArgument",
    "InvalidGeoJSON",
    # Helper functions
    "invalid_argument",
    "invalid_geojson",
    "invalid_identifier",
    "registry_frozen_error",
    "unknown_function_error",
    "configuration_error",
]
