from sqlbuilder.common.exceptions import (
    ErrorCode,
    QueryBuilderError,
    build_error,
    configuration_error,
    dialect_not_supported_error,
    validation_error,
)

__all__ = [
    "ErrorCode",
    "QueryBuilderError",
    "build_error",
    "configuration_error",
    "dialect_not_supported_error",
    "validation_error",
]
