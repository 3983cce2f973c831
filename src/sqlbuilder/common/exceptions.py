from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for sqlbuilder.

    Error codes categorize failures without a separate exception class per
    failure. Each category has its own prefix.

    Attributes:
        CONFIG_*: Configuration-related errors
        VALIDATION_*: Input validation errors
        DIALECT_*: Dialect resolution errors
        BUILD_*: Rendering errors
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_MISSING = "CONFIG_002"
    CONFIG_INVALID = "CONFIG_003"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_ARGUMENT = "VALIDATION_002"

    # Dialect errors
    DIALECT_NOT_SUPPORTED = "DIALECT_001"

    # Build errors
    BUILD_ERROR = "BUILD_001"


class QueryBuilderError(Exception):
    """Base exception for all sqlbuilder errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUILD_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from sqlbuilder.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
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

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "QueryBuilderError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for QueryBuilderError

        Returns:
            QueryBuilderError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
    **kwargs
) -> QueryBuilderError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key or builder field that caused the error
        error_code: One of the CONFIG_* codes
        **kwargs: Additional error details

    Returns:
        QueryBuilderError with a CONFIG_* code
    """
    details = dict(kwargs.get('details') or {})
    if config_key:
        details["config_key"] = config_key

    return QueryBuilderError(
        message=message,
        error_code=error_code,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> QueryBuilderError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value

    Returns:
        QueryBuilderError with VALIDATION_ERROR code
    """
    details = dict(kwargs.get('details') or {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return QueryBuilderError(
        message=message,
        error_code=ErrorCode.VALIDATION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def dialect_not_supported_error(
    dialect: Any,
    **kwargs
) -> QueryBuilderError:
    """Create a dialect not supported error.

    Args:
        dialect: Dialect value that could not be resolved
        **kwargs: Additional error details

    Returns:
        QueryBuilderError with DIALECT_NOT_SUPPORTED code
    """
    # Local import keeps this module free of package-level imports
    from sqlbuilder.constants import DialectType

    details = dict(kwargs.get('details') or {})
    details["dialect"] = str(dialect)
    details["supported"] = sorted({member.value for member in DialectType})

    return QueryBuilderError(
        message=f"Dialect '{dialect}' is not supported",
        error_code=ErrorCode.DIALECT_NOT_SUPPORTED,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def build_error(
    message: str,
    dialect: Optional[str] = None,
    table: Optional[str] = None,
    **kwargs
) -> QueryBuilderError:
    """Create a build error.

    Args:
        message: Error message
        dialect: Dialect in use when rendering failed
        table: Table the query targets

    Returns:
        QueryBuilderError with BUILD_ERROR code
    """
    details = dict(kwargs.get('details') or {})
    if dialect:
        details["dialect"] = dialect
    if table is not None:
        details["table"] = table

    return QueryBuilderError(
        message=message,
        error_code=ErrorCode.BUILD_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
