from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for sqlfrags.

    Rendering itself is total over well-typed fragment trees, so the codes
    cover the edges around it: configuration, dialect selection and objects
    that are not fragments at all.

    Attributes:
        CONFIG_*: Configuration-related errors (1xxx)
        VALIDATION_*: Input validation errors (2xxx)
        RENDER_*: Rendering errors (3xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"

    # Validation errors (2xxx)
    VALIDATION_ERROR = "VALIDATION_001"
    UNKNOWN_SYNTAX = "VALIDATION_002"

    # Rendering errors (3xxx)
    UNSUPPORTED_FRAGMENT = "RENDER_001"
    UNSUPPORTED_CONDITION = "RENDER_002"


class FragError(Exception):
    """Base exception for all sqlfrags errors.

    Uses error codes for categorization instead of a hierarchy of exception
    classes.

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
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from sqlfrags.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause if cause is not None else False,
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
    ) -> "FragError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for FragError

        Returns:
            FragError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> FragError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        FragError with CONFIG_ERROR code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return FragError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> FragError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        **kwargs: Additional error details (``error_code`` overrides the default)

    Returns:
        FragError with VALIDATION_ERROR code unless overridden
    """
    details = kwargs.get('details', {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    error_code = kwargs.get('error_code', ErrorCode.VALIDATION_ERROR)

    return FragError(
        message=message,
        error_code=error_code,
        details=details,
        **{k: v for k, v in kwargs.items() if k not in ['details', 'error_code']}
    )


def unsupported_fragment_error(
    value: Any,
    renderer: Optional[str] = None,
    **kwargs
) -> FragError:
    """Create an error for an object the renderer cannot serialize.

    Args:
        value: The offending object
        renderer: Name of the renderer that rejected it
        **kwargs: Additional error details (``error_code`` overrides the default)

    Returns:
        FragError with UNSUPPORTED_FRAGMENT code unless overridden
    """
    details = kwargs.get('details', {})
    details["value_type"] = type(value).__name__
    if renderer:
        details["renderer"] = renderer

    error_code = kwargs.get('error_code', ErrorCode.UNSUPPORTED_FRAGMENT)
    kind = "condition" if error_code == ErrorCode.UNSUPPORTED_CONDITION else "fragment"

    return FragError(
        message=f"Cannot render {type(value).__name__} as a {kind}: {value!r}",
        error_code=error_code,
        details=details,
        **{k: v for k, v in kwargs.items() if k not in ['details', 'error_code']}
    )
