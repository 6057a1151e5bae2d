from enum import Enum
from typing import Any, Dict, Optional

from dbclients.constants.secrets import (
    PROVIDER_INIT_FAILURE_MESSAGE,
    SECRET_RETRIEVAL_FAILURE_TEMPLATE,
    UNKNOWN_ERROR_MESSAGE,
)


class ErrorCode(Enum):
    """Standard error codes for dbclients initialization.

    This enum provides categorized error codes that can be used
    to identify error types without creating numerous exception classes.
    Each category has a specific prefix for easy identification.

    Attributes:
        STATE_*: Initialization order errors
        SECRET_*: Secret provider and retrieval errors
        TIMEOUT_*: Operations that exceeded their time budget
    """
    # Initialization state errors
    NOT_INITIALIZED = "STATE_001"

    # Secret errors
    SECRET_PROVIDER_INIT_ERROR = "SECRET_001"
    SECRET_RETRIEVAL_ERROR = "SECRET_002"
    SECRET_NOT_FOUND = "SECRET_003"
    SIMULATED_FAULT = "SECRET_004"

    # Timeout errors
    TIMEOUT_ERROR = "TIMEOUT_001"


class ClientInitError(Exception):
    """Base exception for all dbclients initialization errors.

    Errors are categorized by error code instead of a deep class
    hierarchy. They are raised inside a stage and converted to a
    ``Failure`` at the stage boundary; they never reach the caller
    of a stage.

    Attributes:
        message: Error message, without the error code prefix
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.SECRET_PROVIDER_INIT_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize dbclients error.

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
        from dbclients.logging import get_logger
        logger = get_logger(__name__)
        logger.debug(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None
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


class SimulatedFaultError(ClientInitError):
    """Fault raised by the fault injector when a draw lands in the failure window."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.SIMULATED_FAULT)
        super().__init__(message, **kwargs)


class SecretProviderInitError(ClientInitError):
    """The secret-lookup capability could not be constructed."""

    def __init__(self, message: str = PROVIDER_INIT_FAILURE_MESSAGE, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.SECRET_PROVIDER_INIT_ERROR)
        super().__init__(message, **kwargs)


class SecretRetrievalError(ClientInitError):
    """A specific secret lookup failed."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.SECRET_RETRIEVAL_ERROR)
        super().__init__(message, **kwargs)


def get_error_message(error: BaseException) -> str:
    """Extract the plain message carried by a fault.

    ``ClientInitError`` instances report their message without the
    error code prefix. Any other exception reports ``str(error)``. A
    fault without a message yields the generic fallback text.

    Args:
        error: The caught exception

    Returns:
        Human-readable failure message, never empty
    """
    if isinstance(error, ClientInitError):
        message = error.message
    else:
        message = str(error)
    return message or UNKNOWN_ERROR_MESSAGE


# Helper functions for common error scenarios
def secret_provider_init_error(
    message: str = PROVIDER_INIT_FAILURE_MESSAGE,
    provider: Optional[str] = None,
    **kwargs
) -> SecretProviderInitError:
    """Create a secret provider initialization error.

    Args:
        message: Error message
        provider: Name of the provider that failed to initialize
        **kwargs: Additional error details

    Returns:
        SecretProviderInitError with SECRET_PROVIDER_INIT_ERROR code
    """
    details = kwargs.pop('details', None) or {}
    if provider:
        details["provider"] = provider
    return SecretProviderInitError(message, details=details, **kwargs)


def secret_retrieval_error(
    key: str,
    message: Optional[str] = None,
    **kwargs
) -> SecretRetrievalError:
    """Create a secret retrieval error for ``key``.

    Args:
        key: Name of the secret that could not be retrieved
        message: Optional override for the default message
        **kwargs: Additional error details

    Returns:
        SecretRetrievalError with SECRET_RETRIEVAL_ERROR code
    """
    details = kwargs.pop('details', None) or {}
    details["secret_name"] = key
    return SecretRetrievalError(
        message or SECRET_RETRIEVAL_FAILURE_TEMPLATE.format(key=key),
        details=details,
        **kwargs
    )


def timeout_error(
    operation: str,
    timeout_seconds: float,
    **kwargs
) -> ClientInitError:
    """Create a timeout error for an operation that exceeded its budget."""
    details = kwargs.pop('details', None) or {}
    details.update({"operation": operation, "timeout_seconds": timeout_seconds})
    return ClientInitError(
        message=f"{operation} timed out after {timeout_seconds} seconds",
        error_code=ErrorCode.TIMEOUT_ERROR,
        details=details,
        **kwargs
    )


def not_initialized_error(name: str) -> ClientInitError:
    """Create an error for state read before ``initialize()`` ran."""
    return ClientInitError(
        message=f"{name} accessed before initialize() was awaited",
        error_code=ErrorCode.NOT_INITIALIZED,
        details={"state": name},
    )
