"""Common exceptions for dbclients.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    ClientInitError and include structured error information.

    Exceptions are an internal signalling mechanism only. Every stage
    converts them to a ``Failure`` result at its boundary using
    ``get_error_message``.
"""

from dbclients.common.exceptions import (
    ClientInitError,
    ErrorCode,
    SecretProviderInitError,
    SecretRetrievalError,
    SimulatedFaultError,
    get_error_message,
    # Helper functions
    not_initialized_error,
    secret_provider_init_error,
    secret_retrieval_error,
    timeout_error,
)

__all__ = [
    # Base Exception and Error Codes
    "ClientInitError",
    "ErrorCode",
    "SecretProviderInitError",
    "SecretRetrievalError",
    "SimulatedFaultError",
    "get_error_message",
    # Helper functions
    "not_initialized_error",
    "secret_provider_init_error",
    "secret_retrieval_error",
    "timeout_error",
]
