"""Constants module for dbclients.

This module contains all constant values and enumerations used throughout
the package. As the bottom layer, it has no dependencies on other dbclients
modules.

Organization:
    - client: Client handle configuration constants
    - secrets: Secret provider defaults and failure messages
"""

# Client constants
from dbclients.constants.client import (
    AccessMode,
    ErrorFormat,
)

# Secret constants
from dbclients.constants.secrets import (
    DEFAULT_FAILURE_WINDOW_HIGH,
    DEFAULT_FAILURE_WINDOW_LOW,
    DEFAULT_FETCH_DELAY_SECONDS,
    DEFAULT_SETUP_DELAY_SECONDS,
    PROVIDER_INIT_FAILURE_MESSAGE,
    READ_ONLY_URL_SECRET,
    READ_WRITE_URL_SECRET,
    SECRET_RETRIEVAL_FAILURE_TEMPLATE,
    SECRET_VALUE_PREFIX,
    SecretProviderType,
    UNKNOWN_ERROR_MESSAGE,
)

__all__ = [
    # Client
    "AccessMode",
    "ErrorFormat",
    # Secrets
    "SecretProviderType",
    "READ_WRITE_URL_SECRET",
    "READ_ONLY_URL_SECRET",
    "SECRET_VALUE_PREFIX",
    "DEFAULT_SETUP_DELAY_SECONDS",
    "DEFAULT_FETCH_DELAY_SECONDS",
    "DEFAULT_FAILURE_WINDOW_LOW",
    "DEFAULT_FAILURE_WINDOW_HIGH",
    "PROVIDER_INIT_FAILURE_MESSAGE",
    "SECRET_RETRIEVAL_FAILURE_TEMPLATE",
    "UNKNOWN_ERROR_MESSAGE",
]
