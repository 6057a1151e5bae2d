"""Secret provider constants.

Defaults for the secret names fetched during client resolution and the
messages reported by the simulated secrets manager.
"""

from enum import Enum


class SecretProviderType(str, Enum):
    """Secret provider implementation to resolve at startup.
    
    Values:
        SIMULATED: Latency- and fault-simulating secrets manager
        STATIC: In-memory values, for tests and local development
    """
    
    SIMULATED = "simulated"
    STATIC = "static"


READ_WRITE_URL_SECRET = "readWriteUrl"
READ_ONLY_URL_SECRET = "readOnlyUrl"

SECRET_VALUE_PREFIX = "secret:"

DEFAULT_SETUP_DELAY_SECONDS = 3.0
DEFAULT_FETCH_DELAY_SECONDS = 3.0

# Exclusive bounds; a draw of exactly 0.01 or 0.11 does not fail.
DEFAULT_FAILURE_WINDOW_LOW = 0.01
DEFAULT_FAILURE_WINDOW_HIGH = 0.11

PROVIDER_INIT_FAILURE_MESSAGE = "SecretsManager initialization timed out"
SECRET_RETRIEVAL_FAILURE_TEMPLATE = "Secret retrieval failed for {key}"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"
