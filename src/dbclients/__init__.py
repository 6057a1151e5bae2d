from dbclients.__version__ import __version__

from dbclients.types import Failure, Result, Success, is_failure, is_success

from dbclients.client import ClientFactory, DataClient, DataClients, DataSources
from dbclients.constants import ErrorFormat

from dbclients.resolution import (
    get_resolved_clients,
    get_resolved_secret_provider,
    initialize,
    resolve_clients,
    resolve_secret_provider,
)

from dbclients.secret_vault import (
    FaultInjector,
    SecretProvider,
    SimulatedSecretsManager,
    StaticSecrets,
    create_secret_provider,
)

from dbclients.common.exceptions import ClientInitError, ErrorCode


__all__ = [
    "__version__",
    
    # Result
    "Result",
    "Success",
    "Failure",
    "is_success",
    "is_failure",
    
    # Clients
    "ClientFactory",
    "DataClient",
    "DataClients",
    "DataSources",
    "ErrorFormat",
    
    # Stages
    "resolve_secret_provider",
    "resolve_clients",
    "initialize",
    "get_resolved_secret_provider",
    "get_resolved_clients",
    
    # Secret providers
    "SecretProvider",
    "FaultInjector",
    "SimulatedSecretsManager",
    "StaticSecrets",
    "create_secret_provider",
    
    # Exceptions (public API)
    "ClientInitError",
    "ErrorCode",
]
