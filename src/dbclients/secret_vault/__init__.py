"""Secret vault package for resolving secrets from various providers.

This package provides implementations of the SecretProvider protocol,
allowing different providers (simulated secrets manager, static values)
to be used interchangeably through a common interface.
"""

from dbclients.protocols.providers import SecretProvider
from .factory import create_secret_provider
from .faults import FaultInjector, no_faults
from .simulated import SimulatedSecretsManager
from .static import StaticSecrets

__all__ = [
    "SecretProvider",
    "create_secret_provider",
    "FaultInjector",
    "no_faults",
    "SimulatedSecretsManager",
    "StaticSecrets",
]
