"""Simulated secrets manager.

This module provides the SimulatedSecretsManager class which implements
the SecretProvider protocol with simulated latency and transient faults
in place of a real network-backed secrets service.
"""

from typing import TYPE_CHECKING

from dbclients.common.exceptions import secret_provider_init_error, secret_retrieval_error
from dbclients.constants.secrets import (
    PROVIDER_INIT_FAILURE_MESSAGE,
    SECRET_RETRIEVAL_FAILURE_TEMPLATE,
    SECRET_VALUE_PREFIX,
    SecretProviderType,
)
from dbclients.logging import get_logger
from .faults import FaultInjector

if TYPE_CHECKING:
    from dbclients.settings.secrets import SecretsManagerSettings

logger = get_logger(__name__)


class SimulatedSecretsManager:
    """Secrets manager with simulated latency and failures.
    
    Instances are obtained through :meth:`connect`, which models the
    slow and fallible initialization of a remote secrets service. Every
    secret resolves to a deterministic placeholder derived from its key.
    
    Attributes:
        settings: Secrets manager configuration (delays)
        faults: Fault injector driving latency and failures
    """
    
    name = SecretProviderType.SIMULATED.value
    
    def __init__(self, settings: 'SecretsManagerSettings', faults: FaultInjector):
        """Wrap an already-initialized connection.
        
        Use :meth:`connect` instead of calling this directly.
        """
        self.settings = settings
        self.faults = faults
    
    @classmethod
    async def connect(
        cls,
        settings: 'SecretsManagerSettings',
        faults: FaultInjector,
    ) -> "SimulatedSecretsManager":
        """Initialize the secrets manager.
        
        Waits for the configured setup delay, then may fail.
        
        Raises:
            SecretProviderInitError: When the simulated initialization fails
        """
        logger.debug(f"Connecting to secrets manager (delay={settings.setup_delay_seconds}s)")
        await faults.wait(settings.setup_delay_seconds)
        faults.maybe_fail(
            PROVIDER_INIT_FAILURE_MESSAGE,
            lambda message: secret_provider_init_error(message, provider=cls.name),
        )
        return cls(settings, faults)
    
    async def get_secret(self, key: str) -> str:
        """Retrieve a secret after the configured fetch delay.
        
        Args:
            key: Name of the secret
            
        Returns:
            The placeholder value ``secret:<key>``
            
        Raises:
            SecretRetrievalError: When the simulated retrieval fails
        """
        await self.faults.wait(self.settings.fetch_delay_seconds)
        self.faults.maybe_fail(
            SECRET_RETRIEVAL_FAILURE_TEMPLATE.format(key=key),
            lambda message: secret_retrieval_error(key, message),
        )
        return f"{SECRET_VALUE_PREFIX}{key}"
