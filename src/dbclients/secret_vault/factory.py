"""Factory for creating secret providers.

This module provides the factory function that selects and initializes
the secret provider based on configuration and environment.
"""

from typing import Optional, TYPE_CHECKING

from dbclients.logging import get_logger
from dbclients.protocols.providers import SecretProvider
from dbclients.settings.main import is_test_mode
from .faults import FaultInjector
from .simulated import SimulatedSecretsManager
from .static import StaticSecrets

if TYPE_CHECKING:
    from dbclients.settings.secrets import SecretsManagerSettings

logger = get_logger(__name__)


async def create_secret_provider(
    settings: 'SecretsManagerSettings',
    faults: Optional[FaultInjector] = None,
) -> SecretProvider:
    """Create and initialize the configured secret provider.
    
    The static provider is used in test mode (DBCLIENTS_TEST_MODE=true) or
    when ``settings.provider`` is ``static``. Otherwise the simulated
    secrets manager is connected, which may fail.
    
    Args:
        settings: Secrets manager configuration
        faults: Optional fault injector; built from ``settings`` if omitted
        
    Returns:
        SecretProvider implementation (SimulatedSecretsManager or StaticSecrets)
        
    Raises:
        SecretProviderInitError: If the simulated initialization fails
        
    Example:
        >>> from dbclients.settings import SecretsManagerSettings
        >>> provider = await create_secret_provider(SecretsManagerSettings(provider="static"))
        >>> await provider.get_secret("readWriteUrl")
        'secret:readWriteUrl'
    """
    if is_test_mode() or settings.is_static:
        logger.info("Using static secret provider")
        return StaticSecrets(settings.static_values)
    
    logger.debug("Creating simulated secrets manager")
    return await SimulatedSecretsManager.connect(
        settings,
        faults or FaultInjector.from_settings(settings),
    )
