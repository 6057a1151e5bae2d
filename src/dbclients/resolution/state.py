"""Process-wide, one-shot initialization state.

``initialize()`` runs the startup chain once and memoizes both stage
Results for the rest of the process. Importing this module has no side
effects; reading state before ``initialize()`` is an error.
"""

from typing import Optional, TYPE_CHECKING

from dbclients.client import DataClients
from dbclients.common.exceptions import not_initialized_error
from dbclients.logging import get_logger
from dbclients.protocols.providers import SecretProvider
from dbclients.types.result import Result, is_success
from .clients import resolve_clients
from .secrets import resolve_secret_provider

if TYPE_CHECKING:
    from dbclients.secret_vault import FaultInjector
    from dbclients.settings import Settings

logger = get_logger(__name__)

# Singleton results
_secret_provider_result: Optional[Result[SecretProvider]] = None
_clients_result: Optional[Result[DataClients]] = None


async def initialize(
    settings: Optional['Settings'] = None,
    faults: Optional['FaultInjector'] = None,
) -> Result[DataClients]:
    """Run the startup chain once and return the client Result.
    
    Secret provider resolution fully completes before client resolution
    starts. Subsequent calls return the memoized Result without running
    either stage again.
    
    Args:
        settings: Application settings; the singleton is used if omitted
        faults: Optional fault injector for the simulated provider
        
    Returns:
        The memoized client resolution Result
    """
    global _secret_provider_result, _clients_result
    
    if _clients_result is not None:
        return _clients_result
    
    provider_result = await resolve_secret_provider(settings, faults)
    clients_result = await resolve_clients(provider_result, settings)
    
    _secret_provider_result = provider_result
    _clients_result = clients_result
    
    logger.info(
        "Initialization finished",
        extra={"success": is_success(clients_result)},
    )
    return clients_result


def get_resolved_secret_provider() -> Result[SecretProvider]:
    """Get the memoized secret provider Result.
    
    Raises:
        ClientInitError: With NOT_INITIALIZED code before ``initialize()``
    """
    if _secret_provider_result is None:
        raise not_initialized_error("resolved secret provider")
    return _secret_provider_result


def get_resolved_clients() -> Result[DataClients]:
    """Get the memoized client Result.
    
    Raises:
        ClientInitError: With NOT_INITIALIZED code before ``initialize()``
    """
    if _clients_result is None:
        raise not_initialized_error("resolved clients")
    return _clients_result


def is_initialized() -> bool:
    """Check whether ``initialize()`` has completed."""
    return _clients_result is not None


def reset() -> None:
    """Forget the memoized Results.
    
    This is primarily for testing purposes where each test needs a
    fresh startup chain.
    """
    global _secret_provider_result, _clients_result
    _secret_provider_result = None
    _clients_result = None
