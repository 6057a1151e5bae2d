"""Client resolution stage.

Second stage of the startup chain. It consumes the Result of secret
provider resolution, fetches the read-write and read-only connection
strings and builds the two client handles.
"""

from typing import Optional, TYPE_CHECKING

from dbclients.client import ClientFactory, DataClients
from dbclients.common.exceptions import get_error_message
from dbclients.logging import get_logger, stage_context
from dbclients.protocols.providers import SecretProvider
from dbclients.settings import get_settings
from dbclients.types.result import Failure, Result, Success, is_failure
from dbclients.utils.decorators import traced, with_timeout

if TYPE_CHECKING:
    from dbclients.settings import Settings

logger = get_logger(__name__)

STAGE_NAME = "clients"


async def _fetch_secret(
    provider: SecretProvider,
    key: str,
    timeout_seconds: Optional[float],
) -> str:
    return await with_timeout(
        provider.get_secret(key),
        timeout_seconds,
        operation=f"Secret retrieval for {key}",
    )


@traced("dbclients.resolve_clients")
async def resolve_clients(
    provider_result: Result[SecretProvider],
    settings: Optional['Settings'] = None,
) -> Result[DataClients]:
    """Resolve the read and write client handles.
    
    A failed provider Result is forwarded verbatim and no secret is
    fetched. Otherwise the write secret is fetched before the read
    secret; if a fetch fails, later fetches are skipped and no handle
    is built.
    
    Args:
        provider_result: Outcome of secret provider resolution
        settings: Application settings; the singleton is used if omitted
        
    Returns:
        ``Success(DataClients)``, the upstream ``Failure`` messages
        unchanged, or a ``Failure`` with exactly one message for a
        failed fetch
    """
    with stage_context(STAGE_NAME):
        if is_failure(provider_result):
            logger.warning("Skipping client resolution: secret provider unavailable")
            return Failure(provider_result.messages)
        
        provider = provider_result.value
        
        try:
            if settings is None:
                settings = get_settings()
            client_settings = settings.client
            timeout_seconds = settings.secrets.timeout_seconds
            read_write_url = await _fetch_secret(
                provider, client_settings.read_write_url_secret_name, timeout_seconds
            )
            read_only_url = await _fetch_secret(
                provider, client_settings.read_only_url_secret_name, timeout_seconds
            )
        except Exception as exc:
            message = get_error_message(exc)
            logger.warning(f"Client resolution failed: {message}")
            return Failure.of(message)
        
        clients = ClientFactory.create_pair(
            read_write_url,
            read_only_url,
            client_settings.error_format,
        )
        logger.info("Read and write clients resolved")
        return Success(clients)
