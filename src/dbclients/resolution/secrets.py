"""Secret provider resolution stage.

First stage of the startup chain: initialize the secret provider and
express the outcome as a Result. This is the first point where raised
faults are converted to a ``Failure``; nothing raised while loading
settings or setting up the provider escapes this module.
"""

from typing import Optional, TYPE_CHECKING

from dbclients.common.exceptions import get_error_message
from dbclients.logging import get_logger, stage_context
from dbclients.protocols.providers import SecretProvider
from dbclients.secret_vault import FaultInjector, create_secret_provider
from dbclients.settings import get_settings
from dbclients.types.result import Failure, Result, Success
from dbclients.utils.decorators import traced, with_timeout

if TYPE_CHECKING:
    from dbclients.settings import Settings

logger = get_logger(__name__)

STAGE_NAME = "secret_provider"


@traced("dbclients.resolve_secret_provider")
async def resolve_secret_provider(
    settings: Optional['Settings'] = None,
    faults: Optional[FaultInjector] = None,
) -> Result[SecretProvider]:
    """Resolve the secret provider.
    
    Args:
        settings: Application settings; the singleton is used if omitted
        faults: Optional fault injector for the simulated provider
        
    Returns:
        ``Success(provider)``, or a ``Failure`` with exactly one message
        describing why initialization failed
    """
    with stage_context(STAGE_NAME):
        try:
            if settings is None:
                settings = get_settings()
            provider = await with_timeout(
                create_secret_provider(settings.secrets, faults),
                settings.secrets.timeout_seconds,
                operation="SecretsManager initialization",
            )
        except Exception as exc:
            message = get_error_message(exc)
            logger.warning(f"Secret provider resolution failed: {message}")
            return Failure.of(message)
        
        logger.info(f"Secret provider resolved: {type(provider).__name__}")
        return Success(provider)
