"""Startup resolution stages.

Each stage returns a Result and never raises to its caller:

    resolve_secret_provider -> resolve_clients

``initialize()`` runs the chain once per process and memoizes it.
"""

from .clients import resolve_clients
from .secrets import resolve_secret_provider
from .state import (
    get_resolved_clients,
    get_resolved_secret_provider,
    initialize,
    is_initialized,
    reset,
)

__all__ = [
    "resolve_secret_provider",
    "resolve_clients",
    "initialize",
    "get_resolved_secret_provider",
    "get_resolved_clients",
    "is_initialized",
    "reset",
]
