"""Data-access client handles."""

from .factory import ClientFactory
from .models import DataClient, DataClients, DataSources

__all__ = [
    "ClientFactory",
    "DataClient",
    "DataClients",
    "DataSources",
]
