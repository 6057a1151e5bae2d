"""Settings for dbclients.

Configuration is read from environment variables (and an optional
``.env`` file) with pydantic-settings. Each domain has its own prefix:

    - SECRETS_*: secrets manager (delays, failure window, timeout)
    - CLIENT_*: client handles (error format, secret names)
"""

from .base import DBBaseSettings
from .client import ClientSettings
from .main import _Settings, get_settings, is_test_mode
from .secrets import SecretsManagerSettings

Settings = _Settings

__all__ = [
    "DBBaseSettings",
    "ClientSettings",
    "SecretsManagerSettings",
    "Settings",
    "get_settings",
    "is_test_mode",
]
